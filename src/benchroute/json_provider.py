"""JSON encoding used by the benchmark's encode/decode workload."""
import json


class JSONProvider:
    """Thin wrapper over :mod:`json`; mappings keep their insertion order."""

    def dumps(self, obj, **kwargs):
        return json.dumps(obj, **kwargs)

    def loads(self, s, **kwargs):
        return json.loads(s, **kwargs)
