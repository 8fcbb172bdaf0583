"""Application configuration."""
import os


class Config(dict):
    """A dict subclass holding application settings.

    Supports loading from Python objects, mappings, files and environment
    variables. Keys are uppercase strings by convention.
    """

    def __init__(self, root_path=None, defaults=None):
        if defaults is None and root_path is not None and not isinstance(
            root_path, (str, bytes, os.PathLike)
        ):
            defaults = root_path
            root_path = None
        self.root_path = os.fspath(root_path) if root_path else os.getcwd()
        super().__init__(defaults or {})

    def from_mapping(self, mapping=None, **kwargs):
        """Update config from a mapping, an iterable of pairs, or kwargs."""
        if mapping is not None:
            if hasattr(mapping, "items"):
                for key, value in mapping.items():
                    self[key] = value
            else:
                for key, value in mapping:
                    self[key] = value
        for key, value in kwargs.items():
            self[key] = value
        return True

    def from_object(self, obj):
        """Update config from an object's uppercase attributes.

        ``obj`` may be a module, a class, any object, or a dotted import
        string naming one of those.
        """
        if isinstance(obj, str):
            import importlib
            obj = importlib.import_module(obj)
        for key in dir(obj):
            if key.isupper():
                self[key] = getattr(obj, key)
        return True

    def from_envvar(self, variable_name, silent=False):
        """Load config from the file named by an environment variable.

        Returns True on success, False if ``silent`` and the variable is
        not set.
        """
        rv = os.environ.get(variable_name)
        if not rv:
            if silent:
                return False
            raise RuntimeError(
                f"The environment variable {variable_name!r} is not set and "
                "as such configuration could not be loaded. Set this variable "
                "and make it point to a configuration file."
            )
        return self.from_pyfile(rv, silent=silent)

    def from_pyfile(self, filename, silent=False):
        """Update config from the uppercase names defined in a Python file.

        Relative paths are resolved against ``root_path``.
        """
        filename = os.fspath(filename)
        if not os.path.isabs(filename):
            filename = os.path.join(self.root_path, filename)
        try:
            d = {"__file__": filename, "__name__": "__config__"}
            with open(filename, "rb") as f:
                exec(compile(f.read(), filename, "exec"), d)  # noqa: S102
        except FileNotFoundError:
            if silent:
                return False
            raise OSError(
                f"[Errno 2] Unable to load configuration file"
                f" (No such file or directory): {filename!r}"
            )
        for key, value in d.items():
            if key.isupper():
                self[key] = value
        return True

    def from_prefixed_env(self, prefix="BENCHROUTE", loads=None):
        """Update config from environment variables with the given prefix.

        ``BENCHROUTE_BENCHMARK_ITERATIONS=1000`` sets
        ``config["BENCHMARK_ITERATIONS"] = 1000``. Values go through
        ``loads`` (default ``json.loads``); the raw string is kept when
        that fails. A double underscore in the key sets a nested dict item.
        """
        import json as _json
        if loads is None:
            loads = _json.loads
        prefix = prefix + "_"
        plen = len(prefix)
        for key in sorted(os.environ):
            if not key.startswith(prefix):
                continue
            value = os.environ[key]
            config_key = key[plen:]
            try:
                value = loads(value)
            except ValueError:
                pass
            if "__" in config_key:
                parts = config_key.split("__")
                current = self
                for part in parts[:-1]:
                    if part not in current or not isinstance(current[part], dict):
                        current[part] = {}
                    current = current[part]
                current[parts[-1]] = value
            else:
                self[config_key] = value
        return True

    def get_namespace(self, namespace, lowercase=True, trim_namespace=True):
        """Return the config keys that start with ``namespace`` as a dict."""
        result = {}
        for key, value in self.items():
            if not key.startswith(namespace):
                continue
            if trim_namespace:
                key = key[len(namespace):]
            if lowercase:
                key = key.lower()
            result[key] = value
        return result

    def __repr__(self):
        return f"<Config {dict.__repr__(self)}>"
