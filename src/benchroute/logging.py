"""Logging helpers."""
import io
import logging
import sys
from contextvars import ContextVar

#: WSGI environ of the request currently being dispatched, if any.
request_environ_var = ContextVar("benchroute.request_environ")


class _WSGIErrorsStream:
    """Write to the current request's ``wsgi.errors``, or stderr outside one."""

    def _get_current_object(self):
        try:
            return request_environ_var.get()["wsgi.errors"]
        except (LookupError, KeyError):
            return sys.stderr

    def write(self, data):
        stream = self._get_current_object()
        if isinstance(stream, io.BytesIO) and isinstance(data, str):
            data = data.encode("utf-8")
        return stream.write(data)

    def flush(self):
        return self._get_current_object().flush()


wsgi_errors_stream = _WSGIErrorsStream()

default_handler = logging.StreamHandler(wsgi_errors_stream)
default_handler.setFormatter(
    logging.Formatter("[%(asctime)s] %(levelname)s in %(module)s: %(message)s")
)


def has_level_handler(logger):
    """Check whether a handler in the logger's chain handles its level."""
    level = logger.getEffectiveLevel()
    current = logger
    while current:
        if any(handler.level <= level for handler in current.handlers):
            return True
        if not current.propagate:
            break
        current = current.parent
    return False


def create_logger(app):
    logger = logging.getLogger(app.import_name or "benchroute")
    if app.debug and not logger.level:
        logger.setLevel(logging.DEBUG)
    if not has_level_handler(logger):
        logger.addHandler(default_handler)
    return logger
