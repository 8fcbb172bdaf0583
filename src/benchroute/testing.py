"""Testing helpers."""
import io

from click.testing import CliRunner
from werkzeug.test import Client

from benchroute.cli import ScriptInfo, cli
from benchroute.wrappers import Response


def make_test_environ(path="/", method="GET", query_string="", host="localhost",
                      port=80, scheme="http", errors_stream=None,
                      request_uri=None):
    """Build a minimal WSGI environ dict.

    ``path`` goes into ``PATH_INFO`` unchanged, so paths the werkzeug
    client would normalise (empty, ``//``) can be sent as-is. A
    ``request_uri`` sets the raw ``REQUEST_URI`` a server would pass on.
    """
    environ = {
        "REQUEST_METHOD": method,
        "PATH_INFO": path,
        "QUERY_STRING": query_string,
        "SERVER_NAME": host,
        "SERVER_PORT": str(port),
        "HTTP_HOST": f"{host}:{port}" if port != 80 else host,
        "wsgi.version": (1, 0),
        "wsgi.url_scheme": scheme,
        "wsgi.input": io.BytesIO(b""),
        "wsgi.errors": errors_stream if errors_stream is not None else io.StringIO(),
        "wsgi.multithread": False,
        "wsgi.multiprocess": False,
        "wsgi.run_once": False,
        "SCRIPT_NAME": "",
    }
    if request_uri is not None:
        environ["REQUEST_URI"] = request_uri
    return environ


def run_wsgi(app, environ):
    """Call a WSGI app and return ``(status, headers, body)``."""
    captured = {}

    def start_response(status, headers, exc_info=None):
        captured["status"] = status
        captured["headers"] = headers

    body = b"".join(app(environ, start_response))
    return captured["status"], captured["headers"], body


class BenchClient(Client):
    """A werkzeug test client that returns :class:`Response` objects."""

    def __init__(self, app, response_wrapper=Response, **kwargs):
        super().__init__(app, response_wrapper, **kwargs)

    def open(self, *args, **kwargs):
        # Pass the target through raw, as a server would in REQUEST_URI.
        if args and isinstance(args[0], str) and args[0].startswith("/"):
            overrides = dict(kwargs.get("environ_overrides") or {})
            overrides.setdefault("REQUEST_URI", args[0])
            kwargs["environ_overrides"] = overrides
        return super().open(*args, **kwargs)


class BenchCliRunner(CliRunner):
    """Invoke the ``benchroute`` commands against a given app."""

    def __init__(self, app, **kwargs):
        self.app = app
        super().__init__(**kwargs)

    def invoke(self, cli_group=None, args=None, **kwargs):
        if cli_group is None:
            cli_group = cli
        if "obj" not in kwargs:
            kwargs["obj"] = ScriptInfo(create_app=lambda: self.app)
        return super().invoke(cli_group, args, **kwargs)
