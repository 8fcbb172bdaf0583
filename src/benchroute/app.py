"""The WSGI application: a fixed route table and its dispatcher."""
import os

from werkzeug.exceptions import HTTPException

from benchroute import handlers
from benchroute.config import Config
from benchroute.exceptions import BenchmarkError, RouteNotFound
from benchroute.json_provider import JSONProvider
from benchroute.logging import create_logger, request_environ_var
from benchroute.wrappers import Request, Response
from benchroute.workloads import (
    DEFAULT_FILE_LINES,
    DEFAULT_ITERATIONS,
    SCRATCH_FILE,
    benchmark,
)

_default_config = {
    "DEBUG": False,
    "TESTING": False,
    "PROPAGATE_EXCEPTIONS": None,
    "BENCHMARK_ITERATIONS": DEFAULT_ITERATIONS,
    "BENCHMARK_FILE_LINES": DEFAULT_FILE_LINES,
    "BENCHMARK_SCRATCH_FILE": SCRATCH_FILE,
}


class BenchApp:
    """Maps exact request paths to zero-argument handlers.

    Usage::

        app = BenchApp(__name__)
        app.run()

    The default table serves ``/``, ``/benchmark``, ``/hostinfo`` and
    ``/phpinfo``. Paths are compared verbatim, query string included;
    anything else is answered with a plain ``Error 404``.
    """

    config_class = Config
    request_class = Request
    response_class = Response
    json_provider_class = JSONProvider

    default_config = _default_config

    def __init__(self, import_name=None, routes=None, root_path=None):
        self.import_name = import_name
        self.config = self.config_class(root_path or os.getcwd(), self.default_config)
        self.json = self.json_provider_class()
        self._logger = None
        if routes is None:
            routes = self.default_routes()
        self.routes = {}
        for path, handler in dict(routes).items():
            self.add_route(path, handler)

    def default_routes(self):
        return {
            "/": handlers.home,
            "/benchmark": self.benchmark_view,
            "/hostinfo": handlers.hostinfo,
            "/phpinfo": handlers.interpreter_info,
        }

    @property
    def debug(self):
        return self.config["DEBUG"]

    @debug.setter
    def debug(self, value):
        self.config["DEBUG"] = value

    @property
    def testing(self):
        return self.config["TESTING"]

    @testing.setter
    def testing(self, value):
        self.config["TESTING"] = value

    @property
    def logger(self):
        if self._logger is None:
            self._logger = create_logger(self)
        return self._logger

    def add_route(self, path, handler):
        """Register ``handler`` for the exact request path ``path``."""
        if not callable(handler):
            raise TypeError(f"Handler for {path!r} must be callable.")
        self.routes[path] = handler

    def route(self, path):
        """Decorator form of :meth:`add_route`."""
        def decorator(f):
            self.add_route(path, f)
            return f
        return decorator

    def dispatch(self, path):
        """Call the one handler registered for ``path`` and return its body.

        Raises :class:`RouteNotFound` when no route matches exactly.
        """
        handler = self.routes.get(path)
        if handler is None:
            self.logger.debug("No route for %r", path)
            raise RouteNotFound(path)
        return handler()

    def benchmark_view(self, pdo=None):
        report = benchmark(
            pdo,
            iterations=self.config["BENCHMARK_ITERATIONS"],
            file_lines=self.config["BENCHMARK_FILE_LINES"],
            scratch_file=self.config["BENCHMARK_SCRATCH_FILE"],
            json_provider=self.json,
        )
        failure = report.failure
        if failure is not None:
            raise BenchmarkError(failure) from failure.error
        return self.response_class(report.format(), mimetype="text/plain")

    def make_response(self, rv):
        if isinstance(rv, self.response_class):
            return rv
        if rv is None:
            rv = ""
        return self.response_class(rv)

    def log_exception(self, request, exc):
        self.logger.error(
            "Exception on %s [%s]", request.request_uri, request.method,
            exc_info=exc,
        )

    def _should_propagate(self):
        if self.testing:
            return True
        prop = self.config.get("PROPAGATE_EXCEPTIONS")
        if prop is not None:
            return prop
        return self.debug

    def wsgi_app(self, environ, start_response):
        """The actual WSGI application."""
        request = self.request_class(environ)
        token = request_environ_var.set(environ)
        try:
            try:
                response = self.make_response(self.dispatch(request.request_uri))
            except HTTPException as exc:
                response = exc
            except Exception as exc:
                self.log_exception(request, exc)
                if self._should_propagate():
                    raise
                response = self.response_class(
                    "Internal Server Error", status=500, mimetype="text/plain"
                )
            return response(environ, start_response)
        finally:
            request_environ_var.reset(token)

    def __call__(self, environ, start_response):
        """WSGI interface."""
        return self.wsgi_app(environ, start_response)

    def test_client(self, **kwargs):
        from benchroute.testing import BenchClient
        return BenchClient(self, **kwargs)

    def test_cli_runner(self, **kwargs):
        from benchroute.testing import BenchCliRunner
        return BenchCliRunner(self, **kwargs)

    def run(self, host="127.0.0.1", port=8000, debug=None, **kwargs):
        """Run the development server."""
        if debug is not None:
            self.debug = debug
        from werkzeug.serving import run_simple
        kwargs.setdefault("use_debugger", False)
        kwargs.setdefault("use_reloader", self.debug)
        run_simple(host, port, self, **kwargs)


def create_app(config=None):
    """Build an app with settings from ``BENCHROUTE_*`` env vars and ``config``."""
    app = BenchApp("benchroute")
    app.config.from_envvar("BENCHROUTE_SETTINGS", silent=True)
    app.config.from_prefixed_env()
    if config is not None:
        app.config.from_mapping(config)
    return app
