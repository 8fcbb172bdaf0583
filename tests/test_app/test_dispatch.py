"""Tests for the route table and the dispatcher."""
import pytest

from benchroute import BenchApp, RouteNotFound
from benchroute import handlers

NAMED_PATHS = ["/", "/benchmark", "/hostinfo", "/phpinfo"]


def _recording_app():
    calls = []

    def make_handler(path):
        def handler():
            calls.append(path)
            return f"handled {path}"
        return handler

    app = BenchApp(routes={path: make_handler(path) for path in NAMED_PATHS})
    return app, calls


class TestDefaultRoutes:
    def test_route_set(self):
        app = BenchApp()
        assert list(app.routes) == NAMED_PATHS

    def test_handlers(self):
        app = BenchApp()
        assert app.routes["/"] is handlers.home
        assert app.routes["/hostinfo"] is handlers.hostinfo
        assert app.routes["/phpinfo"] is handlers.interpreter_info
        assert app.routes["/benchmark"] == app.benchmark_view

    def test_routes_not_shared_between_apps(self):
        first = BenchApp()
        second = BenchApp()
        first.add_route("/extra", handlers.home)
        assert "/extra" not in second.routes


class TestDispatch:
    @pytest.mark.parametrize("path", NAMED_PATHS)
    def test_exactly_one_handler(self, path):
        app, calls = _recording_app()
        assert app.dispatch(path) == f"handled {path}"
        assert calls == [path]

    @pytest.mark.parametrize("path", [
        "",
        "/benchmark/",
        "/benchmark?x=1",
        "/Benchmark",
        "/HOSTINFO",
        "//",
        "/phpinfo.php",
        "/bench",
        " /",
    ])
    def test_unknown_path(self, path):
        app, calls = _recording_app()
        with pytest.raises(RouteNotFound) as exc_info:
            app.dispatch(path)
        assert exc_info.value.code == 404
        assert exc_info.value.path == path
        assert calls == []

    def test_handlers_called_without_arguments(self):
        app = BenchApp(routes={})
        seen = []

        @app.route("/")
        def index(*args, **kwargs):
            seen.append((args, kwargs))
            return "ok"

        app.dispatch("/")
        assert seen == [((), {})]

    def test_home(self):
        assert BenchApp().dispatch("/") == "Welcome"


class TestRegistration:
    def test_route_decorator_returns_function(self):
        app = BenchApp(routes={})

        @app.route("/x")
        def x():
            return "x"

        assert x() == "x"
        assert app.routes == {"/x": x}

    def test_add_route_replaces(self):
        app = BenchApp()
        app.add_route("/", lambda: "replaced")
        assert app.dispatch("/") == "replaced"

    def test_non_callable_rejected(self):
        app = BenchApp(routes={})
        with pytest.raises(TypeError):
            app.add_route("/", "not a handler")
