"""Exceptions raised while dispatching a request."""
from werkzeug.exceptions import NotFound


class RouteNotFound(NotFound):
    """No route matches the request path.

    Renders as a bare ``Error 404`` plain-text body with status 404.
    """

    body = "Error 404"

    def __init__(self, path=None):
        super().__init__(description=f"No route for {path!r}.")
        self.path = path

    def get_body(self, environ=None, scope=None):
        return self.body

    def get_headers(self, environ=None, scope=None):
        return [("Content-Type", "text/plain; charset=utf-8")]


class BenchmarkError(Exception):
    """A benchmark workload failed and the run was aborted."""

    def __init__(self, result):
        self.result = result
        super().__init__(f"Workload {result.name!r} failed: {result.error}")
