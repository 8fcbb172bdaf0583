"""Request/Response wrappers."""
from werkzeug.utils import cached_property
from werkzeug.wrappers import Request as _Request
from werkzeug.wrappers import Response as _Response
from werkzeug.wsgi import get_path_info


class Request(_Request):
    @cached_property
    def request_uri(self):
        """The request target as the client sent it, query string included.

        Taken from the server's raw ``REQUEST_URI`` (or gunicorn's
        ``RAW_URI``), so percent escapes, repeated slashes and a bare
        trailing ``?`` are kept. Servers that put only the path there get
        ``?QUERY_STRING`` appended. Without either key the target is
        rebuilt from ``PATH_INFO``.
        """
        environ = self.environ
        query = environ.get("QUERY_STRING", "")
        uri = environ.get("REQUEST_URI") or environ.get("RAW_URI")
        if uri:
            if query and "?" not in uri:
                uri = f"{uri}?{query}"
            return uri
        uri = get_path_info(environ) or "/"
        if query:
            uri = f"{uri}?{query}"
        return uri


class Response(_Response):
    default_mimetype = "text/html"
