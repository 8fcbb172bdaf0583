"""benchroute: a fixed-path request dispatcher with a synthetic benchmark page."""

from benchroute.app import BenchApp, create_app
from benchroute.workloads import BenchmarkReport, WorkloadResult, benchmark
from benchroute.config import Config
from benchroute.exceptions import BenchmarkError, RouteNotFound
from benchroute.wrappers import Request, Response

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "BenchApp",
    "create_app",
    "benchmark",
    "BenchmarkReport",
    "WorkloadResult",
    "Config",
    "BenchmarkError",
    "RouteNotFound",
    "Request",
    "Response",
]
