"""Shared test fixtures for benchroute."""
import pytest

from benchroute import BenchApp


@pytest.fixture
def app(tmp_path):
    app = BenchApp("benchroute.tests")
    app.config.from_mapping(
        TESTING=True,
        BENCHMARK_ITERATIONS=1000,
        BENCHMARK_FILE_LINES=10,
        BENCHMARK_SCRATCH_FILE=str(tmp_path / "benchmark_test.txt"),
    )
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def runner(app):
    return app.test_cli_runner()
