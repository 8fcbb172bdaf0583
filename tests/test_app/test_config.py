"""Tests for Config and app.config integration."""
import pytest

from benchroute import BenchApp, create_app
from benchroute.config import Config


class TestConfigBasic:
    def test_config_is_dict(self):
        assert isinstance(Config(), dict)

    def test_config_with_defaults(self):
        c = Config({"DEBUG": True, "SECRET": "abc"})
        assert c["DEBUG"] is True
        assert c["SECRET"] == "abc"

    def test_root_path_and_defaults(self, tmp_path):
        c = Config(tmp_path, {"A": 1})
        assert c.root_path == str(tmp_path)
        assert c["A"] == 1

    def test_config_repr(self):
        r = repr(Config({"DEBUG": True}))
        assert r.startswith("<Config")
        assert "DEBUG" in r


class TestConfigLoaders:
    def test_from_mapping(self):
        c = Config()
        assert c.from_mapping({"A": 1}, B=2) is True
        assert c == {"A": 1, "B": 2}

    def test_from_iterable_of_pairs(self):
        c = Config()
        c.from_mapping([("X", 10), ("Y", 20)])
        assert c["X"] == 10
        assert c["Y"] == 20

    def test_from_object_uppercase_only(self):
        class Settings:
            BENCHMARK_ITERATIONS = 5
            lower = "ignored"

        c = Config()
        c.from_object(Settings)
        assert c == {"BENCHMARK_ITERATIONS": 5}

    def test_from_pyfile(self, tmp_path):
        (tmp_path / "settings.py").write_text(
            "BENCHMARK_FILE_LINES = 7\nhelper = 1\n"
        )
        c = Config(tmp_path)
        assert c.from_pyfile("settings.py") is True
        assert c == {"BENCHMARK_FILE_LINES": 7}

    def test_from_pyfile_missing(self, tmp_path):
        c = Config(tmp_path)
        assert c.from_pyfile("nope.py", silent=True) is False
        with pytest.raises(OSError):
            c.from_pyfile("nope.py")

    def test_from_envvar(self, tmp_path, monkeypatch):
        path = tmp_path / "settings.py"
        path.write_text("DEBUG = True\n")
        monkeypatch.setenv("BENCH_SETTINGS", str(path))
        c = Config()
        assert c.from_envvar("BENCH_SETTINGS") is True
        assert c["DEBUG"] is True

    def test_from_envvar_unset(self, monkeypatch):
        monkeypatch.delenv("BENCH_SETTINGS", raising=False)
        c = Config()
        assert c.from_envvar("BENCH_SETTINGS", silent=True) is False
        with pytest.raises(RuntimeError):
            c.from_envvar("BENCH_SETTINGS")

    def test_from_prefixed_env(self, monkeypatch):
        monkeypatch.setenv("BENCHROUTE_BENCHMARK_ITERATIONS", "250")
        monkeypatch.setenv("BENCHROUTE_BENCHMARK_SCRATCH_FILE", "scratch.txt")
        monkeypatch.setenv("BENCHROUTE_NESTED__KEY", "true")
        c = Config()
        c.from_prefixed_env()
        assert c["BENCHMARK_ITERATIONS"] == 250
        assert c["BENCHMARK_SCRATCH_FILE"] == "scratch.txt"
        assert c["NESTED"] == {"KEY": True}

    def test_get_namespace(self):
        c = Config({"BENCHMARK_ITERATIONS": 1, "BENCHMARK_FILE_LINES": 2, "DEBUG": 3})
        assert c.get_namespace("BENCHMARK_") == {"iterations": 1, "file_lines": 2}


class TestAppConfig:
    def test_defaults(self):
        app = BenchApp()
        assert app.config["BENCHMARK_ITERATIONS"] == 1000000
        assert app.config["BENCHMARK_FILE_LINES"] == 100000
        assert app.config["BENCHMARK_SCRATCH_FILE"] == "benchmark_test.txt"
        assert app.debug is False
        assert app.testing is False

    def test_defaults_not_shared(self):
        BenchApp().config["DEBUG"] = True
        assert BenchApp().config["DEBUG"] is False

    def test_create_app_reads_env(self, monkeypatch):
        monkeypatch.delenv("BENCHROUTE_SETTINGS", raising=False)
        monkeypatch.setenv("BENCHROUTE_BENCHMARK_FILE_LINES", "3")
        app = create_app({"TESTING": True})
        assert app.config["BENCHMARK_FILE_LINES"] == 3
        assert app.testing is True
