"""Command line interface."""
from __future__ import annotations

import typing as t

import click

from benchroute.workloads import benchmark

if t.TYPE_CHECKING:
    from benchroute.app import BenchApp


class ScriptInfo:
    """Lazily builds the application the commands operate on."""

    def __init__(self, create_app: t.Callable[[], BenchApp] | None = None) -> None:
        self.create_app = create_app
        self._loaded_app: BenchApp | None = None

    def load_app(self) -> BenchApp:
        if self._loaded_app is not None:
            return self._loaded_app
        if self.create_app is not None:
            app = self.create_app()
        else:
            from benchroute.app import create_app
            app = create_app()
        self._loaded_app = app
        return app


pass_script_info = click.make_pass_decorator(ScriptInfo, ensure=True)


@click.group(
    name="benchroute",
    help="Serve the routing demo, list its routes, or run the benchmark.",
    context_settings={"auto_envvar_prefix": "BENCHROUTE"},
)
@click.version_option(package_name="benchroute")
def cli() -> None:
    pass


@cli.command("run", short_help="Run a local development server.")
@click.option("--host", "-h", default="127.0.0.1", help="The interface to bind to.")
@click.option("--port", "-p", default=8000, type=int, help="The port to bind to.")
@click.option("--debug/--no-debug", default=None, help="Set debug mode.")
@pass_script_info
def run_command(info: ScriptInfo, host: str, port: int, debug: bool | None) -> None:
    app = info.load_app()
    app.run(host=host, port=port, debug=debug)


@cli.command("routes", short_help="Show the routes for the app.")
@pass_script_info
def routes_command(info: ScriptInfo) -> None:
    app = info.load_app()
    if not app.routes:
        click.echo("No routes were registered.")
        return

    rows = [["Path", "Handler"]]
    for path, handler in app.routes.items():
        name = getattr(handler, "__qualname__", None) or repr(handler)
        rows.append([path, name])

    widths = [max(len(row[i]) for row in rows) for i in range(2)]
    rows.insert(1, ["-" * w for w in widths])
    template = "  ".join(f"{{{i}:<{w}}}" for i, w in enumerate(widths))
    for row in rows:
        click.echo(template.format(*row).rstrip())


@cli.command("bench", short_help="Run the benchmark once.")
@click.option("--iterations", type=click.IntRange(min=0), default=None,
              help="Loop count for the CPU, memory and JSON workloads.")
@click.option("--file-lines", type=click.IntRange(min=0), default=None,
              help="Number of lines written to the scratch file.")
@click.option("--scratch-file", type=click.Path(dir_okay=False), default=None,
              help="Scratch file used by the file I/O workload.")
@pass_script_info
def bench_command(
    info: ScriptInfo,
    iterations: int | None,
    file_lines: int | None,
    scratch_file: str | None,
) -> None:
    app = info.load_app()
    config = app.config
    report = benchmark(
        iterations=config["BENCHMARK_ITERATIONS"] if iterations is None else iterations,
        file_lines=config["BENCHMARK_FILE_LINES"] if file_lines is None else file_lines,
        scratch_file=scratch_file or config["BENCHMARK_SCRATCH_FILE"],
        json_provider=app.json,
    )
    failure = report.failure
    if failure is not None:
        raise click.ClickException(
            f"Workload {failure.name!r} failed: {failure.error}"
        )
    click.echo(report.format(), nl=False)


def main() -> None:
    cli.main(prog_name="benchroute")
