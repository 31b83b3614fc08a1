"""suitetrace CLI: versioning and traceability for test suite artifacts."""

import typer
from rich.console import Console

from suitetrace import __version__

from .commands import coverage, diff, export, impact, init, link, matrix, sample, unlink
from .logging import configure_logging
from .output import OutputContext, set_output_context


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"suitetrace {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="suitetrace",
    help="Traceability and coverage for requirements, viewpoints and test cases",
    no_args_is_help=True,
)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity (-v, -vv)",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress non-error output",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in JSON format for automation",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
) -> None:
    """suitetrace - requirement / viewpoint / test case traceability."""
    configure_logging(verbosity=verbose, quiet=quiet, no_color=no_color)
    set_output_context(OutputContext(console=Console(no_color=no_color), json_mode=json_output))


app.command()(init)
app.command()(sample)
app.command()(coverage)
app.command()(matrix)
app.command()(diff)
app.command()(link)
app.command()(unlink)
app.command()(impact)
app.command()(export)


if __name__ == "__main__":
    app()
