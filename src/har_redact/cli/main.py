"""Typer application behind the har-redact command.

Two commands share one set of policy options (--reject, --keep, --policy):
``filter`` redacts keys in any JSON document and ``response`` turns a
request/response exchange file into a redacted HAR response object.
"""

from __future__ import annotations

try:
    import typer
except ImportError as e:
    raise ImportError("CLI dependencies not installed. Install with: pip install har-redact[cli]") from e

from har_redact.cli.filter import filter_json
from har_redact.cli.response import response

app = typer.Typer(
    name="har-redact",
    help="Serialize HTTP exchanges to HAR with redaction.",
    no_args_is_help=True,
)

app.command(name="filter", help="Redact keys in a JSON document")(filter_json)
app.command()(response)


def version_callback(value: bool) -> None:
    """Echo the installed har-redact version when --version is given."""
    if value:
        from har_redact import __version__

        typer.echo(f"har-redact {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    r"""Serialize HTTP exchanges to HAR with redaction.

    \b
    Examples:
        har-redact filter payload.json --reject password
        har-redact response exchange.json --policy policy.json
    """


if __name__ == "__main__":
    app()
