"""Shared options and helpers for har-redact CLI commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any

import typer

from har_redact.filtering import FilterPolicy, PolicyLoadError, load_filter_policy

RejectOption = Annotated[
    list[str] | None,
    typer.Option("--reject", "-r", help="Key name to redact (repeatable)"),
]
KeepOption = Annotated[
    list[str] | None,
    typer.Option("--keep", "-k", help="Key name never to redact (repeatable)"),
]
PolicyOption = Annotated[
    Path | None,
    typer.Option("--policy", "-p", help="Filter policy JSON file"),
]
OutputOption = Annotated[
    Path | None,
    typer.Option("--output", "-o", help="Output file (default: stdout)"),
]


def build_policy(policy_file: Path | None, reject: list[str] | None, keep: list[str] | None) -> FilterPolicy:
    """Build a FilterPolicy from CLI options, exiting on load errors."""
    try:
        return load_filter_policy(policy_file, reject=reject, keep=keep)
    except PolicyLoadError as e:
        typer.echo(f"Error: Failed to load policy: {e}", err=True)
        raise typer.Exit(1) from None


def read_json_input(input_file: Path) -> Any:
    """Read a JSON document, exiting with a message on failure."""
    if not input_file.exists():
        typer.echo(f"Error: File not found: {input_file}", err=True)
        raise typer.Exit(1)

    try:
        with open(input_file, encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        typer.echo(f"Error: Invalid JSON in {input_file}: {e.msg} at line {e.lineno}", err=True)
        raise typer.Exit(1) from None
    except PermissionError as e:
        typer.echo(f"Error: Permission denied: {e.filename}", err=True)
        raise typer.Exit(1) from None
    except OSError as e:
        typer.echo(f"Error: I/O error: {e}", err=True)
        raise typer.Exit(1) from None


def write_json_output(data: Any, output: Path | None) -> None:
    """Print JSON to stdout or write it to a file."""
    text = json.dumps(data, indent=2, ensure_ascii=False)
    if output is None:
        typer.echo(text)
        return

    try:
        output.write_text(text + "\n", encoding="utf-8")
    except OSError as e:
        typer.echo(f"Error: I/O error: {e}", err=True)
        raise typer.Exit(1) from None
    typer.echo(f"Written: {output}", err=True)
