"""Filter command for har-redact CLI."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from har_redact.cli.options import (
    KeepOption,
    OutputOption,
    PolicyOption,
    RejectOption,
    build_policy,
    read_json_input,
    write_json_output,
)


def filter_json(
    input_file: Annotated[
        Path,
        typer.Argument(help="JSON file to filter"),
    ],
    reject: RejectOption = None,
    keep: KeepOption = None,
    policy: PolicyOption = None,
    output: OutputOption = None,
) -> None:
    """Redact keys in a JSON document.

    Every object key named by --reject (at any depth) has its value replaced
    by the redaction marker, unless it is also named by --keep.

    Example:
        har-redact filter payload.json --reject password --reject token
        har-redact filter payload.json --policy policy.json -o clean.json
    """
    from har_redact.filtering import filter_value

    filter_policy = build_policy(policy, reject, keep)
    data = read_json_input(input_file)
    write_json_output(filter_value(data, filter_policy), output)
