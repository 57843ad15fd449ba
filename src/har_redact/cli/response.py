"""Response command for har-redact CLI."""

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


def response(
    exchange_file: Annotated[
        Path,
        typer.Argument(help="JSON file describing the request/response exchange"),
    ],
    reject: RejectOption = None,
    keep: KeepOption = None,
    policy: PolicyOption = None,
    output: OutputOption = None,
) -> None:
    """Serialize an exchange into a redacted HAR response object.

    The exchange file holds a "request" object (httpVersion, cookies) and a
    "response" object (status, headers, contentType, contentLength,
    location, body).

    Example:
        har-redact response exchange.json --reject Set-Cookie --reject token
    """
    from har_redact.har import HttpRequest, HttpResponse, ResponseSerializer

    filter_policy = build_policy(policy, reject, keep)
    exchange = read_json_input(exchange_file)

    if not isinstance(exchange, dict) or not isinstance(exchange.get("response"), dict):
        typer.echo("Error: Exchange file must contain a 'response' object", err=True)
        raise typer.Exit(1)

    raw_request = exchange.get("request")
    if raw_request is None:
        raw_request = {}
    elif not isinstance(raw_request, dict):
        typer.echo("Error: Exchange 'request' must be an object", err=True)
        raise typer.Exit(1)

    try:
        request = HttpRequest.from_dict(raw_request)
        http_response = HttpResponse.from_dict(exchange["response"])
    except (KeyError, IndexError, TypeError, ValueError) as e:
        typer.echo(f"Error: Invalid exchange: {e}", err=True)
        raise typer.Exit(1) from None

    har_response = ResponseSerializer(request, http_response, filter_policy).to_dict()
    write_json_output(har_response, output)
