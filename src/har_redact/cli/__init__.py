"""CLI for har-redact.

This module provides a Typer-based CLI for filtering JSON documents and
serializing request/response exchanges to HAR.

Requires the 'cli' optional dependency: pip install har-redact[cli]
"""

from __future__ import annotations
