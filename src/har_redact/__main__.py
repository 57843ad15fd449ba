"""Run the har-redact commands via ``python -m har_redact``."""

from __future__ import annotations


def main() -> None:
    """Dispatch to the typer app, or explain how to get it when typer is absent."""
    try:
        from har_redact.cli.main import app

        app()
    except ImportError as e:
        import sys

        print("The har-redact commands need the optional 'cli' extra.", file=sys.stderr)
        print("Install with: pip install har-redact[cli]", file=sys.stderr)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
