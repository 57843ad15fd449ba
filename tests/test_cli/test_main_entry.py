"""Tests for running har-redact with python -m."""

from __future__ import annotations

import sys
from unittest.mock import MagicMock, patch

import pytest


class TestModuleExecution:
    """Tests for the python -m har_redact dispatcher."""

    @patch("har_redact.cli.main.app")
    def test_dispatches_to_typer_app(self, mock_app: MagicMock) -> None:
        """Test main() hands control to the typer app."""
        from har_redact.__main__ import main

        main()

        mock_app.assert_called_once()

    def test_missing_cli_extra(self, capsys) -> None:
        """Test an install hint and exit code 1 when the CLI cannot be imported."""
        from har_redact.__main__ import main

        with patch.dict(sys.modules, {"har_redact.cli.main": None}), pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1
        assert "pip install har-redact[cli]" in capsys.readouterr().err
