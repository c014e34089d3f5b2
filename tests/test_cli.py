"""
Tests for the command line entry point.
"""

from unittest.mock import patch

import pytest

from app.cli import main


class TestCli:
    """Tests for the serve and tiers commands."""

    def test_serve_runs_uvicorn(self) -> None:
        with patch("uvicorn.run") as run:
            main(["serve", "--host", "127.0.0.1", "--port", "9001"])
        run.assert_called_once_with("app.main:app", host="127.0.0.1", port=9001, reload=False)

    def test_tiers_lists_every_tier(self, capsys) -> None:
        main(["tiers"])
        out = capsys.readouterr().out
        for name in ("Standard User", "N1NJ4 White", "N1NJ4 Purple", "N1NJ4 Orange"):
            assert name in out
        assert "access:exclusive_data" in out

    def test_command_required(self) -> None:
        with pytest.raises(SystemExit):
            main([])
