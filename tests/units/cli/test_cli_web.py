"""Tests for the web command group."""

from collections.abc import Generator
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner
from licitax_advisor.cli.web import web_group


@pytest.fixture
def mock_run() -> Generator[MagicMock, None, None]:
    """Replaces the uvicorn runner."""
    with patch("licitax_advisor.cli.web.uvicorn.run") as run:
        yield run


def test_web_serve_command(mock_run: MagicMock) -> None:
    """Tests the web serve command."""
    result = CliRunner().invoke(web_group, ["serve"])

    assert result.exit_code == 0
    mock_run.assert_called_once_with(
        "licitax_advisor.web.main:app", host="127.0.0.1", port=8000, reload=False, log_level="info"
    )


def test_web_serve_command_options(mock_run: MagicMock) -> None:
    """Tests the web serve command with options."""
    args = ["serve", "--host", "0.0.0.0", "--port", "9000", "--reload"]  # nosec B104

    result = CliRunner().invoke(web_group, args)

    assert result.exit_code == 0
    mock_run.assert_called_once_with(
        "licitax_advisor.web.main:app", host="0.0.0.0", port=9000, reload=True, log_level="info"  # nosec B104
    )


def test_web_serve_with_workers(mock_run: MagicMock) -> None:
    """Tests that the worker count is handed to uvicorn."""
    result = CliRunner().invoke(web_group, ["serve", "--workers", "4"])

    assert result.exit_code == 0
    assert mock_run.call_args.kwargs["workers"] == 4


@pytest.mark.parametrize("args", [["--workers", "0"], ["--reload", "--workers", "2"]])
def test_web_serve_rejects_bad_worker_options(mock_run: MagicMock, args: list[str]) -> None:
    """Tests that invalid worker options are usage errors."""
    result = CliRunner().invoke(web_group, ["serve", *args])

    assert result.exit_code == 2
    mock_run.assert_not_called()
