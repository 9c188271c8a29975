from __future__ import annotations

from typer.testing import CliRunner

from layout2pdf.cli import app


def test_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "NAME.pdf" in result.stdout
    assert "--config" in result.stdout
    assert "--verbose" in result.stdout
