from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from bytes_converter import __version__
from bytes_converter.cmd.cli import app

runner = CliRunner()


@pytest.mark.parametrize(
    ("args", "expected"),
    [
        (["format", "1536"], "1.5KB"),
        (["format", "1023"], "1023B"),
        (["format", "2048", "--fixed-decimals"], "2.00KB"),
        (["format", "1536", "--decimal-places", "0"], "2KB"),
        (["format", "1000000000", "--unit", "KB", "--thousands-separator", ","], "976,562.5KB"),
        (["format", "1024", "--unit-separator", " "], "1 KB"),
        (["format", "--", "-1024"], "-1KB"),
        (["format", "1099511627776000"], "1000TB"),
    ],
)
def test_format_command(args: list[str], expected: str) -> None:
    result = runner.invoke(app, args)

    assert result.exit_code == 0
    assert result.stdout.strip() == expected


@pytest.mark.parametrize("value", ["inf", "nan"])
def test_format_command_rejects_non_finite(value: str) -> None:
    result = runner.invoke(app, ["format", value])

    assert result.exit_code == 1
    assert "not a finite number" in result.stdout


def test_format_command_validates_decimal_places() -> None:
    result = runner.invoke(app, ["format", "1024", "--decimal-places", "101"])

    assert result.exit_code == 2


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("1KB", "1024"),
        ("1.5GB", "1610612736"),
        ("2 mb", "2097152"),
        ("100", "100"),
        ("3.7", "3"),
    ],
)
def test_parse_command(text: str, expected: str) -> None:
    result = runner.invoke(app, ["parse", text])

    assert result.exit_code == 0
    assert result.stdout.strip() == expected


def test_parse_command_rejects_text_without_number() -> None:
    result = runner.invoke(app, ["parse", "lots"])

    assert result.exit_code == 1
    assert "Cannot parse 'lots'" in result.stdout


def test_units_command_lists_every_unit() -> None:
    result = runner.invoke(app, ["units"])

    assert result.exit_code == 0
    for unit in ("B", "KB", "MB", "GB", "TB", "PB"):
        assert unit in result.stdout
    assert "1,125,899,906,842,624" in result.stdout


def test_no_command_prints_version() -> None:
    result = runner.invoke(app, [])

    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_debug_flag_writes_log_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr("bytes_converter.core.utils.log_config.LOG_DIR", tmp_path / "logs")

    result = runner.invoke(app, ["--debug", "parse", "100"])

    assert result.exit_code == 0
    assert "100" in result.stdout
    assert (tmp_path / "logs" / "bytes-converter.log").exists()
