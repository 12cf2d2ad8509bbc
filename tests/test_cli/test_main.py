"""Tests for debvercmp CLI."""

import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from debvercmp.cli.main import RELATIONS, app


# compare tests
@pytest.mark.parametrize(
    ("left", "right", "expected"),
    [
        ("1:0.4", "10.3", "GREATER"),
        ("1.0", "1.0~", "GREATER"),
        ("3.0~rc1-1", "3.0-1", "LESS"),
        ("1.2.3", "1.2.3-0", "EQUAL"),
        ("", "", "EQUAL"),
    ],
)
def test_compare(runner: CliRunner, left: str, right: str, expected: str) -> None:
    """Test printing the comparison result."""
    result = runner.invoke(app, ["compare", left, right])

    assert result.exit_code == 0
    assert result.stdout.strip() == expected


def test_compare_versions_starting_with_dash(runner: CliRunner) -> None:
    """Test that -- lets a version start with a dash."""
    result = runner.invoke(app, ["compare", "--", "-1", "1"])

    assert result.exit_code == 0
    assert result.stdout.strip() == "LESS"


def test_compare_help_mentions_double_dash(runner: CliRunner) -> None:
    """Test that the help explains how to pass dash-prefixed versions."""
    result = runner.invoke(app, ["compare", "--help"])

    assert result.exit_code == 0
    assert "compare -- -1 1" in result.stdout


def test_compare_wrong_argument_count(runner: CliRunner) -> None:
    """Test that a missing operand is a usage error."""
    result = runner.invoke(app, ["compare", "1.0"])

    assert result.exit_code == 2


def test_compare_debug_logging(
    runner: CliRunner, caplog: pytest.LogCaptureFixture
) -> None:
    """Test that --log-level enables the comparator's debug messages."""
    with caplog.at_level(logging.DEBUG):
        result = runner.invoke(app, ["--log-level", "debug", "compare", "1.0", "2.0"])

    assert result.exit_code == 0
    messages = [record.getMessage() for record in caplog.records]
    assert "Decided by upstream version: LESS" in messages


def test_invalid_log_level(runner: CliRunner) -> None:
    """Test that a bad log level exits with an error."""
    result = runner.invoke(app, ["--log-level", "loud", "compare", "1.0", "2.0"])

    assert result.exit_code == 1
    assert "✗" in result.output
    assert "Invalid settings" in result.output


# check tests
@pytest.mark.parametrize(
    ("left", "relation", "right", "exit_code"),
    [
        ("1.0", "lt", "2.0", 0),
        ("1.0", "<<", "2.0", 0),
        ("2.0", "lt", "1.0", 1),
        ("1.0", "le", "1.0-0", 0),
        ("1.0", "<=", "0.9", 1),
        ("0:1.0", "eq", "1.0", 0),
        ("0:1.0", "=", "1.0-1", 1),
        ("1.0", "ne", "1.0-1", 0),
        ("1.0", "ne", "1.0-0", 1),
        ("1.0", "ge", "1.0~", 0),
        ("1.0~", ">=", "1.0", 1),
        ("1:0.1", "gt", "9.9", 0),
        ("1:0.1", ">>", "1:0.1", 1),
    ],
)
def test_check(
    runner: CliRunner, left: str, relation: str, right: str, exit_code: int
) -> None:
    """Test dpkg style relation checks."""
    result = runner.invoke(app, ["check", left, relation, right])

    assert result.exit_code == exit_code
    assert result.stdout == ""


def test_check_unknown_relation(runner: CliRunner) -> None:
    """Test that an unknown relation is a usage error."""
    result = runner.invoke(app, ["check", "1.0", "newer", "2.0"])

    assert result.exit_code == 2
    assert "Unknown relation: newer" in result.output
    assert ">>" in result.output


def test_relations_cover_dpkg_operators() -> None:
    """Test the set of supported relations."""
    dpkg_names = {"lt", "le", "eq", "ne", "ge", "gt"}
    symbols = {"<<", "<=", "=", ">=", ">>"}
    assert set(RELATIONS) == dpkg_names | symbols


# parse tests
def test_parse(runner: CliRunner) -> None:
    """Test showing the fields of a version."""
    result = runner.invoke(app, ["parse", "2:1.18.36-0.17.35-18"])

    assert result.exit_code == 0
    assert "epoch" in result.stdout
    assert "1.18.36-0.17.35" in result.stdout
    assert "18" in result.stdout


def test_parse_absent_fields(runner: CliRunner) -> None:
    """Test that absent epoch and revision are marked."""
    result = runner.invoke(app, ["parse", "1.0"])

    assert result.exit_code == 0
    assert result.stdout.count("compares as 0") == 2


# sort tests
def test_sort(runner: CliRunner) -> None:
    """Test printing versions in Debian order."""
    result = runner.invoke(app, ["sort", "1:0.1", "1.0", "1.0~rc1", "0.9"])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["0.9", "1.0~rc1", "1.0", "1:0.1"]


def test_sort_reverse(runner: CliRunner) -> None:
    """Test printing versions newest first."""
    result = runner.invoke(app, ["sort", "--reverse", "1.0", "1.0+b1", "1.0~"])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["1.0+b1", "1.0", "1.0~"]


def test_sort_requires_versions(runner: CliRunner) -> None:
    """Test that sort needs at least one version."""
    result = runner.invoke(app, ["sort"])

    assert result.exit_code == 2


# control-version tests
def test_control_version(runner: CliRunner, control_file: Path) -> None:
    """Test printing the Version field of a control file."""
    result = runner.invoke(app, ["control-version", str(control_file)])

    assert result.exit_code == 0
    assert result.stdout.strip() == "5.2.15-2+b7"


def test_control_version_verbose(runner: CliRunner, control_file: Path) -> None:
    """Test showing the parsed fields of the control file version."""
    result = runner.invoke(app, ["control-version", "-v", str(control_file)])

    assert result.exit_code == 0
    assert "✓" in result.stdout
    assert "2+b7" in result.stdout


def test_control_version_missing_field(runner: CliRunner, tmp_path: Path) -> None:
    """Test a control file without a Version field."""
    path = tmp_path / "control"
    path.write_text("Package: foo\n", encoding="utf-8")

    result = runner.invoke(app, ["control-version", str(path)])

    assert result.exit_code == 1
    assert "no Version field" in result.output


def test_control_version_file_not_found(runner: CliRunner, tmp_path: Path) -> None:
    """Test a control file that does not exist."""
    result = runner.invoke(app, ["control-version", str(tmp_path / "missing")])

    assert result.exit_code == 1
    assert "File not found" in result.output
