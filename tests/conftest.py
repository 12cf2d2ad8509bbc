"""Shared fixtures for the debvercmp test-suite."""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from typer.testing import CliRunner

# Versions in strictly increasing Debian order.
ASCENDING_VERSIONS = [
    "~~",
    "~~a",
    "~",
    "0",
    "0.1~beta",
    "0.1",
    "0.1-1",
    "0.1a",
    "0.1+dfsg-1",
    "0.9.9",
    "1.0~rc1",
    "1.0~rc2",
    "1.0",
    "1.0-1~bpo12+1",
    "1.0-1",
    "1.0-1ubuntu0.1",
    "1.0-2",
    "1.0a",
    "1.0.1",
    "1.2.3",
    "1.2.24",
    "2a",
    "21",
    "1:0.1",
    "1:1.0",
    "2:0.0.1",
]


@pytest.fixture(autouse=True)
def restore_package_logger() -> Iterator[None]:
    """Undo logging changes made by the CLI callback or configure_logging."""
    logger = logging.getLogger("debvercmp")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


@pytest.fixture
def ascending_versions() -> list[str]:
    """Version strings in strictly increasing order."""
    return list(ASCENDING_VERSIONS)


@pytest.fixture
def runner() -> CliRunner:
    """Typer CLI runner."""
    return CliRunner()


@pytest.fixture
def control_text() -> str:
    """Control file contents of a typical binary package."""
    return (
        "Package: bash\n"
        "Version: 5.2.15-2+b7\n"
        "Architecture: amd64\n"
        "Maintainer: Matthias Klose <doko@debian.org>\n"
        "Description: GNU Bourne Again SHell\n"
        " Bash is an sh-compatible command language interpreter.\n"
        " Version: 1.0 is not a field, only a description line.\n"
    )


@pytest.fixture
def control_file(tmp_path: Path, control_text: str) -> Path:
    """Control file on disk."""
    path = tmp_path / "control"
    path.write_text(control_text, encoding="utf-8")
    return path
