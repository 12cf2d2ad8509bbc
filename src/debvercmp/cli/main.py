"""Command-line interface for debvercmp."""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Annotated

import typer

from ..config import configure_logging, load_settings
from ..control import read_control_version
from ..debian_version import DebianVersion, sort_versions
from ..exceptions import ConfigError, DebVersionError
from ..ordering import Ordering
from ._helpers import console, print_error, print_plain, print_success, version_table

logger = logging.getLogger(__name__)

app = typer.Typer(help="Parse and compare Debian package versions")

RELATIONS: dict[str, Callable[[Ordering], bool]] = {
    "lt": lambda result: result is Ordering.LESS,
    "le": lambda result: result is not Ordering.GREATER,
    "eq": lambda result: result is Ordering.EQUAL,
    "ne": lambda result: result is not Ordering.EQUAL,
    "ge": lambda result: result is not Ordering.LESS,
    "gt": lambda result: result is Ordering.GREATER,
}
RELATIONS.update(
    {
        "<<": RELATIONS["lt"],
        "<=": RELATIONS["le"],
        "=": RELATIONS["eq"],
        ">=": RELATIONS["ge"],
        ">>": RELATIONS["gt"],
    }
)

VersionArgument = Annotated[
    str,
    typer.Argument(
        ...,
        help="Debian version string. Put -- before versions starting with a dash.",
    ),
]


@app.callback()
def main(
    log_level: Annotated[
        str | None,
        typer.Option(
            ...,
            "--log-level",
            "-l",
            help="Log level (overrides DEBVERCMP_LOG_LEVEL)",
        ),
    ] = None,
) -> None:
    """Parse and compare Debian package versions."""
    try:
        settings = load_settings(log_level=log_level)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1) from e
    configure_logging(settings)


@app.command()
def compare(left: VersionArgument, right: VersionArgument) -> None:
    """Print LESS, GREATER or EQUAL for LEFT compared with RIGHT.

    Versions starting with a dash need a preceding --.

    Example: debvercmp compare -- -1 1
    """
    result = DebianVersion.parse(left).compare(right)
    logger.info("%s vs %s: %s", left, right, result)
    print_plain(str(result))


@app.command()
def check(
    left: VersionArgument,
    relation: Annotated[
        str,
        typer.Argument(
            ...,
            help="One of lt, le, eq, ne, ge, gt, <<, <=, =, >=, >>",
        ),
    ],
    right: VersionArgument,
) -> None:
    """Exit 0 if the relation holds between LEFT and RIGHT, 1 otherwise."""
    test = RELATIONS.get(relation)
    if test is None:
        print_error(f"Unknown relation: {relation}")
        console.print(f"Supported relations: {', '.join(RELATIONS)}", markup=False)
        raise typer.Exit(2)

    if not test(DebianVersion.parse(left).compare(right)):
        raise typer.Exit(1)


@app.command()
def parse(version: VersionArgument) -> None:
    """Show the epoch, upstream version and revision of VERSION."""
    console.print(version_table(DebianVersion.parse(version)))


@app.command(name="sort")
def sort_command(
    versions: Annotated[
        list[str],
        typer.Argument(
            ...,
            help="Debian version strings. Put -- before them if any starts with "
            "a dash.",
        ),
    ],
    reverse: Annotated[
        bool,
        typer.Option(..., "--reverse", "-r", help="Print the newest version first"),
    ] = False,
) -> None:
    """Print VERSIONS in Debian order, oldest first."""
    for version in sort_versions(versions, reverse=reverse):
        print_plain(str(version))


@app.command(name="control-version")
def control_version(
    path: Annotated[Path, typer.Argument(..., help="Path to a control file")],
    verbose: Annotated[
        bool,
        typer.Option(..., "--verbose", "-v", help="Show the parsed fields"),
    ] = False,
) -> None:
    """Print the Version field of a package control file."""
    try:
        version = read_control_version(path)
    except FileNotFoundError as e:
        print_error(f"File not found: {path}")
        raise typer.Exit(1) from e
    except DebVersionError as e:
        print_error(f"{path}: {e}")
        raise typer.Exit(1) from e
    except (OSError, UnicodeDecodeError) as e:
        print_error(f"Cannot read {path}: {e}")
        raise typer.Exit(1) from e

    if verbose:
        print_success(f"Read version from {path}")
        console.print(version_table(version))
    else:
        print_plain(str(version))
