"""Reads the Version field out of package control data.

Whatever unpacks a ``.deb`` archive hands over the text of its control file.
Only the ``Version`` field is looked at here; other fields are skipped.
"""

import logging
from pathlib import Path

from debian.deb822 import Deb822

from .debian_version import DebianVersion
from .exceptions import ControlFieldError, MissingVersionFieldError

logger = logging.getLogger(__name__)

VERSION_FIELD = "Version"


def read_paragraph(text: str) -> Deb822:
    """Parse the first paragraph of control data.

    Leading blank lines and comments are skipped and the paragraph ends at
    the next blank line.

    Args:
        text: Control file contents.

    Returns:
        The paragraph, with case-insensitive field lookup.

    Raises:
        ControlFieldError: If no field could be read from the text.
    """
    paragraph = Deb822(text.splitlines())
    if not paragraph:
        raise ControlFieldError("Control data holds no fields")
    return paragraph


def find_field(text: str, name: str) -> str | None:
    """Find a field value in the first paragraph of control data.

    Args:
        text: Control file contents.
        name: Field name to look up, in any case.

    Returns:
        The stripped field value, or None if the field is not present.

    Raises:
        ControlFieldError: If no field could be read from the text.
    """
    value = read_paragraph(text).get(name)
    if value is None:
        return None
    return str(value).strip()


def extract_version(text: str) -> DebianVersion:
    """Parse the Version field of control data.

    Args:
        text: Control file contents.

    Returns:
        The parsed version.

    Raises:
        MissingVersionFieldError: If the field is absent or empty.
        ControlFieldError: If the control data is malformed.
    """
    value = find_field(text, VERSION_FIELD)
    if not value:
        raise MissingVersionFieldError()
    logger.debug("Found Version field %r", value)
    return DebianVersion.parse(value)


def read_control_version(path: Path | str) -> DebianVersion:
    """Read a control file from disk and parse its Version field.

    Args:
        path: Path to the control file.

    Returns:
        The parsed version.

    Raises:
        FileNotFoundError: If the file does not exist.
        MissingVersionFieldError: If the field is absent or empty.
        ControlFieldError: If the control data is malformed.
    """
    path = Path(path)
    logger.debug("Reading control file %s", path)
    return extract_version(path.read_text(encoding="utf-8"))
