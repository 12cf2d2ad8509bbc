"""debvercmp - Debian package version parsing and comparison.

Parses version strings into epoch, upstream version and Debian revision and
orders them exactly the way dpkg and apt do.
"""

from ._version import __version__
from .control import extract_version, read_control_version
from .debian_version import (
    DebianVersion,
    compare,
    equal,
    greater_than,
    less_than,
    parse,
    serialize,
    sort_key,
    sort_versions,
)
from .exceptions import (
    ConfigError,
    ControlFieldError,
    DebVersionError,
    MissingVersionFieldError,
)
from .ordering import Ordering
from .types import DebianVersionField, VersionLike

__all__ = [
    "ConfigError",
    "ControlFieldError",
    "DebVersionError",
    "DebianVersion",
    "DebianVersionField",
    "MissingVersionFieldError",
    "Ordering",
    "VersionLike",
    "__version__",
    "compare",
    "equal",
    "extract_version",
    "greater_than",
    "less_than",
    "parse",
    "read_control_version",
    "serialize",
    "sort_key",
    "sort_versions",
]
