"""Models a Debian package version."""

from collections.abc import Iterable
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Self, TypeAlias

from ._comparator import compare_versions
from .ordering import Ordering


@dataclass(frozen=True)
class DebianVersion:
    """Debian package version split into its three fields.

    Fields are stored exactly as they appear in the version string. An empty
    epoch or revision means the field was absent; it is treated as ``"0"``
    only while comparing.

    Equality with ``==`` is structural. Use ``equal`` or ``compare`` for
    Debian ordering equality, under which ``1.0`` and ``0:1.0-0`` are the
    same version.

    Attributes:
        upstream: Upstream version.
        epoch: Epoch, or an empty string when absent.
        revision: Debian revision, or an empty string when absent.
    """

    upstream: str
    epoch: str = ""
    revision: str = ""

    @classmethod
    def parse(cls, version_str: str) -> Self:
        """Parse a Debian version string.

        Everything before the first ``:`` is the epoch and everything after
        the last ``-`` is the revision. No character validation is done, so
        this never fails.

        Args:
            version_str: Version string in format "[epoch:]upstream[-revision]".

        Returns:
            Parsed DebianVersion instance.
        """
        epoch, colon, rest = version_str.partition(":")
        if not colon:
            epoch, rest = "", version_str
        upstream, dash, revision = rest.rpartition("-")
        if not dash:
            upstream, revision = rest, ""
        return cls(upstream=upstream, epoch=epoch, revision=revision)

    def __str__(self: Self) -> str:
        """Return string representation of version.

        Returns:
            Version string in format "[epoch:]upstream[-revision]".
        """
        text = self.upstream
        if self.revision:
            text = f"{text}-{self.revision}"
        if self.epoch:
            text = f"{self.epoch}:{text}"
        return text

    def __repr__(self: Self) -> str:
        """Return detailed string representation.

        Returns:
            Detailed version representation.
        """
        return f"DebianVersion({str(self)!r})"

    def compare(self: Self, other: "VersionLike") -> Ordering:
        """Compare this version with another.

        Args:
            other: DebianVersion or version string.

        Returns:
            Ordering of this version relative to other.
        """
        return compare_versions(self, _coerce(other))

    def greater_than(self: Self, other: "VersionLike") -> bool:
        """Return True if this version sorts after other."""
        return self.compare(other) is Ordering.GREATER

    def less_than(self: Self, other: "VersionLike") -> bool:
        """Return True if this version sorts before other."""
        return self.compare(other) is Ordering.LESS

    def equal(self: Self, other: "VersionLike") -> bool:
        """Return True if this version sorts the same as other."""
        return self.compare(other) is Ordering.EQUAL

    def __lt__(self: Self, other: object) -> bool:
        if not isinstance(other, DebianVersion):
            return NotImplemented
        return compare_versions(self, other) is Ordering.LESS

    def __le__(self: Self, other: object) -> bool:
        if not isinstance(other, DebianVersion):
            return NotImplemented
        return compare_versions(self, other) is not Ordering.GREATER

    def __gt__(self: Self, other: object) -> bool:
        if not isinstance(other, DebianVersion):
            return NotImplemented
        return compare_versions(self, other) is Ordering.GREATER

    def __ge__(self: Self, other: object) -> bool:
        if not isinstance(other, DebianVersion):
            return NotImplemented
        return compare_versions(self, other) is not Ordering.LESS


VersionLike: TypeAlias = DebianVersion | str


def _coerce(version: VersionLike) -> DebianVersion:
    if isinstance(version, DebianVersion):
        return version
    return DebianVersion.parse(version)


def parse(version_str: str) -> DebianVersion:
    """Parse a version string. Shorthand for ``DebianVersion.parse``."""
    return DebianVersion.parse(version_str)


def serialize(version: DebianVersion) -> str:
    """Render a version back to its canonical text."""
    return str(version)


def compare(left: VersionLike, right: VersionLike) -> Ordering:
    """Compare two versions given as strings or DebianVersion instances.

    Example:
        >>> compare("3.0~rc1-1", "3.0-1")
        <Ordering.LESS: 'LESS'>
    """
    return compare_versions(_coerce(left), _coerce(right))


def greater_than(left: VersionLike, right: VersionLike) -> bool:
    """Return True if left sorts after right."""
    return compare(left, right) is Ordering.GREATER


def less_than(left: VersionLike, right: VersionLike) -> bool:
    """Return True if left sorts before right."""
    return compare(left, right) is Ordering.LESS


def equal(left: VersionLike, right: VersionLike) -> bool:
    """Return True if left and right sort the same."""
    return compare(left, right) is Ordering.EQUAL


def _cmp(left: VersionLike, right: VersionLike) -> int:
    return compare(left, right).to_int()


sort_key = cmp_to_key(_cmp)


def sort_versions(
    versions: Iterable[VersionLike], reverse: bool = False
) -> list[VersionLike]:
    """Sort versions in Debian order.

    The sort is stable, so versions that compare equal (such as ``1.0`` and
    ``1.0-0``) keep their input order.

    Args:
        versions: Version strings or DebianVersion instances.
        reverse: If True, sort newest first.

    Returns:
        A new list holding the original items in sorted order.
    """
    return sorted(versions, key=sort_key, reverse=reverse)
