"""Three-valued result of a version comparison."""

from enum import Enum
from typing import Self


class Ordering(Enum):
    """Outcome of comparing a left-hand value against a right-hand value.

    There is no unknown or error member: every comparison of two versions
    resolves to exactly one of these.
    """

    LESS = "LESS"
    GREATER = "GREATER"
    EQUAL = "EQUAL"

    def __str__(self: Self) -> str:
        """Return the member name as printed by the command line."""
        return self.value

    @classmethod
    def from_int(cls, value: int) -> "Ordering":
        """Map the sign of a cmp-style integer to an Ordering.

        Args:
            value: Negative, zero or positive integer.

        Returns:
            LESS, EQUAL or GREATER respectively.
        """
        if value < 0:
            return cls.LESS
        if value > 0:
            return cls.GREATER
        return cls.EQUAL

    def to_int(self: Self) -> int:
        """Return -1, 0 or 1 for use with cmp-style APIs."""
        if self is Ordering.LESS:
            return -1
        if self is Ordering.GREATER:
            return 1
        return 0

    def reverse(self: Self) -> "Ordering":
        """Return the ordering seen from the other side of the comparison."""
        if self is Ordering.LESS:
            return Ordering.GREATER
        if self is Ordering.GREATER:
            return Ordering.LESS
        return Ordering.EQUAL
