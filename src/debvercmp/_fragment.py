"""Fragment tokenizing and fragment ordering.

A version field is compared as an alternating sequence of fragments: a run of
non-digits (possibly empty), then a run of digits, then non-digits again, and
so on. Classification is ASCII only: ``0`` through ``9`` are digits and every
other character, including non-ASCII ones, is a non-digit.
"""

import re

from .ordering import Ordering

_NON_DIGIT_RUN = re.compile(r"[^0-9]*")
_DIGIT_RUN = re.compile(r"[0-9]*")

_DIGITS = frozenset("0123456789")
_ASCII_LETTERS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz")

TILDE = "~"
END_OF_FRAGMENT_KEY = 0


def is_digit(char: str) -> bool:
    """Return True if char is an ASCII decimal digit."""
    return char in _DIGITS


def non_digit_run_end(text: str, pos: int = 0) -> int:
    """Return the index just past the non-digit run starting at pos."""
    match = _NON_DIGIT_RUN.match(text, pos)
    assert match is not None
    return match.end()


def digit_run_end(text: str, pos: int = 0) -> int:
    """Return the index just past the digit run starting at pos."""
    match = _DIGIT_RUN.match(text, pos)
    assert match is not None
    return match.end()


def take_non_digit(text: str) -> tuple[str, str]:
    """Split off the longest prefix of text containing no digits.

    Args:
        text: Any string.

    Returns:
        A ``(prefix, rest)`` tuple. Either element may be empty.
    """
    end = non_digit_run_end(text)
    return text[:end], text[end:]


def take_digit(text: str) -> tuple[str, str]:
    """Split off the longest prefix of text made only of digits.

    Args:
        text: Any string.

    Returns:
        A ``(prefix, rest)`` tuple. Either element may be empty.
    """
    end = digit_run_end(text)
    return text[:end], text[end:]


def order_key(char: str) -> int:
    """Return the sort key of a single non-digit character.

    Letters keep their code point, the tilde sorts before everything (even
    the end of a fragment, whose key is 0) and anything else sorts after all
    letters.

    Non-ASCII characters are keyed by code point. UTF-8 is prefix free and
    preserves code point order, so this matches a byte-wise comparison of
    the encoded text.
    """
    assert not is_digit(char), f"digit {char!r} inside a non-digit fragment"
    if char in _ASCII_LETTERS:
        return ord(char)
    if char == TILDE:
        return -1
    return ord(char) + 256


def compare_non_digit(left: str, right: str) -> Ordering:
    """Compare two non-digit fragments lexically using order_key.

    When one fragment is a prefix of the other, the first extra character of
    the longer one decides: a tilde makes it sort first, anything else makes
    it sort last.

    Args:
        left: Non-digit fragment.
        right: Non-digit fragment.

    Returns:
        Ordering of left relative to right.
    """
    for left_char, right_char in zip(left, right, strict=False):
        left_key, right_key = order_key(left_char), order_key(right_char)
        if left_key < right_key:
            return Ordering.LESS
        if left_key > right_key:
            return Ordering.GREATER

    common = min(len(left), len(right))
    if len(left) > len(right):
        return Ordering.from_int(order_key(left[common]) - END_OF_FRAGMENT_KEY)
    if len(left) < len(right):
        return Ordering.from_int(END_OF_FRAGMENT_KEY - order_key(right[common]))
    return Ordering.EQUAL


def compare_digit(left: str, right: str) -> Ordering:
    """Compare two digit fragments by numeric value.

    Leading zeros are insignificant and an empty fragment counts as zero.
    The values are compared without converting to ``int`` so arbitrarily
    long runs are handled.

    Args:
        left: Digit fragment.
        right: Digit fragment.

    Returns:
        Ordering of left relative to right.
    """
    assert all(is_digit(c) for c in left + right), "non-digit in a digit fragment"
    left = left.lstrip("0")
    right = right.lstrip("0")
    if len(left) != len(right):
        return Ordering.from_int(len(left) - len(right))
    if left < right:
        return Ordering.LESS
    if left > right:
        return Ordering.GREATER
    return Ordering.EQUAL
