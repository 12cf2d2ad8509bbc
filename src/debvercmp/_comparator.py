"""Debian version comparison.

Each of the epoch, upstream version and Debian revision is compared as a
sequence of alternating non-digit and digit fragments, in that field order,
stopping at the first difference.
"""

import logging
from typing import TYPE_CHECKING

from ._fragment import (
    compare_digit,
    compare_non_digit,
    digit_run_end,
    non_digit_run_end,
)
from .ordering import Ordering

if TYPE_CHECKING:
    from .debian_version import DebianVersion

logger = logging.getLogger(__name__)


def compare_fragment_sequence(left: str, right: str) -> Ordering:
    """Compare two version fields fragment by fragment.

    Both strings are walked by index and only the fragments themselves are
    sliced, so the cost is linear in the combined length.

    Args:
        left: Epoch, upstream version or revision of the left-hand version.
        right: The same field of the right-hand version.

    Returns:
        Ordering of left relative to right.
    """
    i, j = 0, 0
    left_len, right_len = len(left), len(right)
    while i < left_len or j < right_len:
        i_end = non_digit_run_end(left, i)
        j_end = non_digit_run_end(right, j)
        left_part, right_part = left[i:i_end], right[j:j_end]
        i, j = i_end, j_end
        result = compare_non_digit(left_part, right_part)
        if result is not Ordering.EQUAL:
            logger.debug("Non-digit %r vs %r: %s", left_part, right_part, result)
            return result

        if i == left_len and j == right_len:
            break

        i_end = digit_run_end(left, i)
        j_end = digit_run_end(right, j)
        left_part, right_part = left[i:i_end], right[j:j_end]
        i, j = i_end, j_end
        # Whatever is left starts with a digit, so at least one run is non-empty.
        assert left_part or right_part, "both digit runs empty mid-sequence"
        if not left_part:
            logger.debug("Digit run missing on the left, %r on the right", right_part)
            return Ordering.LESS
        if not right_part:
            logger.debug("Digit run %r on the left, missing on the right", left_part)
            return Ordering.GREATER

        result = compare_digit(left_part, right_part)
        if result is not Ordering.EQUAL:
            logger.debug("Digit %r vs %r: %s", left_part, right_part, result)
            return result

    return Ordering.EQUAL


def compare_versions(left: "DebianVersion", right: "DebianVersion") -> Ordering:
    """Compare two parsed versions.

    An absent epoch or revision compares as ``"0"``; the stored fields are
    left untouched.

    Args:
        left: Left-hand version.
        right: Right-hand version.

    Returns:
        Ordering of left relative to right.
    """
    logger.debug("Comparing %r with %r", left, right)

    result = compare_fragment_sequence(left.epoch or "0", right.epoch or "0")
    if result is not Ordering.EQUAL:
        logger.debug("Decided by epoch: %s", result)
        return result

    result = compare_fragment_sequence(left.upstream, right.upstream)
    if result is not Ordering.EQUAL:
        logger.debug("Decided by upstream version: %s", result)
        return result

    result = compare_fragment_sequence(left.revision or "0", right.revision or "0")
    logger.debug("Decided by revision: %s", result)
    return result
