# SPDX-License-Identifier: MIT
"""Qualifier collation.

Qualifiers are not compared lexically. Characters rank in the order
``-`` < ``a``..``z`` < ``A``..``Z`` < ``0``..``9``, so ``1.8.0_u-12`` sorts
before ``1.8.0_u12`` and ``1.8.0_Z`` sorts before ``1.8.0_9``.
"""

from __future__ import annotations

import string

COLLATING_SEQUENCE = "-" + string.ascii_lowercase + string.ascii_uppercase + string.digits

_RANKS = {char: rank for rank, char in enumerate(COLLATING_SEQUENCE)}


def char_rank(char: str) -> int:
    """Return the position of a character in the collating sequence.

    Raises:
        ValueError: If the character is not a valid qualifier character
    """
    try:
        return _RANKS[char]
    except KeyError:
        raise ValueError(f"Character '{char}' is not in the qualifier collating sequence") from None


def qualifier_compare(a: str, b: str) -> int:
    """Compare two qualifiers using the collating sequence.

    Returns:
        -1 if a < b
        0 if a == b
        1 if a > b

    Examples:
        >>> qualifier_compare("a", "b")
        -1
        >>> qualifier_compare("9", "Z")
        1
        >>> qualifier_compare("a", "ab")
        -1
    """
    for c1, c2 in zip(a, b):
        r1, r2 = char_rank(c1), char_rank(c2)
        if r1 != r2:
            return -1 if r1 < r2 else 1

    # All compared characters equal - the shorter qualifier sorts first
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1

    return 0


def qualifier_key(qualifier: str) -> tuple[int, ...]:
    """Return a sort key whose ordering matches qualifier_compare."""
    return tuple(char_rank(char) for char in qualifier)
