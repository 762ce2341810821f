"""
Codepoint classification for Hebrew text.

Provides:
- is_diacritic(): points, accents and cantillation block (U+0590..U+05CF)
- is_special(): Hebrew punctuation tail of the block (U+05EB..U+05FF)
- classify(): name the category a character falls into, if any

Classification is by range membership only, not by Unicode properties.
Unassigned codepoints inside a range are treated like assigned ones.

Reference: https://www.unicode.org/charts/PDF/U0590.pdf
"""

from __future__ import annotations

from typing import Optional

__all__ = [
    "DIACRITICS_RANGE",
    "SPECIAL_RANGE",
    "GERESH",
    "GERSHAYIM",
    "DIACRITIC",
    "SPECIAL",
    "is_diacritic",
    "is_special",
    "classify",
]

# Inclusive (first, last) codepoints
DIACRITICS_RANGE = (0x0590, 0x05CF)
SPECIAL_RANGE = (0x05EB, 0x05FF)

GERESH = "\u05f3"  # ׳ (geresh)
GERSHAYIM = "\u05f4"  # ״ (gershayim)

# Category names reported by classify()
DIACRITIC = "diacritic"
SPECIAL = "special"


def is_diacritic(c: str) -> bool:
    """Check if character lies in the Hebrew points/accents range."""
    return DIACRITICS_RANGE[0] <= ord(c) <= DIACRITICS_RANGE[1]


def is_special(c: str) -> bool:
    """Check if character is a special Hebrew character such as gershayim (״)."""
    return SPECIAL_RANGE[0] <= ord(c) <= SPECIAL_RANGE[1]


def classify(c: str) -> Optional[str]:
    """
    Return the removal category of a single character.

    Args:
        c: A single character

    Returns:
        "diacritic", "special", or None if the character is always kept
    """
    if is_diacritic(c):
        return DIACRITIC
    if is_special(c):
        return SPECIAL
    return None


def _deletion_table(*predicates) -> dict[int, None]:
    """Build a str.translate table deleting every codepoint matching a predicate."""
    first = min(DIACRITICS_RANGE[0], SPECIAL_RANGE[0])
    last = max(DIACRITICS_RANGE[1], SPECIAL_RANGE[1])
    return {
        cp: None
        for cp in range(first, last + 1)
        if any(pred(chr(cp)) for pred in predicates)
    }


# Built once at import, read-only afterwards
DIACRITICS_TABLE = _deletion_table(is_diacritic)
THOROUGH_TABLE = _deletion_table(is_diacritic, is_special)
