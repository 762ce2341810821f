"""
Stripping utilities for Hebrew text.

Removes niqqud (vowel points), accents and cantillation marks from Hebrew
text, optionally together with Hebrew quotation marks (geresh ׳ and
gershayim ״). Useful for search indexing or for comparing pointed and
unpointed spellings of the same word.

These have no external dependencies, only str.translate tables.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from niqqud._charset import DIACRITICS_TABLE, SPECIAL, THOROUGH_TABLE, classify

__all__ = [
    "Removal",
    "RemovalResult",
    "remove",
    "remove_thorough",
    "remove_detailed",
]


# =============================================================================
# Data Classes
# =============================================================================


@dataclass
class Removal:
    """Record of a single removed character."""

    position: int
    char: str
    category: str

    @property
    def codepoint(self) -> str:
        return f"U+{ord(self.char):04X}"


@dataclass
class RemovalResult:
    """Detailed result from stripping."""

    original: str
    stripped: str
    removals: list[Removal] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.removals)


# =============================================================================
# Public API
# =============================================================================


def remove(text: str) -> str:
    """
    Remove Hebrew diacritics from text.

    Hebrew quotes (״, ׳) are kept; use remove_thorough() to drop them too.

    Args:
        text: Hebrew text (possibly pointed)

    Returns:
        Text with every character in U+0590..U+05CF removed

    Example:
        >>> remove("נִקּוּד")
        'נקוד'
        >>> remove("״שָׁלוֹם עוֹלָם״")
        '״שלום עולם״'
    """
    return text.translate(DIACRITICS_TABLE)


def remove_thorough(text: str) -> str:
    """
    Remove Hebrew diacritics and Hebrew quotes (״, ׳) from text.

    Example:
        >>> remove_thorough("״גֵּרְשַׁיִם״")
        'גרשים'
    """
    return text.translate(THOROUGH_TABLE)


def remove_detailed(text: str, thorough: bool = False) -> RemovalResult:
    """
    Strip text and report every removed character.

    Args:
        text: Hebrew text (possibly pointed)
        thorough: Also remove special characters such as gershayim

    Returns:
        RemovalResult whose ``stripped`` equals remove(text), or
        remove_thorough(text) when ``thorough`` is set
    """
    kept = []
    removals = []
    for i, char in enumerate(text):
        category = classify(char)
        if category is None or (category == SPECIAL and not thorough):
            kept.append(char)
        else:
            removals.append(Removal(position=i, char=char, category=category))

    # Nothing dropped: hand back the input unchanged
    stripped = "".join(kept) if removals else text
    return RemovalResult(original=text, stripped=stripped, removals=removals)
