"""
niqqud: remove Hebrew diacritics from text.

Strips niqqud (vowel points), accents and cantillation marks, and
optionally Hebrew quotation marks (geresh ׳ and gershayim ״).

Basic usage:
    >>> from niqqud import remove, remove_thorough
    >>> remove("״שָׁלוֹם עוֹלָם״")
    '״שלום עולם״'
    >>> remove_thorough("״שָׁלוֹם עוֹלָם״")
    'שלום עולם'

Detailed usage:
    >>> from niqqud import remove_detailed
    >>> result = remove_detailed("נִקּוּד")
    >>> result.stripped, len(result.removals)
    ('נקוד', 3)
"""

from niqqud._charset import (
    DIACRITICS_RANGE,
    GERESH,
    GERSHAYIM,
    SPECIAL_RANGE,
    classify,
    is_diacritic,
    is_special,
)
from niqqud._strip import (
    Removal,
    RemovalResult,
    remove,
    remove_detailed,
    remove_thorough,
)

__version__ = "0.1.0"
__all__ = [
    "remove",
    "remove_thorough",
    "remove_detailed",
    "Removal",
    "RemovalResult",
    "is_diacritic",
    "is_special",
    "classify",
    "DIACRITICS_RANGE",
    "SPECIAL_RANGE",
    "GERESH",
    "GERSHAYIM",
]


# Lazy import for spaCy components (only when spacy is installed)
def __getattr__(name: str):
    if name == "NiqqudRemoverComponent":
        try:
            from niqqud.spacy import NiqqudRemoverComponent
            return NiqqudRemoverComponent
        except ImportError:
            raise ImportError(
                "spaCy integration requires spacy. "
                "Install with: pip install niqqud[spacy]"
            )
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
