"""
Invariants that hold for every input.

Each property is checked over the shared samples plus strings that
straddle the range boundaries of both filters.
"""

import pytest

from niqqud import is_diacritic, is_special, remove, remove_thorough
from conftest import SAMPLES

BOUNDARY_TEXTS = [
    "".join(chr(cp) for cp in range(0x0580, 0x0610)),
    "a\u058f\u0590b\u05cf\u05d0c\u05ea\u05eb\u05ff\u0600",
    "\u05f4\u05f3\u05be\u05c0\u05c3",
    "בְּרֵאשִׁית, ״תנ״ך״ and 'quotes'",
]

TEXTS = [s[0] for s in SAMPLES] + BOUNDARY_TEXTS


def is_subsequence(sub: str, text: str) -> bool:
    it = iter(text)
    return all(ch in it for ch in sub)


@pytest.mark.parametrize("text", TEXTS)
class TestInvariants:
    def test_remove_keeps_everything_else(self, text):
        assert remove(text) == "".join(c for c in text if not is_diacritic(c))

    def test_remove_thorough_keeps_everything_else(self, text):
        expected = "".join(
            c for c in text if not is_diacritic(c) and not is_special(c)
        )
        assert remove_thorough(text) == expected

    def test_subsequence_of_input(self, text):
        assert is_subsequence(remove(text), text)
        assert is_subsequence(remove_thorough(text), text)

    def test_thorough_subsequence_of_remove(self, text):
        assert is_subsequence(remove_thorough(text), remove(text))

    def test_idempotent(self, text):
        assert remove(remove(text)) == remove(text)
        assert remove_thorough(remove_thorough(text)) == remove_thorough(text)

    def test_no_range_characters_left(self, text):
        assert not any(is_diacritic(c) for c in remove(text))
        assert not any(
            is_diacritic(c) or is_special(c) for c in remove_thorough(text)
        )


class TestBoundaries:
    def test_boundary_string(self):
        text = "a\u058f\u0590b\u05cf\u05d0c\u05ea\u05eb\u05ff\u0600"
        assert remove(text) == "a\u058fb\u05d0c\u05ea\u05eb\u05ff\u0600"
        assert remove_thorough(text) == "a\u058fb\u05d0c\u05ea\u0600"

    def test_full_block_counts(self):
        block = "".join(chr(cp) for cp in range(0x0590, 0x0600))
        # only the 27 letters survive thorough removal
        assert len(remove_thorough(block)) == 0x05EB - 0x05D0
        assert len(remove(block)) == 0x0600 - 0x05D0
