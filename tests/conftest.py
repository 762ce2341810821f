"""Shared fixtures for niqqud tests."""

import pytest

# Pointed/quoted Hebrew alongside its expected stripped forms:
# (text, remove(text), remove_thorough(text))
SAMPLES = [
    ("נִקּוּד", "נקוד", "נקוד"),
    ("״שָׁלוֹם עוֹלָם״", "״שלום עולם״", "שלום עולם"),
    ("״גֵּרְשַׁיִם״", "״גרשים״", "גרשים"),
    ("צה״ל", "צה״ל", "צהל"),
    ("ז׳ורנל", "ז׳ורנל", "זורנל"),
    ("hello world", "hello world", "hello world"),
    ("", "", ""),
]


@pytest.fixture
def samples() -> list[tuple[str, str, str]]:
    """Return (text, removed, removed_thorough) triples."""
    return list(SAMPLES)


@pytest.fixture
def genesis_verse() -> str:
    """Genesis 1:1 with vowels and cantillation marks."""
    return "בְּרֵאשִׁ֖ית בָּרָ֣א אֱלֹהִ֑ים אֵ֥ת הַשָּׁמַ֖יִם וְאֵ֥ת הָאָֽרֶץ׃"
