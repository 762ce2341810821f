"""
spaCy integration for niqqud.

Provides a pipeline component that strips Hebrew diacritics.

Example:
    >>> import spacy
    >>> nlp = spacy.blank("he")
    >>> nlp.add_pipe("niqqud_remover")
    >>> doc = nlp("שָׁלוֹם עוֹלָם")
    >>> doc._.niqqud_removed
    'שלום עולם'
"""

from typing import Optional

from spacy.language import Language
from spacy.tokens import Doc, Token

from niqqud._strip import remove, remove_thorough

__all__ = [
    "NiqqudRemoverComponent",
    "create_niqqud_remover",
    "get_remover_pipe",
]


# =============================================================================
# Niqqud Remover Component
# =============================================================================


@Language.factory(
    "niqqud_remover",
    default_config={"thorough": False},
    assigns=[
        "doc._.niqqud_removed",
        "token._.niqqud_removed",
        "token._.niqqud_removed_lemma",
    ],
)
def create_niqqud_remover(
    nlp: Language,
    name: str,
    thorough: bool = False,
) -> "NiqqudRemoverComponent":
    """Create a niqqud remover pipeline component.

    With ``thorough`` set, Hebrew quotes (״, ׳) are removed as well.
    """
    return NiqqudRemoverComponent(nlp, name, thorough=thorough)


class NiqqudRemoverComponent:
    """
    spaCy pipeline component for stripping Hebrew diacritics.

    Extensions:
        - Doc._.niqqud_removed: Full stripped text.
        - Token._.niqqud_removed: Stripped token text.
        - Token._.niqqud_removed_lemma: Stripped lemma.

    Note: token.text and token.lemma_ are NEVER modified.
    """

    def __init__(
        self,
        nlp: Language,
        name: str,
        *,
        thorough: bool = False,
    ) -> None:
        if not isinstance(thorough, bool):
            raise ValueError(
                f"Invalid value for thorough: {thorough!r}. Expected True or False."
            )

        self.name = name
        self.thorough = thorough
        self._remove = remove_thorough if thorough else remove

        if not Doc.has_extension("niqqud_removed"):
            Doc.set_extension("niqqud_removed", default=None)
        if not Token.has_extension("niqqud_removed"):
            Token.set_extension("niqqud_removed", default=None)
        if not Token.has_extension("niqqud_removed_lemma"):
            Token.set_extension("niqqud_removed_lemma", default=None)

    def __call__(self, doc: Doc) -> Doc:
        doc._.niqqud_removed = self._remove(doc.text)

        for token in doc:
            token._.niqqud_removed = self._remove(token.text)
            token._.niqqud_removed_lemma = self._remove(token.lemma_)

        return doc

    def to_disk(self, path: str, *, exclude: tuple[str, ...] = ()) -> None:
        pass

    def from_disk(
        self, path: str, *, exclude: tuple[str, ...] = ()
    ) -> "NiqqudRemoverComponent":
        return self

    def to_bytes(self, *, exclude: tuple[str, ...] = ()) -> bytes:
        return b""

    def from_bytes(
        self, data: bytes, *, exclude: tuple[str, ...] = ()
    ) -> "NiqqudRemoverComponent":
        return self


# =============================================================================
# Utility Functions
# =============================================================================


def get_remover_pipe(nlp: Language) -> Optional[NiqqudRemoverComponent]:
    """Get the niqqud remover component from a pipeline."""
    if "niqqud_remover" in nlp.pipe_names:
        return nlp.get_pipe("niqqud_remover")
    return None
