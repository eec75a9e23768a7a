from __future__ import annotations


class EmbeddingProjectorError(Exception):
    """Base class for errors raised by the embedding engine."""


class UnknownWordError(EmbeddingProjectorError, KeyError):
    """Raised when a word is not part of the engine's vocabulary."""

    def __init__(self, word: str) -> None:
        super().__init__(word)
        self.word = word

    def __str__(self) -> str:
        return f"Word not in vocabulary: {self.word!r}"


class DegenerateAxisError(EmbeddingProjectorError, ValueError):
    """Raised when two axis words have (near-)identical embeddings.

    The difference vector has no usable length, so it cannot be normalised
    into a direction.
    """

    def __init__(self, left: str, right: str, norm: float) -> None:
        super().__init__(left, right, norm)
        self.left = left
        self.right = right
        self.norm = norm

    def __str__(self) -> str:
        return (
            f"Axis {self.left!r} -> {self.right!r} is degenerate "
            f"(difference norm {self.norm:.3g})"
        )
