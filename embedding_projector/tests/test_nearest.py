import asyncio

import numpy as np
import pytest

from embedding_projector import EmbeddingEngine, EngineConfig, UnknownWordError

WORDS = ["king", "queen", "man", "woman"]
VECTORS = np.array([[5.0, 5.0], [5.0, 6.0], [1.0, 1.0], [1.0, 2.0]])


def _engine(**config) -> EmbeddingEngine:
    return EmbeddingEngine(VECTORS, WORDS, EngineConfig(**config))


def test_nearest_returns_k_words_best_first():
    engine = _engine()
    result = asyncio.run(engine.nearest("man", 4))
    assert result == ["queen", "king", "woman", "man"]


def test_nearest_scores_are_non_increasing():
    rng = np.random.default_rng(7)
    vectors = rng.normal(size=(50, 8))
    words = [f"w{i}" for i in range(50)]
    engine = EmbeddingEngine(vectors, words)

    result = asyncio.run(engine.nearest("w3", 10))
    assert len(result) == 10
    scores = [float(vectors[words.index(w)] @ vectors[3]) for w in result]
    assert scores == sorted(scores, reverse=True)
    assert scores[0] == pytest.approx(float(np.max(vectors @ vectors[3])))


def test_nearest_includes_query_word_when_it_ranks():
    """Plain dot product: king's self-score (50) is below queen's (55)."""
    engine = _engine()
    assert asyncio.run(engine.nearest("king", 2)) == ["queen", "king"]
    assert asyncio.run(engine.nearest("king", 1)) == ["queen"]


def test_nearest_clamps_k_to_vocabulary_size():
    engine = _engine()
    result = asyncio.run(engine.nearest("woman", 10))
    assert sorted(result) == sorted(WORDS)


def test_nearest_zero_k_is_empty():
    assert asyncio.run(_engine().nearest("man", 0)) == []


def test_nearest_negative_k_rejected():
    with pytest.raises(ValueError):
        asyncio.run(_engine().nearest("man", -1))


def test_nearest_unknown_word_raises():
    with pytest.raises(UnknownWordError):
        asyncio.run(_engine().nearest("prince", 2))


def test_cosine_similarity_ranks_by_angle():
    vectors = np.array([[1.0, 0.0], [10.0, 1.0], [0.0, 1.0]])
    words = ["x", "long", "y"]
    dot_engine = EmbeddingEngine(vectors, words)
    cosine_engine = EmbeddingEngine(vectors, words, EngineConfig(similarity="cosine"))

    assert asyncio.run(dot_engine.nearest("x", 1)) == ["long"]
    assert asyncio.run(cosine_engine.nearest("x", 1)) == ["x"]
