from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Sequence

import numpy as np
import pandas as pd
from sklearn.metrics.pairwise import cosine_similarity

from ..projections.batch import (
    average_projection,
    baseline_corrected,
    project_all,
    stack_directions,
    to_frame,
)
from ..projections.cache import AxisKey, DirectionCache
from ..projections.models import Axis, AxisLike, ProjectionResult, as_axis
from .config import DEFAULT_ENGINE_CONFIG, EngineConfig
from .errors import DegenerateAxisError, UnknownWordError
from .vocabulary import NOT_FOUND, Vocabulary

logger = logging.getLogger(__name__)


def _dot(vector: np.ndarray, direction: np.ndarray) -> float:
    return float(np.dot(vector, direction))


def _top_k(scores: np.ndarray, k: int) -> list[int]:
    """Indices of the ``k`` highest scores, best first."""
    n = scores.shape[0]
    k = min(k, n)
    if k == 0:
        return []
    if k < n:
        candidates = np.argpartition(-scores, k - 1)[:k]
    else:
        candidates = np.arange(n)
    order = np.argsort(-scores[candidates], kind="stable")
    return candidates[order].tolist()


class EmbeddingEngine:
    """
    Query engine over a fixed embedding matrix and its vocabulary.

    Row ``i`` of ``embeddings`` is the vector of ``words[i]``. The caller
    guarantees the words are unique and match the row count; neither is
    checked. The matrix is held through a read-only view.

    Only axis directions are cached (see ``direction_cache``). ``nearest``,
    ``project`` and ``project_nearest`` are coroutines: the numeric work runs
    in a worker thread and the coroutine resumes once the result has been
    read back into Python values.
    """

    def __init__(
        self,
        embeddings: np.ndarray,
        words: Iterable[str],
        config: EngineConfig = DEFAULT_ENGINE_CONFIG,
    ) -> None:
        matrix = np.asarray(embeddings)
        if matrix.ndim != 2:
            raise ValueError(f"embeddings must be 2-D, got shape {matrix.shape}")
        view = matrix.view()
        view.setflags(write=False)

        self._embeddings = view
        self._vocabulary = words if isinstance(words, Vocabulary) else Vocabulary(words)
        self._config = config
        self.direction_cache = DirectionCache(max_size=config.direction_cache_size)

    @property
    def embeddings(self) -> np.ndarray:
        return self._embeddings

    @property
    def vocabulary(self) -> Vocabulary:
        return self._vocabulary

    @property
    def config(self) -> EngineConfig:
        return self._config

    @property
    def dimension(self) -> int:
        return self._embeddings.shape[1]

    def __len__(self) -> int:
        return len(self._vocabulary)

    # -----------------------------------------------------------------------
    # Lookup
    # -----------------------------------------------------------------------

    def _index(self, word: str) -> int:
        index = self._vocabulary.index_of(word)
        if index == NOT_FOUND:
            raise UnknownWordError(word)
        return index

    def has_word(self, word: str) -> bool:
        return word in self._vocabulary

    def get_embedding(self, word: str) -> np.ndarray:
        """Return a copy of ``word``'s row; raises ``UnknownWordError``."""
        return self._embeddings[self._index(word)].copy()

    # -----------------------------------------------------------------------
    # Directions
    # -----------------------------------------------------------------------

    def compute_direction(self, word1: str, word2: str) -> np.ndarray:
        """Unit vector pointing from ``word1`` to ``word2``. Never cached."""
        difference = self.get_embedding(word2) - self.get_embedding(word1)
        norm = float(np.linalg.norm(difference))
        if not norm >= self._config.degenerate_epsilon:
            logger.warning("Rejecting degenerate axis %r -> %r (norm=%g)", word1, word2, norm)
            raise DegenerateAxisError(word1, word2, norm)
        return difference / norm

    def _cached_direction(self, key: AxisKey) -> np.ndarray:
        direction = self.direction_cache.get(key)
        if direction is None:
            logger.debug("Direction cache miss for %r -> %r", *key)
            direction = self.direction_cache.set(key, self.compute_direction(*key))
        return direction

    # -----------------------------------------------------------------------
    # Nearest neighbours
    # -----------------------------------------------------------------------

    def _similarities(self, index: int) -> np.ndarray:
        query = self._embeddings[index]
        if self._config.similarity == "cosine":
            return cosine_similarity(self._embeddings, query.reshape(1, -1)).ravel()
        return self._embeddings @ query

    def _nearest_indices(self, index: int, k: int) -> list[int]:
        return _top_k(self._similarities(index), k)

    async def nearest(self, word: str, k: int) -> list[str]:
        """
        The ``k`` words most similar to ``word``, most similar first.

        Exact brute-force ranking over the whole vocabulary. The query word
        is not excluded. Order among exactly equal scores is unspecified.
        """
        if k < 0:
            raise ValueError(f"k must be non-negative, got {k}")
        index = self._index(word)
        indices = await asyncio.to_thread(self._nearest_indices, index, k)
        return [self._vocabulary.word_at(i) for i in indices]

    # -----------------------------------------------------------------------
    # Projection
    # -----------------------------------------------------------------------

    async def project(self, word: str, axis_left: str, axis_right: str) -> float:
        """Scalar projection of ``word`` onto the cached axis direction."""
        vector = self._embeddings[self._index(word)]
        direction = self._cached_direction((axis_left, axis_right))
        return await asyncio.to_thread(_dot, vector, direction)

    async def project_nearest(
        self, word: str, axis_left: str, axis_right: str, k: int
    ) -> list[ProjectionResult]:
        """
        Project the ``k`` nearest neighbours of ``word`` onto an axis.

        Results are sorted by ascending score; the sort is stable, so equal
        scores keep their neighbour-rank order.
        """
        # Resolve the axis before ranking so unknown axis words fail fast.
        self._cached_direction((axis_left, axis_right))
        neighbours = await self.nearest(word, k)

        results: list[ProjectionResult] = []
        for neighbour in neighbours:
            score = await self.project(neighbour, axis_left, axis_right)
            results.append(ProjectionResult(word=neighbour, score=score))
        results.sort(key=lambda r: r.score)
        return results

    # -----------------------------------------------------------------------
    # Batch axis statistics
    # -----------------------------------------------------------------------

    def _direction_matrix(
        self, axes: Sequence[AxisLike], use_cache: bool
    ) -> tuple[list[Axis], np.ndarray]:
        resolved = [as_axis(axis) for axis in axes]
        if use_cache:
            directions = [self._cached_direction(axis.key) for axis in resolved]
        else:
            directions = [self.compute_direction(axis.left, axis.right) for axis in resolved]
        return resolved, stack_directions(directions, self.dimension)

    def compute_projections(
        self, axes: Sequence[AxisLike], use_cache: bool = False
    ) -> np.ndarray:
        """
        Project every vocabulary word onto every axis.

        Returns a (len(axes), vocabulary size) matrix. With ``use_cache`` the
        axis directions are read from and stored in ``direction_cache``;
        otherwise they are recomputed and the cache is left untouched.

        Directions are resolved axis by axis. If a later axis fails, the
        directions already cached for earlier axes stay in the cache.
        """
        _, directions = self._direction_matrix(axes, use_cache)
        logger.debug("Projecting %d words onto %d axes", len(self), directions.shape[0])
        return project_all(directions, self._embeddings)

    def compute_average_word_similarity(
        self, axes: Sequence[AxisLike], use_cache: bool = False
    ) -> np.ndarray:
        """
        Average projection of the whole vocabulary on each axis.

        This is the bias term subtracted when projections are later centred.
        """
        return average_projection(self.compute_projections(axes, use_cache=use_cache))

    def compute_corrected_projections(
        self, axes: Sequence[AxisLike], use_cache: bool = False
    ) -> np.ndarray:
        return baseline_corrected(self.compute_projections(axes, use_cache=use_cache))

    def projections_frame(
        self, axes: Sequence[AxisLike], corrected: bool = False, use_cache: bool = False
    ) -> pd.DataFrame:
        """Projections labelled by axis (index) and word (columns)."""
        resolved, directions = self._direction_matrix(axes, use_cache)
        scores = project_all(directions, self._embeddings)
        if corrected:
            scores = baseline_corrected(scores)
        return to_frame(scores, [axis.label for axis in resolved], self._vocabulary.words)
