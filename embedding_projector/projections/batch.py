"""
Batched projection math over the full vocabulary.

All functions take already-computed unit directions; resolving words and
caching is left to the engine.
"""
from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import pandas as pd


def stack_directions(directions: Sequence[np.ndarray], dimension: int) -> np.ndarray:
    """Stack directions into a (num_axes, dimension) matrix."""
    if not directions:
        return np.empty((0, dimension))
    return np.stack(directions)


def project_all(directions: np.ndarray, embeddings: np.ndarray) -> np.ndarray:
    """Score every word on every axis: (num_axes, dim) @ (dim, vocab)."""
    return directions @ embeddings.T


def average_projection(scores: np.ndarray) -> np.ndarray:
    """Row-wise mean over the vocabulary, the per-axis baseline."""
    if scores.shape[1] == 0:
        return np.full(scores.shape[0], np.nan)
    return scores.mean(axis=1)


def baseline_corrected(scores: np.ndarray) -> np.ndarray:
    """Recentre each axis so its vocabulary-wide mean is zero."""
    return scores - average_projection(scores)[:, np.newaxis]


def to_frame(scores: np.ndarray, axis_labels: Sequence[str], words: Sequence[str]) -> pd.DataFrame:
    return pd.DataFrame(scores, index=pd.Index(list(axis_labels), name="axis"), columns=list(words))
