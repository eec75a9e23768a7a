"""
Word-embedding projector.

Responsibilities:
- Look up word vectors in an externally supplied embedding matrix.
- Rank nearest neighbours and compute semantic directions between words.
- Project words onto axes (e.g. gender, sentiment) for bias analysis.
"""

from .embeddings.config import DEFAULT_ENGINE_CONFIG, EngineConfig
from .embeddings.engine import EmbeddingEngine
from .embeddings.errors import DegenerateAxisError, EmbeddingProjectorError, UnknownWordError
from .embeddings.vocabulary import NOT_FOUND, Vocabulary
from .projections.cache import DirectionCache
from .projections.models import Axis, ProjectionResult

__all__ = [
    "DEFAULT_ENGINE_CONFIG",
    "NOT_FOUND",
    "Axis",
    "DegenerateAxisError",
    "DirectionCache",
    "EmbeddingEngine",
    "EmbeddingProjectorError",
    "EngineConfig",
    "ProjectionResult",
    "UnknownWordError",
    "Vocabulary",
]
