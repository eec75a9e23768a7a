from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

SIMILARITIES = ("dot", "cosine")


def _optional_int(value: str | None) -> int | None:
    if value is None or not value.strip():
        return None
    return int(value)


@dataclass(frozen=True)
class EngineConfig:
    degenerate_epsilon: float = float(os.getenv("EMBEDDING_DEGENERATE_EPSILON", "1e-12"))
    direction_cache_size: int | None = _optional_int(os.getenv("EMBEDDING_DIRECTION_CACHE_SIZE"))
    similarity: str = os.getenv("EMBEDDING_SIMILARITY", "dot")

    def __post_init__(self) -> None:
        if self.similarity not in SIMILARITIES:
            raise ValueError(
                f"Unknown similarity {self.similarity!r}; expected one of {SIMILARITIES}"
            )
        if self.direction_cache_size is not None and self.direction_cache_size < 1:
            raise ValueError("direction_cache_size must be positive or None")


DEFAULT_ENGINE_CONFIG = EngineConfig()
