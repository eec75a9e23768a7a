from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field


class Axis(BaseModel):
    model_config = ConfigDict(frozen=True)

    left: str = Field(..., description="Word at the negative end of the axis")
    right: str = Field(..., description="Word at the positive end of the axis")

    @property
    def key(self) -> tuple[str, str]:
        return (self.left, self.right)

    @property
    def label(self) -> str:
        return f"{self.left}→{self.right}"


class ProjectionResult(BaseModel):
    word: str
    score: float


AxisLike = Axis | Sequence[str]


def as_axis(axis: AxisLike) -> Axis:
    """Accept an ``Axis`` or a plain ``(left, right)`` pair."""
    if isinstance(axis, Axis):
        return axis
    if isinstance(axis, str) or len(axis) != 2:
        raise ValueError(f"An axis must be a (left, right) word pair, got {axis!r}")
    left, right = axis
    return Axis(left=left, right=right)
