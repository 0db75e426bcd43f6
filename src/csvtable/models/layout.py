"""Frozen layout handed from the profiler to the renderer."""

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class ColumnLayout(BaseModel):
    """Final width and alignment of one output column."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(default=0, ge=0)
    numeric: bool = False


class RenderState(BaseModel):
    """Everything the renderer needs, fixed once profiling is done."""

    model_config = ConfigDict(frozen=True)

    columns: Tuple[ColumnLayout, ...] = ()
    header: bool = False
    number_width: int = 0  # 0 = no line-number column
    truncate: bool = False
    width_limit: int | None = None
    join: str | None = None  # None = box drawing

    @property
    def line_numbers(self) -> bool:
        return self.number_width > 0


__all__ = ["ColumnLayout", "RenderState"]
