"""Pydantic models for csvtable configuration and layout."""

from .config import TableConfig
from .layout import ColumnLayout, RenderState

__all__ = [
    "ColumnLayout",
    "RenderState",
    "TableConfig",
]
