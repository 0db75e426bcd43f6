"""Run configuration shared by every pipeline component."""

from __future__ import annotations

import codecs

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Spellings accepted for a tab separator on the command line
_TAB_ALIASES = {"\\t", "tab", "TAB"}


class TableConfig(BaseModel):
    """Immutable options for one csvtable run."""

    model_config = ConfigDict(frozen=True)

    columns: str | None = None
    delimiter: str | None = None
    header: bool = True
    line_numbers: bool = False
    output_separator: str | None = None
    quotechar: str = '"'
    sniff_limit: int = Field(default=1000, ge=0)
    max_field_size: int = 0
    wide_chars: bool = True
    encoding: str = "utf-8"

    @field_validator("delimiter")
    @classmethod
    def single_char_delimiter(cls, v: str | None) -> str | None:
        """Normalize tab aliases and require one character."""

        if v is None:
            return v
        if v in _TAB_ALIASES:
            return "\t"
        if len(v) != 1:
            raise ValueError(f"Delimiter must be a single character, got {v!r}")
        return v

    @field_validator("quotechar")
    @classmethod
    def single_char_quote(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError(f"Quote character must be a single character, got {v!r}")
        return v

    @field_validator("encoding")
    @classmethod
    def known_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown encoding: {v!r}") from None
        return v

    @model_validator(mode="after")
    def distinct_quote(self) -> TableConfig:
        if self.delimiter is not None and self.delimiter == self.quotechar:
            raise ValueError("Delimiter and quote character must differ")
        return self

    @property
    def truncate(self) -> bool:
        """Negative max field size: one printed line per row."""

        return self.max_field_size < 0

    @property
    def width_limit(self) -> int | None:
        """Column width cap, or None when unlimited."""

        return abs(self.max_field_size) or None


__all__ = ["TableConfig"]
