"""Pydantic request models for the Emoji Math API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Prefix accepted in free-text combinations, e.g. "Combination: ➕ ✖️ ..."
_COMBINATION_PREFIXES = ("Combination:", "Комбинация:")


class NewGameRequest(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)
    seed: int | None = None


class CombinationPayload(BaseModel):
    """A combination given either as a list or as whitespace-separated text."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)
    symbols: list[str] | None = Field(default=None, max_length=64)
    combination: str | None = Field(default=None, max_length=1024)

    @model_validator(mode="after")
    def _require_one_form(self) -> CombinationPayload:
        if (self.symbols is None) == (self.combination is None):
            raise ValueError("Provide exactly one of 'symbols' or 'combination'")
        return self

    def to_symbols(self) -> list[str]:
        if self.symbols is not None:
            return list(self.symbols)
        text = (self.combination or "").strip()
        for prefix in _COMBINATION_PREFIXES:
            if text.startswith(prefix):
                text = text[len(prefix):]
                break
        return text.split()
