"""Pydantic model for parser configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ParserOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    strict: bool = True  # False skips malformed lines instead of failing
