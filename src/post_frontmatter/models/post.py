"""Parsed post record."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from types import MappingProxyType
from typing import Mapping, TypeAlias

MetadataValue: TypeAlias = str | bool | int | float | date | tuple[str, ...]


@dataclass(frozen=True)
class Post:
    metadata: Mapping[str, MetadataValue]
    body: str

    def __post_init__(self) -> None:
        frozen: dict[str, MetadataValue] = {}
        for key, value in self.metadata.items():
            frozen[key] = tuple(value) if isinstance(value, list) else value
        object.__setattr__(self, "metadata", MappingProxyType(frozen))

    def __hash__(self) -> int:
        return hash((frozenset(self.metadata.items()), self.body))
