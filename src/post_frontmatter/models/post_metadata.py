"""Pydantic model for the common blog post fields."""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field


class PostMetadata(BaseModel):
    model_config = ConfigDict(extra="allow")

    title: str = ""
    date: dt.datetime | dt.date | str | None = None  # str when the source date was malformed
    tags: list[str] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)
    draft: bool = False

    def sort_key(self) -> dt.datetime:
        value = self.date
        if isinstance(value, dt.datetime):
            if value.tzinfo is not None:
                value = value.astimezone(dt.timezone.utc).replace(tzinfo=None)
            return value
        if isinstance(value, dt.date):
            return dt.datetime(value.year, value.month, value.day)
        return dt.datetime.min
