# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any


@dataclass(slots=True, frozen=True)
class PostSummary:
    """Row shape used by the administration listing."""

    id: int
    title: str
    date: datetime
    slug: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "date": format_timestamp(self.date),
            "slug": self.slug,
        }


@dataclass(slots=True, frozen=True)
class Post:

    id: int
    title: str
    content: str
    date: datetime
    slug: str

    def summary(self) -> PostSummary:
        return PostSummary(id=self.id, title=self.title, date=self.date, slug=self.slug)


def format_timestamp(value: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a ``Z`` suffix."""

    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
