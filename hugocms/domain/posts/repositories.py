# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from typing import Protocol

from .entities import Post, PostSummary


class PostRepository(Protocol):
    def insert(self, title: str, content: str, date: datetime) -> Post: ...
    def list(self) -> Sequence[PostSummary]: ...
    def get_by_slug(self, slug: str) -> Post | None: ...


class ContentPublisher(Protocol):
    def publish(self, slug: str, title: str, content: str, date: datetime) -> Path: ...
