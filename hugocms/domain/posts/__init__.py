# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Post, PostSummary, format_timestamp
from .exceptions import (
    ContentPublishError,
    DuplicateSlugError,
    InvalidPostError,
    PartialPublishError,
)
from .repositories import ContentPublisher, PostRepository
from .slugs import derive_slug

__all__ = [
    "ContentPublishError",
    "ContentPublisher",
    "DuplicateSlugError",
    "InvalidPostError",
    "PartialPublishError",
    "Post",
    "PostRepository",
    "PostSummary",
    "derive_slug",
    "format_timestamp",
]
