# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from hugocms.shared.errors.base import DomainError, InfrastructureError


class InvalidPostError(DomainError):
    code = "title_and_content_required"
    status = HTTPStatus.BAD_REQUEST


class DuplicateSlugError(DomainError):
    code = "duplicate_slug"
    status = HTTPStatus.CONFLICT

    def __init__(self, slug: str) -> None:
        super().__init__(context={"slug": slug})
        self.slug = slug


class ContentPublishError(InfrastructureError):
    def __init__(self, slug: str) -> None:
        super().__init__("content_publish_failed", context={"slug": slug})
        self.slug = slug


class PartialPublishError(InfrastructureError):
    """The post row is committed but its content file could not be written."""

    def __init__(self, post_id: int, slug: str) -> None:
        super().__init__("content_publish_failed", context={"id": post_id, "slug": slug})
        self.post_id = post_id
        self.slug = slug
