# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Create-post orchestration: session check, row insert, content file."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from hugocms.application.services.sessions import SessionAuthority, utc_now
from hugocms.domain.posts import (
    ContentPublishError,
    ContentPublisher,
    InvalidPostError,
    PartialPublishError,
    PostRepository,
    derive_slug,
)
from hugocms.domain.users.exceptions import UnauthenticatedError
from hugocms.shared.logging import logger


@dataclass(slots=True, frozen=True)
class CreatePostInput:
    title: str
    content: str


@dataclass(slots=True, frozen=True)
class CreatePostOutput:
    id: int
    slug: str

    def to_dict(self) -> dict[str, int | str]:
        return {"id": self.id, "slug": self.slug}


class CreatePostUseCase:
    """Runs AuthCheck -> Validate -> PersistRow -> PersistFile.

    The database row is the source of truth. When the content file cannot be
    written the row stays committed and ``PartialPublishError`` is raised; no
    rollback or retry is attempted.
    """

    def __init__(
        self,
        *,
        sessions: SessionAuthority,
        posts: PostRepository,
        publisher: ContentPublisher,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._sessions = sessions
        self._posts = posts
        self._publisher = publisher
        self._clock = clock

    @staticmethod
    def _validate(data: CreatePostInput) -> str:
        if not data.title.strip() or not data.content:
            raise InvalidPostError()
        try:
            data.title.encode("utf-8")
            data.content.encode("utf-8")
        except UnicodeEncodeError:
            # Lone surrogates from JSON escapes cannot be stored or written.
            raise InvalidPostError(code="invalid_encoding") from None
        slug = derive_slug(data.title)
        if not slug:
            raise InvalidPostError(code="title_not_sluggable")
        return slug

    def execute(self, token: str | None, data: CreatePostInput) -> CreatePostOutput:
        user_id = self._sessions.validate(token)
        if user_id is None:
            raise UnauthenticatedError()

        self._validate(data)

        post = self._posts.insert(data.title, data.content, self._clock())

        try:
            path = self._publisher.publish(post.slug, post.title, post.content, post.date)
        except ContentPublishError as exc:
            logger.error(
                f"posts.create: partial failure id={post.id} slug={post.slug} "
                f"user={user_id}: row committed, content file missing"
            )
            raise PartialPublishError(post.id, post.slug) from exc

        logger.info(f"posts.create: ok id={post.id} slug={post.slug} user={user_id} file={path}")
        return CreatePostOutput(id=post.id, slug=post.slug)
