# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.exc import IntegrityError

from hugocms.domain.posts import (
    DuplicateSlugError,
    Post as DomainPost,
    PostRepository,
    PostSummary,
    derive_slug,
)
from hugocms.infrastructure.db import SessionFactory
from hugocms.infrastructure.db.models import Post, as_utc
from hugocms.infrastructure.unit_of_work import unit_of_work_scope
from hugocms.shared.logging import logger


class SqlAlchemyPostRepository(PostRepository):
    """Posts table; slug uniqueness is enforced by the unique index."""

    def __init__(self, session_factory: SessionFactory) -> None:
        self._session_factory = session_factory

    @staticmethod
    def _to_domain(row: Post) -> DomainPost:
        return DomainPost(
            id=row.id,
            title=row.title,
            content=row.content,
            date=as_utc(row.date),
            slug=row.slug,
        )

    def insert(self, title: str, content: str, date: datetime) -> DomainPost:
        slug = derive_slug(title)
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = Post(title=title, content=content, date=as_utc(date), slug=slug)
                session.add(row)
                session.flush()
                post = self._to_domain(row)
        except IntegrityError as exc:
            logger.info(f"posts.insert: duplicate slug={slug}")
            raise DuplicateSlugError(slug) from exc
        logger.debug(f"posts.insert: ok id={post.id} slug={slug}")
        return post

    def list(self) -> Sequence[PostSummary]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = (
                session.query(Post.id, Post.title, Post.date, Post.slug)
                .order_by(Post.date.desc(), Post.id.desc())
                .all()
            )
        return [
            PostSummary(id=row.id, title=row.title, date=as_utc(row.date), slug=row.slug)
            for row in rows
        ]

    def get_by_slug(self, slug: str) -> DomainPost | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.query(Post).filter(Post.slug == slug).first()
            return self._to_domain(row) if row else None
