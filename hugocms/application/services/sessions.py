# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from hugocms.domain.users.entities import Session
from hugocms.domain.users.repositories import SessionRepository
from hugocms.shared.logging import logger

DEFAULT_SESSION_TTL = timedelta(hours=24)


def utc_now() -> datetime:
    return datetime.now(UTC)


class SessionAuthority:
    """Issues and checks opaque session tokens with a fixed lifetime.

    Sessions are not sliding: ``validate`` never moves ``expires_at``.
    """

    def __init__(
        self,
        *,
        sessions: SessionRepository,
        ttl: timedelta = DEFAULT_SESSION_TTL,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._sessions = sessions
        self._ttl = ttl
        self._clock = clock

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def login(self, user_id: int) -> str:
        now = self._clock()
        purged = self._sessions.purge_expired(now)
        if purged:
            logger.debug(f"sessions: purged {purged} expired sessions")

        token = secrets.token_urlsafe(48)
        session = Session(
            user_id=user_id,
            token=token,
            issued_at=now,
            expires_at=now + self._ttl,
        )
        self._sessions.add(session)
        logger.info(
            f"sessions: issued user={user_id} exp={session.expires_at.isoformat()} tok={token[:8]}…"
        )
        return token

    def validate(self, token: str | None) -> int | None:
        if not token:
            return None
        session = self._sessions.get(token)
        if session is None:
            return None
        if session.is_expired(self._clock()):
            logger.debug(f"sessions: expired user={session.user_id} tok={token[:8]}…")
            return None
        return session.user_id

    def destroy(self, token: str | None) -> None:
        if token:
            self._sessions.delete(token)
