# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime

from hugocms.domain.users.entities import Session as DomainSession
from hugocms.domain.users.entities import User as DomainUser
from hugocms.domain.users.repositories import SessionRepository, UserRepository
from hugocms.infrastructure.db import SessionFactory
from hugocms.infrastructure.db.models import SessionToken, User, as_utc
from hugocms.infrastructure.unit_of_work import unit_of_work_scope


def _user_to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        password_hash=row.password_hash,
        created_at=as_utc(row.created_at),
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: SessionFactory) -> None:
        self._session_factory = session_factory

    def find_by_username(self, username: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.query(User).filter(User.username == username).first()
            return _user_to_domain(row) if row else None

    def add(self, username: str, password_hash: str) -> DomainUser:
        with unit_of_work_scope(self._session_factory) as session:
            row = User(username=username, password_hash=password_hash)
            session.add(row)
            session.flush()
            session.refresh(row)
            return _user_to_domain(row)


class SqlAlchemySessionRepository(SessionRepository):
    def __init__(self, session_factory: SessionFactory) -> None:
        self._session_factory = session_factory

    def add(self, session_: DomainSession) -> DomainSession:
        with unit_of_work_scope(self._session_factory) as session:
            session.add(
                SessionToken(
                    user_id=session_.user_id,
                    token=session_.token,
                    issued_at=session_.issued_at,
                    expires_at=session_.expires_at,
                )
            )
        return session_

    def get(self, token: str) -> DomainSession | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.query(SessionToken).filter(SessionToken.token == token).first()
            if not row:
                return None
            return DomainSession(
                user_id=row.user_id,
                token=row.token,
                issued_at=as_utc(row.issued_at),
                expires_at=as_utc(row.expires_at),
            )

    def delete(self, token: str) -> None:
        with unit_of_work_scope(self._session_factory) as session:
            session.query(SessionToken).filter(SessionToken.token == token).delete()

    def purge_expired(self, now: datetime) -> int:
        with unit_of_work_scope(self._session_factory) as session:
            return (
                session.query(SessionToken)
                .filter(SessionToken.expires_at <= now)
                .delete(synchronize_session=False)
            )
