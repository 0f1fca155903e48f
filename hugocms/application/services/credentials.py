# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from hugocms.domain.users.exceptions import AuthFailure, InvalidCredentialsError
from hugocms.domain.users.repositories import PasswordHasher, UserRepository
from hugocms.shared.logging import logger


class CredentialStore:
    """Verifies (username, password) pairs against stored hashes."""

    def __init__(self, *, users: UserRepository, password_hasher: PasswordHasher) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._dummy_hash: str | None = None

    def _burn_hash_check(self, password: str) -> None:
        # Unknown usernames still pay for one hash check.
        if self._dummy_hash is None:
            self._dummy_hash = self._password_hasher.hash("not-a-real-password")
        self._password_hasher.verify(password, self._dummy_hash)

    def verify(self, username: str, password: str) -> int:
        user = self._users.find_by_username(username)
        if user is None:
            self._burn_hash_check(password)
            logger.info("credentials: verify failed reason=not_found")
            raise InvalidCredentialsError(AuthFailure.NOT_FOUND)

        if not self._password_hasher.verify(password, user.password_hash):
            logger.info(f"credentials: verify failed reason=mismatch user_id={user.id}")
            raise InvalidCredentialsError(AuthFailure.MISMATCH)

        return user.id

    def ensure_user(self, username: str, password: str) -> tuple[int, bool]:
        """Create ``username`` if absent; an existing account is left untouched."""

        existing = self._users.find_by_username(username)
        if existing is not None:
            return existing.id, False
        user = self._users.add(username, self._password_hasher.hash(password))
        return user.id, True
