# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from hugocms.application.services.credentials import CredentialStore
from hugocms.application.services.sessions import SessionAuthority


class LoginUserUseCase:
    def __init__(self, *, credentials: CredentialStore, sessions: SessionAuthority) -> None:
        self._credentials = credentials
        self._sessions = sessions

    def execute(self, username: str, password: str) -> str:
        # Raises InvalidCredentialsError before any session exists.
        user_id = self._credentials.verify(username, password)
        return self._sessions.login(user_id)
