"""Use-case for revoking sessions."""

from __future__ import annotations

from hugocms.application.services.sessions import SessionAuthority


class LogoutUserUseCase:
    def __init__(self, *, sessions: SessionAuthority) -> None:
        self._sessions = sessions

    def execute(self, token: str | None) -> None:
        self._sessions.destroy(token)
