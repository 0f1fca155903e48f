# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Session token transport and request authentication helpers."""

from __future__ import annotations

from flask import g, request, session

from hugocms.application.services.sessions import SessionAuthority
from hugocms.shared.logging import logger
from hugocms.utils.http import bearer_token

SESSION_TOKEN_KEY = "token"


def current_token() -> str:
    """Token from the signed session cookie, or a Bearer header for API clients."""

    token = session.get(SESSION_TOKEN_KEY, "")
    return token or bearer_token()


def store_token(token: str) -> None:
    session.clear()
    session[SESSION_TOKEN_KEY] = token
    session.permanent = True


def clear_token() -> None:
    session.clear()


def authenticate(sessions: SessionAuthority) -> int | None:
    """Resolve the current user id, recording it on ``g`` for request logs."""

    token = current_token()
    if not token:
        logger.debug(f"No session on {request.method} {request.path}")
        return None

    user_id = sessions.validate(token)
    if user_id is None:
        logger.warning(
            f"Auth failed (session not found/expired) on {request.method} {request.path}"
        )
        return None

    g.user_id = user_id
    return user_id


__all__ = ["authenticate", "clear_token", "current_token", "store_token"]
