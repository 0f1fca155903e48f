# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from enum import Enum
from http import HTTPStatus

from hugocms.shared.errors.base import DomainError


class AuthFailure(str, Enum):
    NOT_FOUND = "not_found"
    MISMATCH = "mismatch"


class InvalidCredentialsError(DomainError):
    """Raised for unknown users and wrong passwords alike.

    ``reason`` is kept for server-side logging only; the serialised error is
    identical for both cases.
    """

    code = "invalid_credentials"
    status = HTTPStatus.UNAUTHORIZED

    def __init__(self, reason: AuthFailure = AuthFailure.MISMATCH) -> None:
        super().__init__()
        self.reason = reason


class UnauthenticatedError(DomainError):
    code = "unauthorized"
    status = HTTPStatus.UNAUTHORIZED
