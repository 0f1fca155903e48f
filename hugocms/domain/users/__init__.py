# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Session, User
from .exceptions import AuthFailure, InvalidCredentialsError, UnauthenticatedError
from .repositories import PasswordHasher, SessionRepository, UserRepository

__all__ = [
    "AuthFailure",
    "InvalidCredentialsError",
    "PasswordHasher",
    "Session",
    "SessionRepository",
    "UnauthenticatedError",
    "User",
    "UserRepository",
]
