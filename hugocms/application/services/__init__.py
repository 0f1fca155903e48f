# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .credentials import CredentialStore
from .password_hashing import WerkzeugPasswordHasher
from .sessions import DEFAULT_SESSION_TTL, SessionAuthority, utc_now

__all__ = [
    "DEFAULT_SESSION_TTL",
    "CredentialStore",
    "SessionAuthority",
    "WerkzeugPasswordHasher",
    "utc_now",
]
