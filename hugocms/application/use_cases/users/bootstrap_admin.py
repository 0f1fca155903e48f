# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from hugocms.application.services.credentials import CredentialStore
from hugocms.shared.logging import logger


class BootstrapAdminUseCase:
    """Creates the privileged account on first start."""

    def __init__(self, *, credentials: CredentialStore) -> None:
        self._credentials = credentials

    def execute(self, username: str, password: str) -> int:
        user_id, created = self._credentials.ensure_user(username, password)
        if created:
            logger.info(f"admin_setup: created user '{username}' id={user_id}")
        else:
            logger.info(f"admin_setup: user '{username}' already exists")
        return user_id
