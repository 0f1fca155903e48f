# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .bootstrap_admin import BootstrapAdminUseCase
from .login_user import LoginUserUseCase
from .logout_user import LogoutUserUseCase

__all__ = ["BootstrapAdminUseCase", "LoginUserUseCase", "LogoutUserUseCase"]
