# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.posts import (
    CreatePostInput,
    CreatePostOutput,
    CreatePostUseCase,
    ListPostsUseCase,
)
from .use_cases.users import BootstrapAdminUseCase, LoginUserUseCase, LogoutUserUseCase

__all__ = [
    "BootstrapAdminUseCase",
    "CreatePostInput",
    "CreatePostOutput",
    "CreatePostUseCase",
    "ListPostsUseCase",
    "LoginUserUseCase",
    "LogoutUserUseCase",
]
