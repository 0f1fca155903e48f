# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .create_post import CreatePostInput, CreatePostOutput, CreatePostUseCase
from .list_posts import ListPostsUseCase

__all__ = ["CreatePostInput", "CreatePostOutput", "CreatePostUseCase", "ListPostsUseCase"]
