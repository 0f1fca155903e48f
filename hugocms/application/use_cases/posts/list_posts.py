# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from hugocms.domain.posts import PostRepository, PostSummary


class ListPostsUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self) -> Sequence[PostSummary]:
        return self._posts.list()
