# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Hugo content file adapter."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from hugocms.domain.posts import ContentPublishError, ContentPublisher, format_timestamp
from hugocms.shared.logging import logger
from hugocms.utils.fs import write_text_atomic


def render_content_file(title: str, content: str, date: datetime) -> str:
    """Front-matter block followed by a blank line and the raw body."""

    # JSON string escaping is valid YAML double-quoted scalar syntax.
    quoted_title = json.dumps(title, ensure_ascii=False)
    return (
        "---\n"
        f"title: {quoted_title}\n"
        f"date: {format_timestamp(date)}\n"
        "draft: false\n"
        "---\n"
        "\n"
        f"{content}"
    )


class HugoContentPublisher(ContentPublisher):
    """Writes ``<root>/<slug>.<ext>`` files, replacing them atomically."""

    def __init__(self, root: Path, extension: str = "md") -> None:
        self._root = Path(root)
        self._extension = extension.lstrip(".")

    def path_for(self, slug: str) -> Path:
        root = self._root.resolve()
        path = (root / f"{slug}.{self._extension}").resolve()
        if path.parent != root:
            msg = "Attempted directory traversal outside content root"
            raise ValueError(msg)
        return path

    def publish(self, slug: str, title: str, content: str, date: datetime) -> Path:
        if not slug:
            raise ValueError("slug must not be empty")
        path = self.path_for(slug)
        document = render_content_file(title, content, date)
        try:
            write_text_atomic(path, document)
        except OSError as exc:
            logger.error(f"publisher: write failed path={path} error={exc!r}")
            raise ContentPublishError(slug) from exc
        logger.info(f"publisher: wrote path={path} size={len(document)}")
        return path


__all__ = ["HugoContentPublisher", "render_content_file"]
