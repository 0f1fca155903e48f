# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re

_NON_SLUG_RUN = re.compile(r"[^a-z0-9]+")


def derive_slug(title: str) -> str:
    """Map a post title to a URL- and filesystem-safe identifier.

    Lower-cases the title and collapses every run of characters outside
    ``[a-z0-9]`` into a single hyphen; hyphens at either end are dropped.
    The result may be empty for titles with no ASCII letters or digits.
    Two titles that normalise to the same slug collide; callers reject the
    second one rather than adding a suffix.
    """

    return _NON_SLUG_RUN.sub("-", title.lower()).strip("-")


__all__ = ["derive_slug"]
