# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .hugo_publisher import HugoContentPublisher, render_content_file

__all__ = ["HugoContentPublisher", "render_content_file"]
