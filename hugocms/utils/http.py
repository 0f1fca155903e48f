# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Request, request


def client_ip(req: Request | None = None, *, trust_proxy: bool = False) -> str:
    """Address used to key per-client state; proxy headers only when trusted."""

    req = req or request
    if trust_proxy:
        forwarded = req.headers.get("X-Forwarded-For", "").split(",")[0].strip()
        if forwarded:
            return forwarded
    return req.remote_addr or "unknown"


def bearer_token(req: Request | None = None) -> str:
    req = req or request
    auth = req.headers.get("Authorization", "")
    if auth.startswith("Bearer "):
        return auth[7:].strip()
    return ""
