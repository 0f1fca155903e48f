# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps

from flask import Blueprint, current_app

from hugocms.infrastructure.rate_limiter import GENERAL_BUCKET, RateLimiter
from hugocms.shared.errors import RateLimitedError
from hugocms.utils.http import client_ip

EXTENSION_KEY = "hugocms.rate_limiter"


def install_rate_limiter(app, limiter: RateLimiter | None, *, trust_proxy: bool = False) -> None:
    if limiter is None:
        return
    app.extensions[EXTENSION_KEY] = (limiter, trust_proxy)


def enforce_rate_limit(*buckets: str) -> None:
    """Count the current request against each bucket; stops at the first rejection."""

    installed = current_app.extensions.get(EXTENSION_KEY)
    if installed is None:
        return
    limiter, trust_proxy = installed
    key = client_ip(trust_proxy=trust_proxy)
    for bucket in buckets:
        if not limiter.allow(key, bucket):
            raise RateLimitedError(bucket, limiter.retry_after(key, bucket))


def rate_limit(*buckets: str):
    def decorator(f: Callable):
        @wraps(f)
        def wrapper(*args, **kwargs):
            enforce_rate_limit(*buckets)
            return f(*args, **kwargs)

        return wrapper

    return decorator


def limit_blueprint(bp: Blueprint, bucket: str = GENERAL_BUCKET) -> Blueprint:
    @bp.before_request
    def _general_limit() -> None:
        enforce_rate_limit(bucket)

    return bp


__all__ = ["enforce_rate_limit", "install_rate_limiter", "limit_blueprint", "rate_limit"]
