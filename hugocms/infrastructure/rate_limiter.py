# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass

from hugocms.shared.logging import logger

from .state_store import StateStore

GENERAL_BUCKET = "general"
AUTH_BUCKET = "auth"


@dataclass(slots=True, frozen=True)
class BucketPolicy:
    limit: int
    window_seconds: float


class RateLimiter:
    """Fixed-window request counters keyed by (bucket, client)."""

    def __init__(self, store: StateStore, policies: Mapping[str, BucketPolicy]) -> None:
        self._store = store
        self._policies = dict(policies)

    @staticmethod
    def _key(client_key: str, bucket: str) -> str:
        return f"rl:{bucket}:{client_key}"

    def policy(self, bucket: str) -> BucketPolicy:
        try:
            return self._policies[bucket]
        except KeyError:
            raise KeyError(f"unknown rate limit bucket: {bucket}") from None

    def allow(self, client_key: str, bucket: str) -> bool:
        policy = self.policy(bucket)
        count = self._store.increment(self._key(client_key, bucket), policy.window_seconds)
        if count > policy.limit:
            logger.warning(
                f"rate_limit: rejected bucket={bucket} client={client_key} "
                f"count={count} limit={policy.limit}"
            )
            return False
        return True

    def retry_after(self, client_key: str, bucket: str) -> int:
        return max(1, math.ceil(self._store.ttl(self._key(client_key, bucket))))


__all__ = ["AUTH_BUCKET", "GENERAL_BUCKET", "BucketPolicy", "RateLimiter"]
