"""
Redis-backed key-value storage for deployments where REDIS_URL is set.
Implements the same interface as src.database.local_storage (in-memory).
"""

from __future__ import annotations

from typing import Iterator, Optional

import redis


class RedisStorage:
    """
    Redis-backed storage. Keys are namespaced so several marketplaces can
    share one Redis database.
    """

    def __init__(self, url: str, namespace: str = "marketplace") -> None:
        self._client = redis.from_url(url, decode_responses=True)
        self._namespace = namespace

    def _key(self, key: str) -> str:
        return f"{self._namespace}:{key}"

    def get_item(self, key: str) -> Optional[str]:
        raw = self._client.get(self._key(key))
        if raw is None:
            return None
        return raw

    def set_item(self, key: str, value: str) -> None:
        self._client.set(self._key(key), str(value))

    def remove_item(self, key: str) -> None:
        self._client.delete(self._key(key))

    def clear(self) -> None:
        for key in self._client.scan_iter(match=self._key("*")):
            self._client.delete(key)

    def keys(self) -> Iterator[str]:
        prefix = self._key("")
        return iter([k[len(prefix):] for k in self._client.scan_iter(match=self._key("*"))])

    def ping(self) -> bool:
        try:
            return self._client.ping()
        except Exception:
            return False
