"""
Lightweight in-memory key-value storage used for local development and tests.

Mirrors the browser-style local storage interface the stores are written
against: string keys, string values. Values are whatever the caller
serialized (JSON in practice); this layer never inspects them.
"""

from __future__ import annotations

from typing import Dict, Iterator, Optional


class LocalStorage:
    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        # Simple in-memory store: key -> serialized value
        self._items: Dict[str, str] = dict(initial or {})

    # --- Item helpers used by the stores ----------------------------------------

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = str(value)

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def clear(self) -> None:
        self._items.clear()

    def keys(self) -> Iterator[str]:
        return iter(list(self._items))

    # --- Misc -----------------------------------------------------------------

    def ping(self) -> bool:
        """
        Health check calls this; always True because there is nothing to
        connect to in the in-memory implementation.
        """
        return True
