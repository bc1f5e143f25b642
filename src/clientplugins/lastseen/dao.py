# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Persistence of "last seen online" timestamps."""

from __future__ import annotations

from typing import TYPE_CHECKING

from clientplugins.logging import get_logger

if TYPE_CHECKING:
    from clientplugins.host import ConfigStore

log = get_logger(__name__)

CONFIG_GROUP = "lastSeen"
KEY_PREFIX = "lastSeen_"


class LastSeenDao:
    """Reads and writes millisecond timestamps keyed by player display name."""

    def __init__(self, store: ConfigStore) -> None:
        self._store = store
        self._cache: dict[str, int] = {}

    def get_last_seen(self, display_name: str) -> int | None:
        if display_name in self._cache:
            return self._cache[display_name]

        entry = self._store.get_configuration(CONFIG_GROUP, KEY_PREFIX + display_name)
        if entry is None:
            return None

        try:
            timestamp_ms = int(entry)
        except ValueError:
            log.info("last_seen_invalid_value", player=display_name, value=entry)
            return None

        self._cache[display_name] = timestamp_ms
        return timestamp_ms

    def set_last_seen(self, display_name: str, timestamp_ms: int) -> None:
        """Store a timestamp unless an equal or later one is already stored."""
        last_seen = self.get_last_seen(display_name)
        if last_seen is None or last_seen < timestamp_ms:
            self._cache[display_name] = timestamp_ms
            self._store.set_configuration(CONFIG_GROUP, KEY_PREFIX + display_name, str(timestamp_ms))

    def delete_last_seen(self, display_name: str) -> None:
        self._cache.pop(display_name, None)
        self._store.unset_configuration(CONFIG_GROUP, KEY_PREFIX + display_name)

    def migrate_last_seen(self, old_display_name: str, new_display_name: str) -> None:
        last_seen = self.get_last_seen(old_display_name)
        if last_seen is not None:
            self.set_last_seen(new_display_name, last_seen)
            self.delete_last_seen(old_display_name)
