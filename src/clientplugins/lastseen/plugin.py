# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Last seen plugin: remembers when friends were last online."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING

from clientplugins.events import GameEvent, GameState, GameStateChanged, GameTick, NameableNameChanged, RemovedFriend
from clientplugins.lastseen.formatter import format_last_seen, now_ms
from clientplugins.logging import get_logger
from clientplugins.text import remove_tags, to_display_name

if TYPE_CHECKING:
    from clientplugins.host import Client, ClientThread
    from clientplugins.lastseen.dao import LastSeenDao
    from clientplugins.plugins.base import Handler
    from clientplugins.settings import LastSeenConfig

log = get_logger(__name__)

DEFAULT_PERSIST_INTERVAL_TICKS = 100


class LastSeenPlugin:
    """Check when you've last seen your friends online."""

    name = "last_seen"

    def __init__(
        self,
        client: Client,
        client_thread: ClientThread,
        dao: LastSeenDao,
        config: LastSeenConfig | None = None,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self.client = client
        self.client_thread = client_thread
        self.dao = dao
        self.persist_interval_ticks = config.persist_interval_ticks if config else DEFAULT_PERSIST_INTERVAL_TICKS
        self._clock = clock
        # friends seen online this session, not yet persisted
        self.seen_this_session: dict[str, int] = {}
        self.last_persisted_tick = 0

    def start_up(self) -> None:
        self.seen_this_session.clear()
        self.last_persisted_tick = 0

    def shut_down(self) -> None:
        self.persist_state()

    def handlers(self) -> Mapping[type[GameEvent], Handler]:
        return {
            GameStateChanged: self.on_game_state_changed,
            NameableNameChanged: self.on_nameable_name_changed,
            RemovedFriend: self.on_removed_friend,
            GameTick: self.on_game_tick,
        }

    def get_last_seen(self, display_name: str) -> int | None:
        if display_name in self.seen_this_session:
            return self.seen_this_session[display_name]
        return self.dao.get_last_seen(display_name)

    def hover_text(self, target: str) -> str | None:
        """Tooltip for a friends list entry, or None for a blank name."""
        display_name = to_display_name(remove_tags(target))
        if not display_name:
            return None
        return "Last online: " + format_last_seen(self.get_last_seen(display_name), self._clock())

    def on_game_state_changed(self, event: GameStateChanged) -> None:
        self.persist_state()

    def on_nameable_name_changed(self, event: NameableNameChanged) -> None:
        if event.prev_name is not None:
            self.dao.migrate_last_seen(to_display_name(event.prev_name), to_display_name(event.name))

    def on_removed_friend(self, event: RemovedFriend) -> None:
        self.dao.delete_last_seen(to_display_name(event.name))

    def on_game_tick(self, event: GameTick) -> None:
        if self.client.game_state != GameState.LOGGED_IN:
            return

        if self.client.tick_count >= self.last_persisted_tick + self.persist_interval_ticks:
            self.persist_state()

        self.client_thread.invoke_later(self._record_online_friends)

    def persist_state(self) -> None:
        self.last_persisted_tick = self.client.tick_count
        if self.seen_this_session:
            log.debug("last_seen_persisted", players=len(self.seen_this_session))
        for display_name, timestamp_ms in self.seen_this_session.items():
            self.dao.set_last_seen(display_name, timestamp_ms)
        self.seen_this_session.clear()

    def _record_online_friends(self) -> None:
        friends = self.client.get_friends()
        if friends is None:
            return

        current_ms = self._clock()
        for friend in friends:
            if friend.world > 0:
                self.seen_this_session[to_display_name(friend.name)] = current_ms
