# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Replay a JSONL event log through the plugins.

Each non-blank line is one ``type``-tagged event (see
:mod:`clientplugins.events`). A ``{"type": "friends", "friends": [...]}`` line
sets the friends list the replayed client reports, a
``{"type": "members", "channel": "clan", "members": [...]}`` line sets the
members of ``chat_channel``, ``clan`` or ``guest_clan``, and a
``{"type": "player", "name": ..., "world": ...}`` line sets the local player.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from clientplugins.events import (
    GameEvent,
    GameState,
    GameStateChanged,
    GameTick,
    Item,
    ItemContainerChanged,
    parse_event,
)
from clientplugins.fishbarrel import FishBarrelPlugin
from clientplugins.friendsviewer import FriendsViewerPlugin
from clientplugins.host import (
    ChannelMember,
    CollectingNotifier,
    Friend,
    MemoryConfigStore,
    QueuedClientThread,
    StaticItemManager,
)
from clientplugins.items import PHOENIX_NECKLACE, RING_OF_LIFE
from clientplugins.lastseen import LastSeenDao, LastSeenPlugin
from clientplugins.lifesaving import LifeSavingPlugin
from clientplugins.logging import get_logger
from clientplugins.plugins import PluginManager
from clientplugins.settings import Settings

log = get_logger(__name__)

ITEM_NAMES = {RING_OF_LIFE: "Ring of life", PHOENIX_NECKLACE: "Phoenix necklace"}
CHANNELS = ("chat_channel", "clan", "guest_clan")


class ReplayClient:
    """Client state rebuilt from the events seen so far."""

    def __init__(self) -> None:
        self.game_state = GameState.LOGIN_SCREEN
        self.tick_count = 0
        self.containers: dict[int, list[Item]] = {}
        self.friends: list[Friend] | None = None
        self.world = 0
        self.local_player_name: str | None = None
        self.channels: dict[str, list[ChannelMember]] = {}

    def get_item_container(self, container_id: int) -> list[Item] | None:
        return self.containers.get(container_id)

    def get_friends(self) -> list[Friend] | None:
        return self.friends

    def get_chat_channel_members(self) -> list[ChannelMember] | None:
        return self.channels.get("chat_channel")

    def get_clan_members(self) -> list[ChannelMember] | None:
        return self.channels.get("clan")

    def get_guest_clan_members(self) -> list[ChannelMember] | None:
        return self.channels.get("guest_clan")

    def apply(self, event: GameEvent) -> None:
        if isinstance(event, GameStateChanged):
            self.game_state = event.game_state
        elif isinstance(event, GameTick):
            self.tick_count += 1
        elif isinstance(event, ItemContainerChanged):
            self.containers[event.container_id] = list(event.items)


class ReplaySession:
    def __init__(self, settings: Settings | None = None, store: MemoryConfigStore | None = None) -> None:
        settings = settings or Settings()
        self.client = ReplayClient()
        self.client_thread = QueuedClientThread()
        self.store = store or MemoryConfigStore()
        self.notifier = CollectingNotifier()
        self.fish_barrel = FishBarrelPlugin(self.client, self.client_thread, config=settings.fish_barrel)
        self.last_seen = LastSeenPlugin(
            self.client,
            self.client_thread,
            LastSeenDao(self.store),
            config=settings.last_seen,
            clock=self._replay_clock,
        )
        self.life_saving = LifeSavingPlugin(
            self.client,
            self.client_thread,
            StaticItemManager(ITEM_NAMES),
            self.notifier,
            config=settings.life_saving,
        )
        self.friends_viewer = FriendsViewerPlugin(self.client, self.client_thread, config=settings.friends_viewer)
        self.manager = PluginManager(
            plugins=[self.fish_barrel, self.last_seen, self.life_saving, self.friends_viewer],
        )
        self.events_seen = 0
        self._ts_ms = 0

    def _replay_clock(self) -> int:
        return self._ts_ms

    def feed(self, record: dict[str, Any]) -> None:
        """Apply one log record.

        Raises:
            ValueError: if the record is not a JSON object or not a known record
        """
        if not isinstance(record, dict):
            raise ValueError(f"expected a JSON object, got {type(record).__name__}")
        if not self.manager.started:
            self.manager.start()

        if "ts" in record:
            self._ts_ms = round(float(record["ts"]) * 1000)

        if record.get("type") == "friends":
            self.client.friends = [Friend.model_validate(f) for f in record.get("friends", [])]
            return
        if record.get("type") == "members":
            channel = record.get("channel")
            if channel not in CHANNELS:
                raise ValueError(f"unknown channel {channel!r}, expected one of {', '.join(CHANNELS)}")
            self.client.channels[channel] = [ChannelMember.model_validate(m) for m in record.get("members", [])]
            return
        if record.get("type") == "player":
            self.client.local_player_name = record.get("name")
            self.client.world = int(record.get("world", self.client.world))
            return

        event = parse_event(record)
        self.client.apply(event)
        self.manager.dispatch(event)
        # the logic thread catches up before the next event arrives
        self.client_thread.drain()
        self.events_seen += 1

    def summary(self) -> dict[str, Any]:
        return {
            "events": self.events_seen,
            "fish_barrel": self.fish_barrel.barrel.display_text(),
            "widget_fish_count": self.fish_barrel.widget_parser.fish_count,
            "notifications": list(self.notifier.messages),
            "life_saving_infoboxes": sorted(item.name for item in self.life_saving.active_infoboxes),
            "last_seen": dict(sorted(self.store.values.items())),
            "friends_viewer": {
                section.value: [entry.name for entry in entries]
                for section, entries in self.friends_viewer.entries.items()
                if entries is not None
            },
        }


def replay_events(log_path: str | Path, settings: Settings | None = None) -> ReplaySession:
    """Replay every event in ``log_path`` and return the finished session.

    Raises:
        ValueError: if a line is not valid JSON or not a known event
    """
    log_path = Path(log_path)
    session = ReplaySession(settings)

    for lineno, line in enumerate(log_path.read_text(encoding="utf-8").splitlines(), start=1):
        if not line.strip():
            continue
        try:
            session.feed(json.loads(line))
        except ValueError as e:
            raise ValueError(f"{log_path}:{lineno}: {e}") from e

    session.last_seen.persist_state()
    session.manager.stop()
    log.info("replay_finished", log=str(log_path), events=session.events_seen)
    return session
