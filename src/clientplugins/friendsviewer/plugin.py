# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Friends and clan viewer plugin.

Every few ticks while logged in the plugin rebuilds one list per section:

- Friends: online friends (world > 0), by name ignoring case.
- Chat-channel, Your Clan, Guest Clan: members other than the local player,
  highest rank first, then by name ignoring case.

A section's entries are None while it is disabled or its source is
unavailable, and every section is cleared on the login screen.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from clientplugins.events import ConfigChanged, GameEvent, GameState, GameStateChanged, GameTick
from clientplugins.logging import get_logger
from clientplugins.settings import FriendsViewerConfig
from clientplugins.text import to_display_name

if TYPE_CHECKING:
    from clientplugins.host import ChannelMember, Client, ClientThread, Friend
    from clientplugins.plugins.base import Handler

log = get_logger(__name__)

CONFIG_GROUP = "friendListViewer"

# config key in the store -> FriendsViewerConfig field
CONFIG_KEYS = {
    "showFriends": "show_friends",
    "showChatChannel": "show_chat_channel",
    "showYourClan": "show_your_clan",
    "showGuestClan": "show_guest_clan",
    "maxPlayers": "max_players",
}


class Section(str, Enum):
    FRIENDS = "Friends"
    CHAT_CHANNEL = "Chat-channel"
    YOUR_CLAN = "Your Clan"
    GUEST_CLAN = "Guest Clan"


_SECTION_TOGGLES = {
    Section.FRIENDS: "show_friends",
    Section.CHAT_CHANNEL: "show_chat_channel",
    Section.YOUR_CLAN: "show_your_clan",
    Section.GUEST_CLAN: "show_guest_clan",
}


class ViewerEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    world: int
    # clan rank title, if any
    title: str | None = None


def online_friends(friends: Sequence[Friend] | None) -> list[ViewerEntry] | None:
    if friends is None:
        return None
    online = sorted((f for f in friends if f.world > 0), key=lambda f: f.name.casefold())
    return [ViewerEntry(name=to_display_name(f.name), world=f.world) for f in online]


def ranked_members(members: Sequence[ChannelMember] | None, local_player: str | None) -> list[ViewerEntry] | None:
    """Members other than ``local_player``, highest rank first, then by name."""
    if members is None:
        return None
    others = [m for m in members if to_display_name(m.name) != local_player]
    others.sort(key=lambda m: (-m.rank, m.name.casefold()))
    return [ViewerEntry(name=to_display_name(m.name), world=m.world, title=m.title) for m in others]


class FriendsViewerPlugin:
    """Always see clanmates and friends when they are online."""

    name = "friends_viewer"

    def __init__(
        self,
        client: Client,
        client_thread: ClientThread,
        config: FriendsViewerConfig | None = None,
    ) -> None:
        self.client = client
        self.client_thread = client_thread
        self.config = config or FriendsViewerConfig()
        self.entries: dict[Section, list[ViewerEntry] | None] = dict.fromkeys(Section)

    def start_up(self) -> None:
        self.clear_entries()

    def shut_down(self) -> None:
        pass

    def handlers(self) -> Mapping[type[GameEvent], Handler]:
        return {
            ConfigChanged: self.on_config_changed,
            GameStateChanged: self.on_game_state_changed,
            GameTick: self.on_game_tick,
        }

    def section_enabled(self, section: Section) -> bool:
        return getattr(self.config, _SECTION_TOGGLES[section])

    def clear_entries(self) -> None:
        for section in Section:
            self.entries[section] = None

    def visible(self, section: Section) -> tuple[list[ViewerEntry], int]:
        """Entries within ``max_players`` and the number left out."""
        entries = self.entries[section] or []
        limit = self.config.max_players
        return entries[:limit], max(0, len(entries) - limit)

    def lines(self, section: Section) -> list[str]:
        """Text rows for a section, or nothing while it has no entries."""
        entries = self.entries[section]
        if entries is None or not self.section_enabled(section):
            return []

        shown, hidden = self.visible(section)
        lines = [f"{section.value} ({len(entries)})"]
        for entry in shown:
            marker = "*" if entry.world == self.client.world else ""
            prefix = f"[{entry.title}] " if entry.title else ""
            lines.append(f"{prefix}{entry.name}  W{entry.world}{marker}")
        if hidden:
            lines.append(f"... {hidden} more")
        return lines

    def on_config_changed(self, event: ConfigChanged) -> None:
        if event.group != CONFIG_GROUP:
            return

        field = CONFIG_KEYS.get(event.key)
        if field is None:
            return

        value = (event.value or "").strip()
        if field == "max_players":
            try:
                update: int | bool = max(0, int(value))
            except ValueError:
                log.warning("friends_viewer_invalid_config", key=event.key, value=event.value)
                return
        else:
            update = value.lower() == "true"
        self.config = self.config.model_copy(update={field: update})

        for section in Section:
            if not self.section_enabled(section):
                self.entries[section] = None

    def on_game_state_changed(self, event: GameStateChanged) -> None:
        if event.game_state == GameState.LOGIN_SCREEN:
            self.clear_entries()

    def on_game_tick(self, event: GameTick) -> None:
        if self.client.game_state != GameState.LOGGED_IN:
            return
        if self.client.tick_count % self.config.update_interval_ticks != 0:
            return
        self.client_thread.invoke_later(self.update_entries)

    def update_entries(self) -> None:
        """Rebuild every section from the client. Runs on the client thread."""
        local_player = self.client.local_player_name
        if local_player is not None:
            local_player = to_display_name(local_player)

        readers: dict[Section, Callable[[], list[ViewerEntry] | None]] = {
            Section.FRIENDS: lambda: online_friends(self.client.get_friends()),
            Section.CHAT_CHANNEL: lambda: ranked_members(self.client.get_chat_channel_members(), local_player),
            Section.YOUR_CLAN: lambda: ranked_members(self.client.get_clan_members(), local_player),
            Section.GUEST_CLAN: lambda: ranked_members(self.client.get_guest_clan_members(), local_player),
        }
        for section, read in readers.items():
            self.entries[section] = read() if self.section_enabled(section) else None

        log.debug(
            "friends_viewer_updated",
            **{section.name.lower(): len(entries) for section, entries in self.entries.items() if entries is not None},
        )
