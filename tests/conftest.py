# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Pytest configuration and fixtures."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog

from clientplugins.events import GameState, Item
from clientplugins.host import ChannelMember, Friend, MemoryConfigStore, QueuedClientThread


class FakeClient:
    """Client state set directly by tests."""

    def __init__(self) -> None:
        self.game_state = GameState.LOGGED_IN
        self.tick_count = 0
        self.containers: dict[int, list[Item]] = {}
        self.friends: list[Friend] | None = None
        self.world = 301
        self.local_player_name: str | None = None
        self.chat_channel: list[ChannelMember] | None = None
        self.clan: list[ChannelMember] | None = None
        self.guest_clan: list[ChannelMember] | None = None

    def get_item_container(self, container_id: int) -> list[Item] | None:
        return self.containers.get(container_id)

    def get_friends(self) -> list[Friend] | None:
        return self.friends

    def get_chat_channel_members(self) -> list[ChannelMember] | None:
        return self.chat_channel

    def get_clan_members(self) -> list[ChannelMember] | None:
        return self.clan

    def get_guest_clan_members(self) -> list[ChannelMember] | None:
        return self.guest_clan


@pytest.fixture
def client() -> FakeClient:
    return FakeClient()


@pytest.fixture
def client_thread() -> QueuedClientThread:
    return QueuedClientThread()


@pytest.fixture
def store() -> MemoryConfigStore:
    return MemoryConfigStore()


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    """Undo any logging configuration a test (e.g. the CLI) installed."""
    yield
    structlog.reset_defaults()
