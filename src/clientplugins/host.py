# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Interfaces to the host game client and simple in-process implementations.

The host delivers events on a single callback thread. Authoritative container
and friend state lives on the client logic thread, so reads are handed off
through :class:`ClientThread.invoke_later` and overwrite local snapshots when
they complete. Nothing here blocks or retries.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Protocol

from pydantic import BaseModel

from clientplugins.logging import get_logger

if TYPE_CHECKING:
    import asyncio
    from collections.abc import Callable

    from clientplugins.events import GameState, Item

log = get_logger(__name__)


class Friend(BaseModel):
    name: str
    # 0 when offline
    world: int = 0


class ChannelMember(BaseModel):
    """A member of a chat-channel or clan channel."""

    name: str
    world: int = 0
    # higher ranks sort first
    rank: int = 0
    # clan rank title, when the clan defines one for this rank
    title: str | None = None


class Client(Protocol):
    """Read access to client state. Only valid on the client logic thread."""

    @property
    def game_state(self) -> GameState: ...

    @property
    def tick_count(self) -> int: ...

    def get_item_container(self, container_id: int) -> list[Item] | None: ...

    def get_friends(self) -> list[Friend] | None: ...

    @property
    def world(self) -> int: ...

    @property
    def local_player_name(self) -> str | None: ...

    def get_chat_channel_members(self) -> list[ChannelMember] | None: ...

    def get_clan_members(self) -> list[ChannelMember] | None: ...

    def get_guest_clan_members(self) -> list[ChannelMember] | None: ...


class ClientThread(Protocol):
    def invoke_later(self, callback: Callable[[], object]) -> None: ...


class ConfigStore(Protocol):
    """Key/value string persistence, grouped by plugin."""

    def get_configuration(self, group: str, key: str) -> str | None: ...

    def set_configuration(self, group: str, key: str, value: str) -> None: ...

    def unset_configuration(self, group: str, key: str) -> None: ...


class ItemManager(Protocol):
    def get_item_name(self, item_id: int) -> str: ...


class Notifier(Protocol):
    def notify(self, message: str) -> None: ...


class LoopClientThread:
    """Schedules callbacks onto the asyncio loop that owns client state."""

    def __init__(self, loop: asyncio.AbstractEventLoop) -> None:
        self._loop = loop

    def invoke_later(self, callback: Callable[[], object]) -> None:
        self._loop.call_soon_threadsafe(self._run, callback)

    @staticmethod
    def _run(callback: Callable[[], object]) -> None:
        try:
            callback()
        except Exception as e:
            log.warning("client_thread_callback_failed", error=str(e))


class QueuedClientThread:
    """Collects callbacks until :meth:`drain` runs them in submission order."""

    def __init__(self) -> None:
        self._pending: deque[Callable[[], object]] = deque()

    @property
    def pending(self) -> int:
        return len(self._pending)

    def invoke_later(self, callback: Callable[[], object]) -> None:
        self._pending.append(callback)

    def drain(self) -> int:
        """Run pending callbacks, including any they schedule. Returns how many ran."""
        ran = 0
        while self._pending:
            self._pending.popleft()()
            ran += 1
        return ran


class MemoryConfigStore:
    def __init__(self, values: dict[str, str] | None = None) -> None:
        # keys are "<group>.<key>"
        self.values: dict[str, str] = dict(values or {})

    def get_configuration(self, group: str, key: str) -> str | None:
        return self.values.get(f"{group}.{key}")

    def set_configuration(self, group: str, key: str, value: str) -> None:
        self.values[f"{group}.{key}"] = value

    def unset_configuration(self, group: str, key: str) -> None:
        self.values.pop(f"{group}.{key}", None)


class StaticItemManager:
    def __init__(self, names: dict[int, str] | None = None) -> None:
        self._names = dict(names or {})

    def get_item_name(self, item_id: int) -> str:
        return self._names.get(item_id, f"Item {item_id}")


class CollectingNotifier:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def notify(self, message: str) -> None:
        log.info("notification", message=message)
        self.messages.append(message)
