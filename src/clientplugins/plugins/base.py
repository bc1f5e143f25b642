# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Plugin interface."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Protocol, runtime_checkable

from clientplugins.events import GameEvent

Handler = Callable[[Any], None]


@runtime_checkable
class Plugin(Protocol):
    """A client add-on reacting to game events.

    ``handlers`` is the plugin's dispatch table: each event type it cares
    about mapped to the callable that handles it.
    """

    name: str

    def start_up(self) -> None: ...

    def shut_down(self) -> None: ...

    def handlers(self) -> Mapping[type[GameEvent], Handler]: ...
