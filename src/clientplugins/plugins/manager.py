# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Plugin manager routing host events to plugin handlers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from clientplugins.events import GameEvent
from clientplugins.logging import get_logger
from clientplugins.plugins.base import Handler, Plugin

log = get_logger(__name__)


class PluginManager(BaseModel):
    plugins: list[Plugin] = Field(default_factory=list)

    model_config = ConfigDict(arbitrary_types_allowed=True)

    _routes: dict[type[GameEvent], list[tuple[str, Handler]]] = PrivateAttr(default_factory=dict)
    _started: bool = PrivateAttr(default=False)

    @property
    def started(self) -> bool:
        return self._started

    def start(self) -> None:
        if self._started:
            return
        self._routes.clear()
        for plugin in self.plugins:
            plugin.start_up()
            for event_type, handler in plugin.handlers().items():
                self._routes.setdefault(event_type, []).append((plugin.name, handler))
            log.info("plugin_started", plugin=plugin.name)
        self._started = True

    def stop(self) -> None:
        if not self._started:
            return
        for plugin in reversed(self.plugins):
            plugin.shut_down()
            log.info("plugin_stopped", plugin=plugin.name)
        self._routes.clear()
        self._started = False

    def dispatch(self, event: GameEvent) -> int:
        """Deliver an event to every subscribed handler. Returns the number of handlers run."""
        delivered = 0
        for plugin_name, handler in self._routes.get(type(event), []):
            try:
                handler(event)
            except Exception as e:
                log.warning(
                    "plugin_handler_failed",
                    plugin=plugin_name,
                    event=type(event).__name__,
                    error=str(e),
                )
                continue
            delivered += 1
        return delivered
