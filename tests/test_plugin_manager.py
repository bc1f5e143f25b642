# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Tests for plugin dispatch."""

from __future__ import annotations

from collections.abc import Mapping

from clientplugins.events import ChatMessage, ChatMessageType, GameEvent, GameTick
from clientplugins.plugins import Handler, Plugin, PluginManager


class RecordingPlugin:
    def __init__(self, name: str, fail: bool = False) -> None:
        self.name = name
        self.fail = fail
        self.calls: list[str] = []

    def start_up(self) -> None:
        self.calls.append("start_up")

    def shut_down(self) -> None:
        self.calls.append("shut_down")

    def handlers(self) -> Mapping[type[GameEvent], Handler]:
        return {GameTick: self.on_game_tick}

    def on_game_tick(self, event: GameTick) -> None:
        if self.fail:
            raise RuntimeError("boom")
        self.calls.append("tick")


def test_recording_plugin_satisfies_protocol() -> None:
    assert isinstance(RecordingPlugin("a"), Plugin)


def test_dispatch_routes_by_event_type() -> None:
    plugin = RecordingPlugin("a")
    manager = PluginManager(plugins=[plugin])
    manager.start()

    assert manager.dispatch(GameTick()) == 1
    assert manager.dispatch(ChatMessage(message_type=ChatMessageType.SPAM, message="hi")) == 0
    assert plugin.calls == ["start_up", "tick"]


def test_failing_handler_does_not_stop_others() -> None:
    broken = RecordingPlugin("broken", fail=True)
    healthy = RecordingPlugin("healthy")
    manager = PluginManager(plugins=[broken, healthy])
    manager.start()

    assert manager.dispatch(GameTick()) == 1
    assert healthy.calls == ["start_up", "tick"]


def test_start_and_stop_are_idempotent() -> None:
    plugin = RecordingPlugin("a")
    manager = PluginManager(plugins=[plugin])

    manager.start()
    manager.start()
    manager.stop()
    manager.stop()

    assert plugin.calls == ["start_up", "shut_down"]
    assert manager.dispatch(GameTick()) == 0
