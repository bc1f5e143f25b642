# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Tests for client thread handoff and in-process collaborators."""

from __future__ import annotations

import asyncio
import threading

import pytest

from clientplugins.host import LoopClientThread, MemoryConfigStore, QueuedClientThread, StaticItemManager


def test_queued_client_thread_runs_in_order() -> None:
    thread = QueuedClientThread()
    ran: list[int] = []

    thread.invoke_later(lambda: ran.append(1))
    thread.invoke_later(lambda: thread.invoke_later(lambda: ran.append(3)))
    thread.invoke_later(lambda: ran.append(2))

    assert ran == []
    assert thread.drain() == 4
    assert ran == [1, 2, 3]
    assert thread.pending == 0


@pytest.mark.asyncio
async def test_loop_client_thread_from_other_thread() -> None:
    """Callbacks scheduled from the event thread run on the loop."""
    loop = asyncio.get_running_loop()
    client_thread = LoopClientThread(loop)
    done = asyncio.Event()
    ran_on: list[int] = []

    def callback() -> None:
        ran_on.append(threading.get_ident())
        done.set()

    worker = threading.Thread(target=client_thread.invoke_later, args=(callback,))
    worker.start()
    worker.join()
    await asyncio.wait_for(done.wait(), timeout=1.0)

    assert ran_on == [threading.get_ident()]


@pytest.mark.asyncio
async def test_loop_client_thread_contains_failures() -> None:
    loop = asyncio.get_running_loop()
    client_thread = LoopClientThread(loop)
    done = asyncio.Event()

    def broken() -> None:
        raise RuntimeError("no container")

    client_thread.invoke_later(broken)
    client_thread.invoke_later(done.set)
    await asyncio.wait_for(done.wait(), timeout=1.0)

    assert done.is_set()


def test_memory_config_store() -> None:
    store = MemoryConfigStore()

    store.set_configuration("group", "key", "value")
    assert store.get_configuration("group", "key") == "value"
    assert store.get_configuration("other", "key") is None

    store.unset_configuration("group", "key")
    store.unset_configuration("group", "key")
    assert store.values == {}


def test_static_item_manager_fallback() -> None:
    manager = StaticItemManager({1: "Thing"})

    assert manager.get_item_name(1) == "Thing"
    assert manager.get_item_name(2) == "Item 2"
