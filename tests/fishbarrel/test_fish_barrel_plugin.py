# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Tests for the fish barrel plugin event handling."""

from __future__ import annotations

import pytest

from clientplugins import items
from clientplugins.events import (
    ChatMessage,
    ChatMessageType,
    FakeXpDrop,
    GameState,
    GameStateChanged,
    GameTick,
    Item,
    ItemContainerChanged,
    MenuOptionClicked,
    Skill,
    WidgetTextChanged,
)
from clientplugins.fishbarrel.catch import RADA_DOUBLE_CATCH_MESSAGE
from clientplugins.fishbarrel.plugin import BANK_FULL_MESSAGE, FishBarrelPlugin
from clientplugins.host import QueuedClientThread
from clientplugins.items import InventoryID
from clientplugins.settings import FishBarrelConfig


def _items(*item_ids: int) -> list[Item]:
    return [Item(id=item_id) for item_id in item_ids]


def _spam(message: str) -> ChatMessage:
    return ChatMessage(message_type=ChatMessageType.SPAM, message=message)


@pytest.fixture
def plugin(client, client_thread: QueuedClientThread) -> FishBarrelPlugin:
    plugin = FishBarrelPlugin(client, client_thread, config=FishBarrelConfig(capacity=28))
    plugin.start_up()
    return plugin


def _log_in(plugin: FishBarrelPlugin, client, client_thread: QueuedClientThread, *inventory: int) -> None:
    client.containers[InventoryID.INVENTORY] = _items(*inventory)
    client.containers[InventoryID.EQUIPMENT] = []
    plugin.on_game_state_changed(GameStateChanged(game_state=GameState.LOGGED_IN))
    client_thread.drain()


def test_start_up_resets_barrel(plugin: FishBarrelPlugin) -> None:
    assert plugin.barrel.holding == 0
    assert plugin.barrel.unknown is True
    assert plugin.barrel.display_text() == "?"


def test_login_snapshots_containers(plugin: FishBarrelPlugin, client, client_thread: QueuedClientThread) -> None:
    """Container snapshots are only applied once the client thread runs them."""
    client.containers[InventoryID.INVENTORY] = _items(items.OPEN_FISH_BARREL)
    plugin.on_game_state_changed(GameStateChanged(game_state=GameState.LOGGED_IN))

    assert plugin.inventory_items == frozenset()
    assert client_thread.pending == 2

    client_thread.drain()

    assert plugin.inventory_items == frozenset({items.OPEN_FISH_BARREL})
    # no equipment container yet: snapshot is skipped
    assert plugin.equipment_items == frozenset()


def test_catches_go_to_open_barrel(plugin: FishBarrelPlugin, client, client_thread: QueuedClientThread) -> None:
    _log_in(plugin, client, client_thread, items.OPEN_FISH_BARREL)
    plugin.on_menu_option_clicked(MenuOptionClicked(option="Empty", item_id=items.OPEN_FISH_BARREL))

    plugin.on_chat_message(_spam("You catch a shark."))
    plugin.on_chat_message(_spam(RADA_DOUBLE_CATCH_MESSAGE))
    plugin.on_game_tick(GameTick())
    assert plugin.barrel.holding == 2
    assert plugin.barrel.display_text() == "2"


def test_closed_barrel_ignores_catches(plugin: FishBarrelPlugin, client, client_thread: QueuedClientThread) -> None:
    _log_in(plugin, client, client_thread, items.FISH_BARREL)
    plugin.on_menu_option_clicked(MenuOptionClicked(option="Empty", item_id=items.FISH_BARREL))

    plugin.on_chat_message(_spam("You catch a shark."))
    plugin.on_game_tick(GameTick())

    assert plugin.barrel.holding == 0


def test_worn_barrel_counts(plugin: FishBarrelPlugin, client, client_thread: QueuedClientThread) -> None:
    """A barrel in the equipment counts as held."""
    client.containers[InventoryID.INVENTORY] = []
    client.containers[InventoryID.EQUIPMENT] = _items(items.OPEN_FISH_SACK_BARREL)
    plugin.on_item_container_changed(ItemContainerChanged(container_id=InventoryID.EQUIPMENT, items=[]))
    client_thread.drain()

    assert plugin.has_any_of({items.OPEN_FISH_SACK_BARREL})


def test_fish_in_inventory_fills_barrel(plugin: FishBarrelPlugin, client, client_thread: QueuedClientThread) -> None:
    _log_in(plugin, client, client_thread, items.OPEN_FISH_BARREL)

    plugin.on_chat_message(_spam("You catch a shark."))
    plugin.on_item_container_changed(
        ItemContainerChanged(container_id=InventoryID.INVENTORY, items=_items(items.OPEN_FISH_BARREL, items.RAW_SHARK))
    )
    plugin.on_game_tick(GameTick())

    assert plugin.barrel.holding == 28
    assert plugin.barrel.unknown is False


def test_fish_already_in_inventory_is_not_new(
    plugin: FishBarrelPlugin, client, client_thread: QueuedClientThread
) -> None:
    """Only fish added since the previous inventory change count as new."""
    _log_in(plugin, client, client_thread, items.OPEN_FISH_BARREL)
    plugin.on_item_container_changed(
        ItemContainerChanged(container_id=InventoryID.INVENTORY, items=_items(items.OPEN_FISH_BARREL, items.RAW_SHARK))
    )
    plugin.on_game_tick(GameTick())
    plugin.on_menu_option_clicked(MenuOptionClicked(option="Empty", item_id=items.OPEN_FISH_BARREL))

    plugin.on_chat_message(_spam("You catch a tuna."))
    plugin.on_item_container_changed(
        ItemContainerChanged(
            container_id=InventoryID.INVENTORY,
            items=_items(items.OPEN_FISH_BARREL, items.RAW_SHARK, items.RING_OF_LIFE),
        )
    )
    plugin.on_game_tick(GameTick())

    assert plugin.barrel.holding == 1


def test_cooking_xp_drop_is_auxiliary(plugin: FishBarrelPlugin, client, client_thread: QueuedClientThread) -> None:
    _log_in(plugin, client, client_thread, items.OPEN_FISH_BARREL)
    plugin.on_menu_option_clicked(MenuOptionClicked(option="Empty", item_id=items.OPEN_FISH_BARREL))

    plugin.on_chat_message(_spam("You catch a swordfish."))
    plugin.on_fake_xp_drop(FakeXpDrop(skill=Skill.COOKING))
    plugin.on_fake_xp_drop(FakeXpDrop(skill=Skill.FISHING))
    plugin.on_game_tick(GameTick())

    assert plugin.barrel.holding == 0


def test_bank_full_message_invalidates(plugin: FishBarrelPlugin, client, client_thread: QueuedClientThread) -> None:
    _log_in(plugin, client, client_thread, items.FISH_BARREL)
    plugin.barrel.set_holding(10)

    plugin.on_chat_message(ChatMessage(message_type=ChatMessageType.GAMEMESSAGE, message=BANK_FULL_MESSAGE))

    assert plugin.barrel.unknown is True


def test_bank_full_message_without_barrel(plugin: FishBarrelPlugin, client, client_thread: QueuedClientThread) -> None:
    _log_in(plugin, client, client_thread)
    plugin.barrel.set_holding(10)

    plugin.on_chat_message(ChatMessage(message_type=ChatMessageType.GAMEMESSAGE, message=BANK_FULL_MESSAGE))

    assert plugin.barrel.unknown is False


def test_empty_option_on_other_item(plugin: FishBarrelPlugin) -> None:
    plugin.barrel.set_holding(5)

    plugin.on_menu_option_clicked(MenuOptionClicked(option="Empty", item_id=items.RAW_SHARK))
    plugin.on_menu_option_clicked(MenuOptionClicked(option="Check", item_id=items.FISH_BARREL))

    assert plugin.barrel.holding == 5


def test_widget_text_sets_count(plugin: FishBarrelPlugin) -> None:
    """A complete contents listing replaces the estimate."""
    plugin.on_widget_text_changed(WidgetTextChanged(text="The barrel contains:<br>3 x Raw shark, 2 x Raw"))
    assert plugin.barrel.unknown is True

    plugin.on_widget_text_changed(WidgetTextChanged(text="tuna, 1 x Raw cod"))

    assert plugin.barrel.holding == 6
    assert plugin.barrel.unknown is False


def test_widget_count_is_capped(plugin: FishBarrelPlugin) -> None:
    plugin.on_widget_text_changed(WidgetTextChanged(text="The barrel contains: 30 x Raw shark"))

    assert plugin.barrel.holding == 28
