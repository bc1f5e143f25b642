# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Fish barrel plugin: keeps the barrel count up to date from client events."""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Collection, Mapping
from typing import TYPE_CHECKING

from clientplugins.events import (
    ChatMessage,
    ChatMessageType,
    FakeXpDrop,
    GameEvent,
    GameState,
    GameStateChanged,
    GameTick,
    ItemContainerChanged,
    MenuOptionClicked,
    Skill,
    WidgetTextChanged,
)
from clientplugins.fishbarrel.barrel import ALL_FISH_TYPES, BARREL_IDS, OPEN_BARREL_IDS, FishBarrel
from clientplugins.fishbarrel.catch import CatchEstimator
from clientplugins.fishbarrel.widget_parser import DEFAULT_INCOMPLETE_INDICATORS, FishBarrelWidgetParser, ParseResult
from clientplugins.items import InventoryID
from clientplugins.logging import get_logger

if TYPE_CHECKING:
    from clientplugins.host import Client, ClientThread
    from clientplugins.plugins.base import Handler
    from clientplugins.settings import FishBarrelConfig

log = get_logger(__name__)

BANK_FULL_MESSAGE = "Your bank could not hold your fish."
EMPTY_OPTION = "Empty"


class FishBarrelPlugin:
    """Shows how many fish are in the fish barrel."""

    name = "fish_barrel"

    def __init__(
        self,
        client: Client,
        client_thread: ClientThread,
        barrel: FishBarrel | None = None,
        config: FishBarrelConfig | None = None,
    ) -> None:
        self.client = client
        self.client_thread = client_thread
        if barrel is None:
            barrel = FishBarrel(config.capacity) if config else FishBarrel()
        self.barrel = barrel
        self.estimator = CatchEstimator(barrel)
        indicators = config.incomplete_indicators if config else DEFAULT_INCOMPLETE_INDICATORS
        self.widget_parser = FishBarrelWidgetParser(indicators)
        self.inventory_items: frozenset[int] = frozenset()
        self.equipment_items: frozenset[int] = frozenset()
        # fish per item id in the last inventory change, to tell new fish from old
        self._inventory_fish: Counter[int] = Counter()

    def start_up(self) -> None:
        self.barrel.reset()
        self.widget_parser.reset()
        self._inventory_fish.clear()

    def shut_down(self) -> None:
        pass

    def handlers(self) -> Mapping[type[GameEvent], Handler]:
        return {
            GameStateChanged: self.on_game_state_changed,
            ChatMessage: self.on_chat_message,
            ItemContainerChanged: self.on_item_container_changed,
            FakeXpDrop: self.on_fake_xp_drop,
            GameTick: self.on_game_tick,
            MenuOptionClicked: self.on_menu_option_clicked,
            WidgetTextChanged: self.on_widget_text_changed,
        }

    def on_game_state_changed(self, event: GameStateChanged) -> None:
        if event.game_state == GameState.LOGGED_IN:
            self._refresh(InventoryID.INVENTORY, self._set_inventory)
            self._refresh(InventoryID.EQUIPMENT, self._set_equipment)

    def on_chat_message(self, event: ChatMessage) -> None:
        if event.message_type == ChatMessageType.GAMEMESSAGE and self.has_any_of(BARREL_IDS):
            if event.message == BANK_FULL_MESSAGE:
                # some fish stayed in the barrel, we've lost track
                self.estimator.record_container_full_message()
        elif event.message_type == ChatMessageType.SPAM and self.has_any_of(OPEN_BARREL_IDS):
            self.estimator.record_catch_signal(event.message)

    def on_item_container_changed(self, event: ItemContainerChanged) -> None:
        if event.container_id == InventoryID.INVENTORY:
            fish = Counter(item.id for item in event.items if item.id in ALL_FISH_TYPES)
            for item_id in (fish - self._inventory_fish).elements():
                self.estimator.record_new_item(item_id)
            self._inventory_fish = fish
            self._refresh(InventoryID.INVENTORY, self._set_inventory)
        elif event.container_id == InventoryID.EQUIPMENT:
            self._refresh(InventoryID.EQUIPMENT, self._set_equipment)

    def on_fake_xp_drop(self, event: FakeXpDrop) -> None:
        if event.skill == Skill.COOKING:
            self.estimator.record_auxiliary_production()

    def on_game_tick(self, event: GameTick) -> None:
        self.estimator.resolve_tick()

    def on_menu_option_clicked(self, event: MenuOptionClicked) -> None:
        if event.item_id in BARREL_IDS and event.option == EMPTY_OPTION:
            self.estimator.record_container_emptied_action()

    def on_widget_text_changed(self, event: WidgetTextChanged) -> None:
        result = self.widget_parser.parse(event.text)
        if result == ParseResult.VALID:
            self.barrel.set_holding(self.widget_parser.fish_count)
            log.info("fish_barrel_checked", holding=self.barrel.holding)

    def has_any_of(self, item_ids: Collection[int]) -> bool:
        return any(item_id in self.inventory_items or item_id in self.equipment_items for item_id in item_ids)

    def _set_inventory(self, item_ids: frozenset[int]) -> None:
        self.inventory_items = item_ids

    def _set_equipment(self, item_ids: frozenset[int]) -> None:
        self.equipment_items = item_ids

    def _refresh(self, container_id: InventoryID, apply: Callable[[frozenset[int]], None]) -> None:
        def snapshot() -> None:
            items = self.client.get_item_container(container_id)
            if items is None:
                return
            apply(frozenset(item.id for item in items))

        self.client_thread.invoke_later(snapshot)
