# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Life-saving jewellery plugin: infoboxes and notifications for Phoenix necklace and Ring of life."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import TYPE_CHECKING

from clientplugins import items
from clientplugins.events import ChatMessage, ChatMessageType, ConfigChanged, GameEvent, Item, ItemContainerChanged
from clientplugins.items import EquipmentSlot, InventoryID
from clientplugins.logging import get_logger
from clientplugins.settings import LifeSavingConfig

if TYPE_CHECKING:
    from clientplugins.host import Client, ClientThread, ItemManager, Notifier
    from clientplugins.plugins.base import Handler

log = get_logger(__name__)

CONFIG_GROUP = "lifeSavingJewellery"

# config key in the store -> LifeSavingConfig field
CONFIG_KEYS = {
    "ringOfLifeInfobox": "ring_of_life_infobox",
    "ringOfLifeNotification": "ring_of_life_notification",
    "phoenixNecklaceInfobox": "phoenix_necklace_infobox",
    "phoenixNecklaceNotification": "phoenix_necklace_notification",
}


class LifeSavingItem(Enum):
    RING_OF_LIFE = (
        items.RING_OF_LIFE,
        EquipmentSlot.RING,
        "Your Ring of Life saves you and is destroyed in the process.",
        "ring_of_life",
    )
    PHOENIX_NECKLACE = (
        items.PHOENIX_NECKLACE,
        EquipmentSlot.AMULET,
        "Your phoenix necklace heals you, but is destroyed in the process.",
        "phoenix_necklace",
    )

    def __init__(self, item_id: int, slot: EquipmentSlot, used_message: str, config_prefix: str) -> None:
        self.item_id = item_id
        self.slot = slot
        self.used_message = used_message
        self.config_prefix = config_prefix


class LifeSavingPlugin:
    name = "life_saving"

    def __init__(
        self,
        client: Client,
        client_thread: ClientThread,
        item_manager: ItemManager,
        notifier: Notifier,
        config: LifeSavingConfig | None = None,
    ) -> None:
        self.client = client
        self.client_thread = client_thread
        self.item_manager = item_manager
        self.notifier = notifier
        self.config = config or LifeSavingConfig()
        # items currently worn with their infobox enabled
        self.active_infoboxes: set[LifeSavingItem] = set()

    def start_up(self) -> None:
        pass

    def shut_down(self) -> None:
        self.active_infoboxes.clear()

    def handlers(self) -> Mapping[type[GameEvent], Handler]:
        return {
            ConfigChanged: self.on_config_changed,
            ChatMessage: self.on_chat_message,
            ItemContainerChanged: self.on_item_container_changed,
        }

    def infobox_enabled(self, item: LifeSavingItem) -> bool:
        return getattr(self.config, f"{item.config_prefix}_infobox")

    def notification_enabled(self, item: LifeSavingItem) -> bool:
        return getattr(self.config, f"{item.config_prefix}_notification")

    def on_config_changed(self, event: ConfigChanged) -> None:
        if event.group != CONFIG_GROUP:
            return

        field = CONFIG_KEYS.get(event.key)
        if field is not None:
            enabled = (event.value or "").strip().lower() == "true"
            self.config = self.config.model_copy(update={field: enabled})

        for item in LifeSavingItem:
            if not self.infobox_enabled(item):
                self.active_infoboxes.discard(item)

        def refresh() -> None:
            worn = self.client.get_item_container(InventoryID.EQUIPMENT)
            if worn is None:
                return
            self._update_infoboxes(worn)

        self.client_thread.invoke_later(refresh)

    def on_chat_message(self, event: ChatMessage) -> None:
        if event.message_type != ChatMessageType.GAMEMESSAGE:
            return

        for item in LifeSavingItem:
            if self.notification_enabled(item) and item.used_message in event.message:
                name = self.item_manager.get_item_name(item.item_id)
                log.info("life_saving_item_destroyed", item=name)
                self.notifier.notify(f"Your {name} is destroyed!")

    def on_item_container_changed(self, event: ItemContainerChanged) -> None:
        if event.container_id != InventoryID.EQUIPMENT:
            return
        self._update_infoboxes(event.items)

    def _update_infoboxes(self, worn: Sequence[Item]) -> None:
        for item in LifeSavingItem:
            if not self.infobox_enabled(item):
                continue
            self.active_infoboxes.discard(item)
            if len(worn) > item.slot and worn[item.slot].id == item.item_id:
                self.active_infoboxes.add(item)
