# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Structured events emitted by the game client.

Every event carries a ``type`` tag so a JSONL event log can be decoded back
into the right model with :func:`parse_event`.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class GameState(str, Enum):
    STARTING = "STARTING"
    LOGIN_SCREEN = "LOGIN_SCREEN"
    LOGGING_IN = "LOGGING_IN"
    LOADING = "LOADING"
    LOGGED_IN = "LOGGED_IN"
    CONNECTION_LOST = "CONNECTION_LOST"
    HOPPING = "HOPPING"


class ChatMessageType(str, Enum):
    GAMEMESSAGE = "GAMEMESSAGE"
    SPAM = "SPAM"
    PUBLICCHAT = "PUBLICCHAT"
    PRIVATECHAT = "PRIVATECHAT"
    FRIENDSCHAT = "FRIENDSCHAT"


class Skill(str, Enum):
    COOKING = "COOKING"
    FISHING = "FISHING"
    WOODCUTTING = "WOODCUTTING"
    FIREMAKING = "FIREMAKING"


class Item(BaseModel):
    id: int
    quantity: int = 1

    model_config = ConfigDict(frozen=True)


class GameEvent(BaseModel):
    model_config = ConfigDict(extra="ignore")


class ChatMessage(GameEvent):
    type: Literal["chat_message"] = "chat_message"
    message_type: ChatMessageType
    message: str


class ItemContainerChanged(GameEvent):
    type: Literal["item_container_changed"] = "item_container_changed"
    container_id: int
    items: list[Item] = Field(default_factory=list)


class GameTick(GameEvent):
    type: Literal["game_tick"] = "game_tick"


class GameStateChanged(GameEvent):
    type: Literal["game_state_changed"] = "game_state_changed"
    game_state: GameState


class MenuOptionClicked(GameEvent):
    type: Literal["menu_option_clicked"] = "menu_option_clicked"
    option: str
    # -1 when the clicked entry does not target an item
    item_id: int = -1


class FakeXpDrop(GameEvent):
    type: Literal["fake_xp_drop"] = "fake_xp_drop"
    skill: Skill
    xp: int = 0


class WidgetTextChanged(GameEvent):
    """Text shown in the chat-box dialog widget."""

    type: Literal["widget_text_changed"] = "widget_text_changed"
    text: str


class NameableNameChanged(GameEvent):
    type: Literal["nameable_name_changed"] = "nameable_name_changed"
    name: str
    prev_name: str | None = None


class RemovedFriend(GameEvent):
    type: Literal["removed_friend"] = "removed_friend"
    name: str


class ConfigChanged(GameEvent):
    type: Literal["config_changed"] = "config_changed"
    group: str
    key: str
    value: str | None = None


Event = Annotated[
    ChatMessage
    | ItemContainerChanged
    | GameTick
    | GameStateChanged
    | MenuOptionClicked
    | FakeXpDrop
    | WidgetTextChanged
    | NameableNameChanged
    | RemovedFriend
    | ConfigChanged,
    Field(discriminator="type"),
]

_EVENT_ADAPTER: TypeAdapter[Event] = TypeAdapter(Event)


def parse_event(data: dict[str, Any]) -> GameEvent:
    """Decode a ``type``-tagged mapping into its event model.

    Raises:
        pydantic.ValidationError: if the tag is unknown or fields are invalid
    """
    return _EVENT_ADAPTER.validate_python(data)
