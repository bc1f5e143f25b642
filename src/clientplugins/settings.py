# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Application settings."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FishBarrelConfig(BaseModel):
    capacity: int = Field(default=28, gt=0)
    # A widget page ending with any of these continues on the next page.
    incomplete_indicators: list[str] = Field(default_factory=lambda: ["Raw", ","])


class LastSeenConfig(BaseModel):
    persist_interval_ticks: int = Field(default=100, gt=0)


class LifeSavingConfig(BaseModel):
    ring_of_life_infobox: bool = True
    ring_of_life_notification: bool = True
    phoenix_necklace_infobox: bool = True
    phoenix_necklace_notification: bool = True


class FriendsViewerConfig(BaseModel):
    show_friends: bool = True
    show_chat_channel: bool = True
    show_your_clan: bool = True
    show_guest_clan: bool = True
    max_players: int = Field(default=10, ge=0)
    update_interval_ticks: int = Field(default=5, gt=0)


class Settings(BaseSettings):
    log_level: str = "WARNING"
    log_format: Literal["console", "json"] = "console"
    fish_barrel: FishBarrelConfig = Field(default_factory=FishBarrelConfig)
    last_seen: LastSeenConfig = Field(default_factory=LastSeenConfig)
    life_saving: LifeSavingConfig = Field(default_factory=LifeSavingConfig)
    friends_viewer: FriendsViewerConfig = Field(default_factory=FriendsViewerConfig)

    model_config = SettingsConfigDict(
        env_prefix="CLIENTPLUGINS_",
        env_nested_delimiter="__",
        extra="ignore",
    )
