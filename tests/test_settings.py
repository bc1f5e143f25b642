# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Tests for settings loading."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from clientplugins.settings import FishBarrelConfig, Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CLIENTPLUGINS_LOG_LEVEL", raising=False)
    settings = Settings()

    assert settings.log_level == "WARNING"
    assert settings.fish_barrel.capacity == 28
    assert settings.fish_barrel.incomplete_indicators == ["Raw", ","]
    assert settings.last_seen.persist_interval_ticks == 100
    assert settings.life_saving.ring_of_life_notification is True
    assert settings.log_format == "console"
    assert settings.friends_viewer.max_players == 10
    assert settings.friends_viewer.update_interval_ticks == 5


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CLIENTPLUGINS_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("CLIENTPLUGINS_FISH_BARREL__CAPACITY", "20")
    monkeypatch.setenv("CLIENTPLUGINS_LIFE_SAVING__PHOENIX_NECKLACE_INFOBOX", "false")
    monkeypatch.setenv("CLIENTPLUGINS_FRIENDS_VIEWER__SHOW_GUEST_CLAN", "false")

    settings = Settings()

    assert settings.log_level == "DEBUG"
    assert settings.fish_barrel.capacity == 20
    assert settings.life_saving.phoenix_necklace_infobox is False
    assert settings.friends_viewer.show_guest_clan is False


def test_capacity_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        FishBarrelConfig(capacity=0)


def test_unknown_log_format_is_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(log_format="xml")
