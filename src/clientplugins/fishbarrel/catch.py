# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Per-tick estimation of fish going into the barrel.

Three signals are collected during a tick and resolved together:

- catch messages in chat (how many fish were caught),
- fish appearing in the inventory (the barrel could not take them),
- cooking XP drops (the infernal harpoon cooked a fish instead of keeping it).
"""

from __future__ import annotations

import re

from clientplugins.fishbarrel.barrel import ALL_FISH_TYPES, FISH_TYPES_BY_NAME, FishBarrel
from clientplugins.logging import get_logger

log = get_logger(__name__)

# Only the start is matched; some catches append text, e.g. infernal eels with ice gloves.
_FISH_CAUGHT_RE = re.compile(r"^You catch (?P<count>an?|some|[0-9]+) (?P<fish>[a-zA-Z ]+?)[.!]")

RADA_DOUBLE_CATCH_MESSAGE = "Rada's blessing enabled you to catch an extra fish."
FLAKES_DOUBLE_CATCH_MESSAGE = "The spirit flakes enabled you to catch an extra fish."
CORMORANT_CATCH_MESSAGE = "Your cormorant returns with its catch."

_SINGLE_CATCH_MESSAGES = frozenset(
    {RADA_DOUBLE_CATCH_MESSAGE, FLAKES_DOUBLE_CATCH_MESSAGE, CORMORANT_CATCH_MESSAGE}
)
_ONE_FISH_WORDS = frozenset({"a", "an", "some"})


def catch_count(text: str) -> int:
    """Number of fish a chat message says were caught, 0 if it is not a catch message."""
    if text in _SINGLE_CATCH_MESSAGES:
        return 1

    match = _FISH_CAUGHT_RE.match(text)
    if not match or match["fish"] not in FISH_TYPES_BY_NAME:
        return 0

    count = match["count"]
    if count in _ONE_FISH_WORDS:
        return 1
    try:
        return int(count)
    except ValueError:
        return 0


class CatchEstimator:
    """Turns one tick's worth of evidence into an update of the barrel state."""

    def __init__(self, barrel: FishBarrel) -> None:
        self.barrel = barrel
        self.catch_signals = 0
        self.new_items = 0
        self.auxiliary_signals = 0

    def record_catch_signal(self, text: str) -> int:
        delta = catch_count(text)
        self.catch_signals += delta
        return delta

    def record_new_item(self, item_id: int) -> None:
        if item_id in ALL_FISH_TYPES:
            self.new_items += 1

    def record_auxiliary_production(self) -> None:
        self.auxiliary_signals += 1

    def resolve_tick(self) -> FishBarrel:
        if self.catch_signals > 0:
            if self.new_items == 0:
                # everything caught went into the barrel
                self.barrel.add(max(0, self.catch_signals - self.auxiliary_signals))
            else:
                # a fish landed in the inventory, so the barrel is full
                self.barrel.fill()
            log.debug(
                "fish_barrel_tick_resolved",
                caught=self.catch_signals,
                in_inventory=self.new_items,
                cooked=self.auxiliary_signals,
                holding=self.barrel.holding,
                unknown=self.barrel.unknown,
            )

        self.catch_signals = 0
        self.new_items = 0
        self.auxiliary_signals = 0
        return self.barrel

    def record_container_full_message(self) -> None:
        self.barrel.invalidate()

    def record_container_emptied_action(self) -> None:
        self.barrel.empty()
