# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Fish barrel state and item tables."""

from __future__ import annotations

from types import MappingProxyType

from clientplugins import items

DEFAULT_CAPACITY = 28

BARREL_IDS: frozenset[int] = frozenset(
    {
        items.FISH_BARREL,
        items.OPEN_FISH_BARREL,
        items.FISH_SACK_BARREL,
        items.OPEN_FISH_SACK_BARREL,
    }
)

# Only an open barrel collects fish as they are caught.
OPEN_BARREL_IDS: frozenset[int] = frozenset({items.OPEN_FISH_BARREL, items.OPEN_FISH_SACK_BARREL})

# Fish name as it appears in "You catch ..." chat messages -> item id.
FISH_TYPES_BY_NAME = MappingProxyType(
    {
        "shrimps": items.RAW_SHRIMPS,
        "sardine": items.RAW_SARDINE,
        "Karambwanji": items.KARAMBWANJI,
        "herring": items.RAW_HERRING,
        "anchovies": items.RAW_ANCHOVIES,
        "mackerel": items.RAW_MACKEREL,
        "trout": items.RAW_TROUT,
        "cod": items.RAW_COD,
        "pike": items.RAW_PIKE,
        "slimy swamp eel": items.RAW_SLIMY_EEL,
        "salmon": items.RAW_SALMON,
        "tuna": items.RAW_TUNA,
        "rainbow fish": items.RAW_RAINBOW_FISH,
        "cave eel": items.RAW_CAVE_EEL,
        "lobster": items.RAW_LOBSTER,
        "bass": items.RAW_BASS,
        "leaping trout": items.LEAPING_TROUT,
        "swordfish": items.RAW_SWORDFISH,
        "lava eel": items.RAW_LAVA_EEL,
        "leaping salmon": items.LEAPING_SALMON,
        "monkfish": items.RAW_MONKFISH,
        "Karambwan": items.RAW_KARAMBWAN,
        "leaping sturgeon": items.LEAPING_STURGEON,
        "shark": items.RAW_SHARK,
        "infernal eel": items.INFERNAL_EEL,
        "minnows": items.MINNOW,
        "anglerfish": items.RAW_ANGLERFISH,
        "dark crab": items.RAW_DARK_CRAB,
        "sacred eel": items.SACRED_EEL,
    }
)

# Caught with a cormorant on Molch island; never named in a catch message.
MOLCH_ISLAND_FISH_TYPES: frozenset[int] = frozenset(
    {items.BLUEGILL, items.COMMON_TENCH, items.MOTTLED_EEL, items.GREATER_SIREN}
)

ALL_FISH_TYPES: frozenset[int] = frozenset(FISH_TYPES_BY_NAME.values()) | MOLCH_ISLAND_FISH_TYPES


class FishBarrel:
    """Best-effort count of the fish held in a barrel.

    ``unknown`` means the count cannot be trusted: either nothing has been
    observed yet this session, or an overflow made it unverifiable.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self.holding = 0
        self.unknown = True

    def reset(self) -> None:
        self.holding = 0
        self.unknown = True

    def add(self, delta: int) -> None:
        self.holding = min(self.capacity, self.holding + max(0, delta))

    def set_holding(self, count: int) -> None:
        self.holding = max(0, min(self.capacity, count))
        self.unknown = False

    def fill(self) -> None:
        self.set_holding(self.capacity)

    def empty(self) -> None:
        self.set_holding(0)

    def invalidate(self) -> None:
        self.unknown = True

    def display_text(self) -> str:
        return "?" if self.unknown else str(self.holding)

    def __repr__(self) -> str:
        return f"FishBarrel(holding={self.holding}, unknown={self.unknown}, capacity={self.capacity})"
