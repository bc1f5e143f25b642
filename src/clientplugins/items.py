# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Item ids and container ids used by the plugins."""

from __future__ import annotations

from enum import IntEnum


class InventoryID(IntEnum):
    INVENTORY = 93
    EQUIPMENT = 94


class EquipmentSlot(IntEnum):
    HEAD = 0
    CAPE = 1
    AMULET = 2
    WEAPON = 3
    BODY = 4
    SHIELD = 5
    LEGS = 7
    GLOVES = 9
    BOOTS = 10
    RING = 12
    AMMO = 13


# Fish barrels
FISH_BARREL = 25582
OPEN_FISH_BARREL = 25584
FISH_SACK_BARREL = 25585
OPEN_FISH_SACK_BARREL = 25587

# Fish
RAW_SHRIMPS = 317
RAW_ANCHOVIES = 321
RAW_SARDINE = 327
RAW_SALMON = 331
RAW_TROUT = 335
RAW_COD = 341
RAW_HERRING = 345
RAW_PIKE = 349
RAW_MACKEREL = 353
RAW_TUNA = 359
RAW_BASS = 363
RAW_SWORDFISH = 371
RAW_LOBSTER = 377
RAW_SHARK = 383
RAW_LAVA_EEL = 2148
RAW_KARAMBWAN = 3142
KARAMBWANJI = 3150
RAW_SLIMY_EEL = 3379
RAW_CAVE_EEL = 5001
RAW_MONKFISH = 7944
RAW_RAINBOW_FISH = 10138
LEAPING_TROUT = 11328
LEAPING_SALMON = 11330
LEAPING_STURGEON = 11332
RAW_DARK_CRAB = 11934
SACRED_EEL = 13339
RAW_ANGLERFISH = 13439
INFERNAL_EEL = 21293
MINNOW = 21356
BLUEGILL = 22826
COMMON_TENCH = 22829
MOTTLED_EEL = 22832
GREATER_SIREN = 22835

# Life-saving jewellery
RING_OF_LIFE = 2570
PHOENIX_NECKLACE = 11090
