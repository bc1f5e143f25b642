# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Fish barrel content tracking."""

from __future__ import annotations

from clientplugins.fishbarrel.barrel import FishBarrel
from clientplugins.fishbarrel.catch import CatchEstimator
from clientplugins.fishbarrel.plugin import FishBarrelPlugin
from clientplugins.fishbarrel.widget_parser import FishBarrelWidgetParser, ParseResult

__all__ = [
    "CatchEstimator",
    "FishBarrel",
    "FishBarrelPlugin",
    "FishBarrelWidgetParser",
    "ParseResult",
]
