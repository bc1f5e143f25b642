# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Life-saving jewellery infoboxes and notifications."""

from __future__ import annotations

from clientplugins.lifesaving.plugin import LifeSavingItem, LifeSavingPlugin

__all__ = ["LifeSavingItem", "LifeSavingPlugin"]
