# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Small add-ons for a game client that track transient game state from events."""

from __future__ import annotations

__version__ = "0.1.0"
