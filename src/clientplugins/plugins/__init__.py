# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Plugin interface and dispatch."""

from __future__ import annotations

from clientplugins.plugins.base import Handler, Plugin
from clientplugins.plugins.manager import PluginManager

__all__ = ["Handler", "Plugin", "PluginManager"]
