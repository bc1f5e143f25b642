# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Last seen online tracking for friends."""

from __future__ import annotations

from clientplugins.lastseen.dao import LastSeenDao
from clientplugins.lastseen.formatter import format_last_seen
from clientplugins.lastseen.plugin import LastSeenPlugin

__all__ = ["LastSeenDao", "LastSeenPlugin", "format_last_seen"]
