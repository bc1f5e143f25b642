# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Always-visible lists of online friends and channel members."""

from __future__ import annotations

from clientplugins.friendsviewer.plugin import FriendsViewerPlugin, Section, ViewerEntry

__all__ = ["FriendsViewerPlugin", "Section", "ViewerEntry"]
