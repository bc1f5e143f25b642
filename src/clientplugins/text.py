# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Helpers for text coming from the client UI."""

from __future__ import annotations

import re

_TAG_RE = re.compile(r"<[^>]*>")


def remove_tags(text: str) -> str:
    """Strip markup tags such as ``<col=ff9040>`` or ``<img=2>``."""
    return _TAG_RE.sub("", text)


def to_display_name(name: str) -> str:
    """Normalize a player name as shown in the UI into the name used as a key.

    The client renders spaces in names as non-breaking spaces, and names may
    carry leading or trailing whitespace.
    """
    return name.replace("\u00a0", " ").strip()
