# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Relative-time formatting for last seen timestamps."""

from __future__ import annotations

import time

_UNITS: tuple[tuple[int, str, str], ...] = (
    (24 * 60 * 60 * 1000, "day", "days"),
    (60 * 60 * 1000, "hour", "hours"),
    (60 * 1000, "minute", "minutes"),
)


def now_ms() -> int:
    return int(time.time() * 1000)


def format_last_seen(last_seen_ms: int | None, current_ms: int | None = None) -> str:
    """Format a timestamp as relative time, e.g. ``"2 hours ago"``.

    Uses the largest unit with a value of at least 1; anything under a minute
    is ``"just now"``, and a missing timestamp is ``"never"``.
    """
    if last_seen_ms is None:
        return "never"

    diff_ms = (now_ms() if current_ms is None else current_ms) - last_seen_ms
    for unit_ms, singular, plural in _UNITS:
        amount = diff_ms // unit_ms
        if amount > 0:
            return f"{amount} {singular if amount == 1 else plural} ago"
    return "just now"
