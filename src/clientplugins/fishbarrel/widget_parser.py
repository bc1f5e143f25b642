# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Parser for the barrel contents shown in the chat-box dialog widget.

The dialog wraps long listings over several pages, so a listing such as::

    The barrel contains:<br>1 x Raw anglerfish, 2 x Raw monkfish, 3 x Raw
    shrimps, 1 x Raw bass,

may be followed by another page continuing the same listing. Counts from
every page are summed until a page that does not end mid-entry.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from enum import Enum

from clientplugins.logging import get_logger

log = get_logger(__name__)

EMPTY_MESSAGE = "The barrel is empty."
FIRST_MESSAGE_PREFIX = "The barrel contains:"
LINE_BREAK = "<br>"

# A page ending with any of these continues on the next one.
DEFAULT_INCOMPLETE_INDICATORS: tuple[str, ...] = ("Raw", ",")

# Names are single-space separated words so a space between entries matches only one way.
_NAME = r"[a-zA-Z]+(?: [a-zA-Z]+)*"
_ENTRY = rf"[0-9]+ x {_NAME},? ?"
_ENTRY_COUNT_RE = re.compile(r"([0-9]+) x ")
_FIRST_PAGE_RE = re.compile(rf"(?:{_ENTRY})+")
# A continuation may open with the wrapped tail of the previous page's last name.
_NEXT_PAGE_RE = re.compile(rf"(?:{_NAME},? ?)?(?:{_ENTRY})*")
_WHITESPACE_RE = re.compile(r"\s+")


class ParseResult(str, Enum):
    INVALID = "INVALID"
    INCOMPLETE = "INCOMPLETE"
    VALID = "VALID"


class FishBarrelWidgetParser:
    """Accumulates the fish count across pages of the barrel contents dialog.

    A call that returns INVALID never changes the parser state.
    """

    def __init__(self, incomplete_indicators: Sequence[str] = DEFAULT_INCOMPLETE_INDICATORS) -> None:
        self.incomplete_indicators = tuple(incomplete_indicators)
        self._fish_count = 0
        self._in_progress = False
        # the last INCOMPLETE page was cut inside an entry name
        self._ends_mid_name = False

    @property
    def fish_count(self) -> int:
        return self._fish_count

    @property
    def in_progress(self) -> bool:
        """True after an INCOMPLETE page, while the next page is expected."""
        return self._in_progress

    def reset(self) -> None:
        self._fish_count = 0
        self._in_progress = False
        self._ends_mid_name = False

    def parse(self, message: str | None) -> ParseResult:
        if not message or not message.strip():
            return ParseResult.INVALID
        message = _WHITESPACE_RE.sub(" ", message.replace(LINE_BREAK, " ")).strip()

        if message == EMPTY_MESSAGE:
            self.reset()
            return ParseResult.VALID

        if message.startswith(FIRST_MESSAGE_PREFIX):
            base = 0
            message = message[len(FIRST_MESSAGE_PREFIX) :].strip()
            pattern = _FIRST_PAGE_RE
        elif self._fish_count != 0:
            # a listing is already under way, this page continues it
            base = self._fish_count
            pattern = _NEXT_PAGE_RE if self._ends_mid_name else _FIRST_PAGE_RE
        else:
            return ParseResult.INVALID

        if not message or not pattern.fullmatch(message):
            log.debug("fish_barrel_widget_unrecognized", message=message)
            return ParseResult.INVALID

        counts = [int(count) for count in _ENTRY_COUNT_RE.findall(message)]
        incomplete = any(message.endswith(indicator) for indicator in self.incomplete_indicators)
        if not counts and not incomplete:
            # a bare name tail is only a page when it is followed by more entries
            return ParseResult.INVALID

        # Counts are summed before being applied so a failed call leaves no partial total.
        self._fish_count = base + sum(counts)

        if incomplete:
            self._in_progress = True
            self._ends_mid_name = message[-1].isalpha()
            return ParseResult.INCOMPLETE

        self._ends_mid_name = False
        self._in_progress = False
        return ParseResult.VALID
