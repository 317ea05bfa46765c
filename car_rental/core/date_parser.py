"""
Relative date expression parsing.

This module turns human-relative expressions such as ``"today"``,
``"tomorrow"`` or ``"in 2 days"`` into absolute, timezone-aware instants
anchored to a reference instant.

The parser never reads the system clock on its own when a reference is
given. Without one it asks the clock it was built with, so tests can pin
"now" by constructing ``DateParser.frozen(instant)`` instead of patching
global time.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from .errors import UnrecognizedDateExpressionError

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

_FIXED_OFFSETS = {
    "now": timedelta(0),
    "today": timedelta(0),
    "tomorrow": timedelta(days=1),
    "yesterday": timedelta(days=-1),
}

_UNIT_DAYS = {"day": 1, "week": 7}

_FUTURE_PATTERN = re.compile(r"^in\s+(?P<count>\d+)\s+(?P<unit>day|week)s?$")
_PAST_PATTERN = re.compile(r"^(?P<count>\d+)\s+(?P<unit>day|week)s?\s+ago$")


def utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime.

    Naive values are taken to already be in UTC, which is how stores that
    drop the offset (SQLite) hand timestamps back.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class DateParser:
    """Resolve relative date expressions against a reference instant."""

    def __init__(self, clock: Optional[Clock] = None) -> None:
        """Initialize the parser.

        Args:
            clock: Zero-argument callable returning the current instant.
                Defaults to UTC now.
        """
        self._clock: Clock = clock or utc_now

    @classmethod
    def frozen(cls, instant: datetime) -> "DateParser":
        """Build a parser whose clock always returns ``instant``."""
        pinned = ensure_utc(instant)
        return cls(clock=lambda: pinned)

    def now(self) -> datetime:
        """Current instant according to the parser's clock, in UTC."""
        return ensure_utc(self._clock())

    def parse(self, expression: str, reference: Optional[datetime] = None) -> datetime:
        """Convert a relative expression into an absolute instant.

        Args:
            expression: One of ``now``, ``today``, ``tomorrow``, ``yesterday``,
                ``in N day(s)``, ``in N week(s)``, ``N day(s) ago`` or
                ``N week(s) ago`` (case-insensitive).
            reference: Anchor instant. Defaults to the parser's clock.

        Returns:
            Timezone-aware UTC datetime.

        Raises:
            UnrecognizedDateExpressionError: If the expression matches no form or
                resolves outside the representable date range.
        """
        anchor = ensure_utc(reference) if reference is not None else self.now()
        offset = self._offset_for(expression)
        try:
            resolved = anchor + offset
        except OverflowError as exc:
            raise UnrecognizedDateExpressionError(expression) from exc
        logger.debug(f"Parsed date expression {expression!r} -> {resolved.isoformat()}")
        return resolved

    @staticmethod
    def _offset_for(expression: str) -> timedelta:
        if not isinstance(expression, str):
            raise UnrecognizedDateExpressionError(repr(expression))

        normalized = " ".join(expression.strip().lower().split())

        if normalized in _FIXED_OFFSETS:
            return _FIXED_OFFSETS[normalized]

        match = _FUTURE_PATTERN.match(normalized)
        sign = 1
        if match is None:
            match = _PAST_PATTERN.match(normalized)
            sign = -1
        if match is None:
            raise UnrecognizedDateExpressionError(expression)

        try:
            days = int(match.group("count")) * _UNIT_DAYS[match.group("unit")]
            return timedelta(days=sign * days)
        except (OverflowError, ValueError) as exc:
            raise UnrecognizedDateExpressionError(expression) from exc
