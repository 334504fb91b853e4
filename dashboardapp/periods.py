"""
Period selection used by the dashboard and the exports.

A period is a year plus an optional month (0-based, as in the month picker)
and an optional day. Dates are compared as ``YYYY-MM-DD`` strings split into
integers; anything that does not parse is simply outside every period.
"""

from __future__ import annotations

from dataclasses import dataclass

ALL = 'ALL'


def split_date(value):
    """(y, m, d) from 'YYYY-MM-DD', or None."""
    if not value or not isinstance(value, str):
        return None
    parts = value.strip().split('-')
    if len(parts) != 3:
        return None
    try:
        return tuple(int(p) for p in parts)
    except ValueError:
        return None


@dataclass(frozen=True)
class Period:
    year: int
    month: int | None = None  # None = whole year
    day: int | None = None    # None = any day

    def matches(self, value) -> bool:
        parts = split_date(value)
        if parts is None:
            return False
        y, m, d = parts
        if y != self.year:
            return False
        if self.month is not None and (m - 1) != self.month:
            return False
        if self.day is not None and d != self.day:
            return False
        return True

    def label(self) -> str:
        if self.month is None:
            return f"{self.year:04d}"
        if self.day is None:
            return f"{self.year:04d}-{self.month + 1:02d}"
        return f"{self.year:04d}-{self.month + 1:02d}-{self.day:02d}"

    @classmethod
    def from_query(cls, params, today):
        """
        Build from ?year=&month=&day= ; month is 'ALL' or 0..11, day blank or 1..31.
        Missing or unreadable values fall back to the current year / month.
        """
        year = _int_or(params.get('year'), today.year)

        raw_month = (params.get('month') or '').strip()
        if raw_month.upper() == ALL:
            month = None
        else:
            month = _int_or(raw_month, today.month - 1)
            if not 0 <= month <= 11:
                month = today.month - 1

        day = _int_or(params.get('day'), None)
        if day is not None and not 1 <= day <= 31:
            day = None

        return cls(year=year, month=month, day=day)


def _int_or(value, default):
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return default
