"""
Calendar grid for the executive planner.

Cells are plain ``datetime.date`` objects (``None`` for month padding) and
events are looked up by their ``YYYY-MM-DD`` key built from the calendar
components, so no timezone ever shifts a visit to the neighbouring day.
"""

from __future__ import annotations

from calendar import monthrange
from datetime import date, timedelta

MONTH = 'month'
WEEK = 'week'
DAY = 'day'
VIEW_MODES = (MONTH, WEEK, DAY)

GRID_CELLS = 42  # 6 rows x 7 columns

FIRST_SLOT_HOUR = 9
LAST_SLOT_HOUR = 20


def date_key(d: date) -> str:
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def sunday_index(d: date) -> int:
    """Weekday with 0 = Sunday .. 6 = Saturday."""
    return (d.weekday() + 1) % 7


def month_cells(ref: date) -> list:
    leading = sunday_index(ref.replace(day=1))
    days_in_month = monthrange(ref.year, ref.month)[1]

    cells = [None] * leading
    cells.extend(date(ref.year, ref.month, n) for n in range(1, days_in_month + 1))
    while len(cells) < GRID_CELLS:
        cells.append(None)
    return cells


def week_cells(ref: date) -> list:
    start = ref - timedelta(days=sunday_index(ref))
    return [start + timedelta(days=i) for i in range(7)]


def day_cells(ref: date) -> list:
    return [ref]


def grid_cells(ref: date, mode: str = MONTH) -> list:
    if mode == MONTH:
        return month_cells(ref)
    if mode == WEEK:
        return week_cells(ref)
    if mode == DAY:
        return day_cells(ref)
    raise ValueError(f"unknown calendar view: {mode!r}")


def shift(ref: date, mode: str, step: int = 1) -> date:
    """Previous/next page of the calendar (step -1 / +1)."""
    if mode == MONTH:
        months = ref.year * 12 + (ref.month - 1) + step
        year, month = divmod(months, 12)
        month += 1
        return date(year, month, min(ref.day, monthrange(year, month)[1]))
    if mode == WEEK:
        return ref + timedelta(days=7 * step)
    if mode == DAY:
        return ref + timedelta(days=step)
    raise ValueError(f"unknown calendar view: {mode!r}")


def time_slots() -> list:
    slots = []
    for hour in range(FIRST_SLOT_HOUR, LAST_SLOT_HOUR + 1):
        slots.append(f"{hour:02d}:00")
        slots.append(f"{hour:02d}:30")
    return slots


def is_today(d, today: date) -> bool:
    return d is not None and (d.year, d.month, d.day) == (today.year, today.month, today.day)


def executives_of(doctors) -> list:
    return sorted({d.get('executive') for d in doctors if d.get('executive')})


def events_by_date(doctors, executive=None) -> dict:
    """{'YYYY-MM-DD': [{'docId', 'docName', 'visit'}, ...]} for one executive's doctors."""
    events = {}
    for doc in doctors:
        if executive is not None and doc.get('executive') != executive:
            continue
        for visit in doc.get('visits') or []:
            when = visit.get('date')
            if not when:
                continue
            events.setdefault(when, []).append({
                'docId': doc.get('id'),
                'docName': doc.get('name') or '',
                'visit': visit,
            })
    return events


def bucket(cells, events: dict, today: date) -> list:
    rows = []
    for cell in cells:
        if cell is None:
            rows.append(None)
            continue
        rows.append({
            'date': date_key(cell),
            'day': cell.day,
            'isToday': is_today(cell, today),
            'events': list(events.get(date_key(cell), [])),
        })
    return rows


def day_slots(ref: date, events: dict) -> list:
    todays = events.get(date_key(ref), [])
    return [
        {'time': slot, 'events': [e for e in todays if e['visit'].get('time') == slot]}
        for slot in time_slots()
    ]


def render_calendar(doctors, ref: date, mode: str, today: date, executive=None) -> dict:
    """Everything the planner view needs for one page of the calendar."""
    events = events_by_date(doctors, executive)
    payload = {
        'mode': mode,
        'date': date_key(ref),
        'executive': executive,
        'previous': date_key(shift(ref, mode, -1)),
        'next': date_key(shift(ref, mode, 1)),
        'cells': bucket(grid_cells(ref, mode), events, today),
    }
    if mode == DAY:
        payload['slots'] = day_slots(ref, events)
    return payload
