"""
Visit lifecycle as an explicit two-state variant.

Stored visits keep the original document shape (``status`` plus an
``outcome`` tag that doubles as the planning mode). ``visit_state`` reads
that shape once so the rest of the code never compares sentinel strings.
"""

from __future__ import annotations

from dataclasses import dataclass

STATUS_PLANNED = 'planned'
STATUS_COMPLETED = 'completed'

OUTCOME_APPOINTMENT = 'CITA'
OUTCOME_PLANNED = 'PLANEADA'
OUTCOME_FOLLOW_UP = 'SEGUIMIENTO'
OUTCOME_ABSENT = 'AUSENTE'
OUTCOME_CANCELLED = 'CANCELADA'

REPORT_OUTCOMES = ('SEGUIMIENTO', 'COTIZACIÓN', 'INTERESADO', 'AUSENTE')

NOTE_APPOINTMENT = 'CITA PROGRAMADA'
NOTE_PLANNED = 'VISITA PLANEADA'

PLANNING_OUTCOMES = {OUTCOME_APPOINTMENT, OUTCOME_PLANNED}
PLANNING_NOTES = {NOTE_APPOINTMENT, NOTE_PLANNED}

# planned visits tagged with these did not happen (yet); they stay planned
EXCLUDED_OUTCOMES = {OUTCOME_ABSENT, OUTCOME_CANCELLED}


@dataclass(frozen=True)
class Planned:
    is_appointment: bool = False
    # AUSENTE/CANCELADA while still planned
    excluded: bool = False
    outcome: str = OUTCOME_PLANNED


@dataclass(frozen=True)
class Completed:
    outcome: str
    note: str = ''
    follow_up: str = ''


def visit_state(visit):
    """Planned / Completed for a stored visit dict, or None for unknown status."""
    status = visit.get('status')
    outcome = visit.get('outcome') or ''
    if status == STATUS_COMPLETED:
        return Completed(
            outcome=outcome,
            note=visit.get('note') or '',
            follow_up=visit.get('followUp') or '',
        )
    if status == STATUS_PLANNED:
        return Planned(
            is_appointment=outcome == OUTCOME_APPOINTMENT,
            excluded=outcome in EXCLUDED_OUTCOMES,
            outcome=outcome,
        )
    return None
