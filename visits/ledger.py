"""
Plan / report / delete operations on a doctor's visit list.

A doctor is handled as a plain document (the shape the store returns and
accepts back): ``{"id", "executive", "classification", "visits": [...], ...}``.
Operations never mutate the document they receive; ``VisitLedger.document()``
returns the replacement record that the caller upserts wholesale.
"""

from __future__ import annotations

import copy
import logging
import uuid

from django.core.exceptions import ValidationError

from .exceptions import NotFoundError
from .states import (
    NOTE_APPOINTMENT,
    NOTE_PLANNED,
    OUTCOME_APPOINTMENT,
    OUTCOME_FOLLOW_UP,
    OUTCOME_PLANNED,
    PLANNING_NOTES,
    PLANNING_OUTCOMES,
    STATUS_COMPLETED,
    STATUS_PLANNED,
)

logger = logging.getLogger(__name__)

DEFAULT_OBJECTIVE = 'VISITA'
DEFAULT_TIME = '09:00'


def new_visit_id() -> str:
    return uuid.uuid4().hex


def _upper(value) -> str:
    return (value or '').strip().upper()


class VisitLedger:
    """In-memory projection of one doctor's visits, indexed by visit id."""

    def __init__(self, doctor: dict):
        self._doctor = copy.deepcopy(doctor)
        self._visits = list(self._doctor.get('visits') or [])
        self._index = {v.get('id'): pos for pos, v in enumerate(self._visits)}

    @property
    def doctor_id(self):
        return self._doctor.get('id')

    def visits(self) -> list:
        return list(self._visits)

    def get(self, visit_id):
        pos = self._index.get(visit_id)
        return None if pos is None else self._visits[pos]

    def document(self) -> dict:
        doc = dict(self._doctor)
        doc['visits'] = [dict(v) for v in self._visits]
        return doc

    def plan(self, date: str, time: str | None = None, objective: str = '', is_appointment: bool = False) -> dict:
        visit = {
            'id': new_visit_id(),
            'date': date,
            'time': time or DEFAULT_TIME,
            'note': NOTE_APPOINTMENT if is_appointment else NOTE_PLANNED,
            'objective': _upper(objective) or DEFAULT_OBJECTIVE,
            'outcome': OUTCOME_APPOINTMENT if is_appointment else OUTCOME_PLANNED,
            'status': STATUS_PLANNED,
        }
        self._index[visit['id']] = len(self._visits)
        self._visits.append(visit)
        return dict(visit)

    def report(self, visit_id, note: str, outcome: str, date: str, time: str | None = None, follow_up: str = '') -> dict:
        if not (note or '').strip():
            raise ValidationError('Report note is required.', code='blank_note')
        pos = self._index.get(visit_id)
        if pos is None:
            raise NotFoundError('visit', visit_id)

        # status only ever moves forward to completed
        visit = dict(self._visits[pos])
        visit.update({
            'note': _upper(note),
            'outcome': outcome or OUTCOME_FOLLOW_UP,
            'followUp': _upper(follow_up),
            'date': date or visit.get('date'),
            'time': time or visit.get('time') or DEFAULT_TIME,
            'status': STATUS_COMPLETED,
        })
        self._visits[pos] = visit
        return dict(visit)

    def delete(self, visit_id) -> bool:
        if visit_id not in self._index:
            return False
        self._visits = [v for v in self._visits if v.get('id') != visit_id]
        self._index = {v.get('id'): pos for pos, v in enumerate(self._visits)}
        return True


def report_defaults(visit: dict) -> dict:
    """Initial values of the report form; planning sentinels are not echoed back."""
    note = visit.get('note') or ''
    outcome = visit.get('outcome') or ''
    return {
        'note': '' if note in PLANNING_NOTES else note,
        'outcome': OUTCOME_FOLLOW_UP if (not outcome or outcome in PLANNING_OUTCOMES) else outcome,
        'date': visit.get('date') or '',
        'time': visit.get('time') or DEFAULT_TIME,
        'followUp': visit.get('followUp') or '',
    }


# ============================
# Roster-level operations
# ============================

def _find(roster, doctor_id):
    for doc in roster:
        if doc.get('id') == doctor_id:
            return doc
    return None


def plan_visit(roster, doctor_id, date, time=None, objective='', is_appointment=False):
    """Append a planned visit to one doctor; returns (updated doctor, visit)."""
    if not doctor_id:
        raise ValidationError('Select a doctor first.', code='no_doctor')
    doctor = _find(roster, doctor_id)
    if doctor is None:
        raise ValidationError('Select a doctor first.', code='no_doctor')

    ledger = VisitLedger(doctor)
    visit = ledger.plan(date, time, objective, is_appointment)
    logger.info('visit %s planned for doctor %s on %s', visit['id'], doctor_id, date)
    return ledger.document(), visit


def report_visit(roster, doctor_id, visit_id, note, outcome, date, time=None, follow_up=''):
    doctor = _find(roster, doctor_id)
    if doctor is None:
        raise NotFoundError('doctor', doctor_id)
    ledger = VisitLedger(doctor)
    ledger.report(visit_id, note, outcome, date, time, follow_up)
    logger.info('visit %s of doctor %s reported as %s', visit_id, doctor_id, outcome)
    return ledger.document()


def delete_visit(roster, doctor_id, visit_id):
    """Updated doctor without the visit, or None when the doctor is unknown."""
    doctor = _find(roster, doctor_id)
    if doctor is None:
        return None
    ledger = VisitLedger(doctor)
    ledger.delete(visit_id)
    return ledger.document()
