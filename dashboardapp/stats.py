"""
KPI rollups for the manager / executive dashboard.

``compute_stats`` is a pure function over the doctor roster and the
procedure list (documents as returned by the stores). It never touches the
database, so the same inputs always produce the same ``DashboardStats``.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field

from visits.states import (
    OUTCOME_ABSENT,
    Completed,
    Planned,
    visit_state,
)

PERFORMED = 'performed'
RECENT_LIMIT = 10
ACTIVITY_LIMIT = 50


def percent(part, whole) -> int:
    """round(part / whole * 100) with halves rounded up; 0 for an empty whole."""
    if not whole:
        return 0
    return (200 * part + whole) // (2 * whole)


def _money(value):
    return value or 0


@dataclass
class VisitCounts:
    planned: int = 0
    completed: int = 0
    other: int = 0


@dataclass
class ExecutiveRow:
    name: str
    color: str = ''
    doctors: int = 0
    planned: int = 0
    completed: int = 0
    revenue: float = 0
    commission: float = 0
    performance: int = 0


@dataclass
class DashboardStats:
    totalDoctors: int = 0
    plannedVisits: int = 0
    completedVisits: int = 0
    otherVisits: int = 0
    totalRevenue: float = 0
    totalCommission: float = 0
    performance: int = 0
    classifications: dict = field(default_factory=lambda: {'A': 0, 'B': 0, 'C': 0, 'None': 0})
    teamBreakdown: list = field(default_factory=list)
    recentProcedures: list = field(default_factory=list)
    recentVisits: list = field(default_factory=list)

    def as_dict(self) -> dict:
        return asdict(self)


def count_visits(doctors, period) -> VisitCounts:
    """Period counters for the headline card (appointments count as planned)."""
    counts = VisitCounts()
    for doc in doctors:
        for visit in doc.get('visits') or []:
            if not period.matches(visit.get('date')):
                continue
            state = visit_state(visit)
            if isinstance(state, Completed):
                counts.completed += 1
            elif isinstance(state, Planned):
                if state.is_appointment:
                    counts.planned += 1
                elif state.excluded:
                    counts.other += 1
                else:
                    counts.planned += 1
    return counts


def count_team_visits(doctors, period) -> VisitCounts:
    """
    Counters for the team table. Stricter than count_visits: appointments and
    planned no-shows (AUSENTE) are left out of the planned quota, a planned
    CANCELADA still counts.
    """
    counts = VisitCounts()
    for doc in doctors:
        for visit in doc.get('visits') or []:
            if not period.matches(visit.get('date')):
                continue
            state = visit_state(visit)
            if isinstance(state, Completed):
                counts.completed += 1
            elif isinstance(state, Planned):
                if not state.is_appointment and state.outcome != OUTCOME_ABSENT:
                    counts.planned += 1
    return counts


def classify(doctors) -> dict:
    tally = {'A': 0, 'B': 0, 'C': 0, 'None': 0}
    for doc in doctors:
        key = doc.get('classification')
        tally[key if key in ('A', 'B', 'C') else 'None'] += 1
    return tally


def _executive_entries(executives, roster):
    if executives is None:
        names = sorted({d.get('executive') for d in roster if d.get('executive')})
        return [{'name': n} for n in names]
    entries = []
    for item in executives:
        entries.append(item if isinstance(item, dict) else {'name': item})
    return entries


def team_breakdown(roster, procedures, period, executives=None) -> list:
    rows = []
    for entry in _executive_entries(executives, roster):
        name = entry.get('name')
        docs = [d for d in roster if d.get('executive') == name]
        doc_ids = {d.get('id') for d in docs}
        counts = count_team_visits(docs, period)
        done = [
            p for p in procedures
            if p.get('status') == PERFORMED
            and period.matches(p.get('date'))
            and p.get('doctorId') in doc_ids
        ]
        rows.append(ExecutiveRow(
            name=name,
            color=entry.get('color', ''),
            doctors=len(docs),
            planned=counts.planned,
            completed=counts.completed,
            revenue=sum((_money(p.get('cost')) for p in done), 0),
            commission=sum((_money(p.get('commission')) for p in done), 0),
            performance=percent(counts.completed, counts.planned + counts.completed),
        ))
    return rows


def activity_feed(doctors, period, limit=ACTIVITY_LIMIT) -> list:
    """Completed visits in the period, newest first, tagged with their doctor."""
    entries = []
    for doc in doctors:
        for visit in doc.get('visits') or []:
            if not period.matches(visit.get('date')):
                continue
            if not isinstance(visit_state(visit), Completed):
                continue
            entry = dict(visit)
            entry.update({
                'doctorId': doc.get('id'),
                'doctorName': doc.get('name') or '',
                'executive': doc.get('executive') or '',
            })
            entries.append(entry)
    return sorted(entries, key=lambda v: v['date'], reverse=True)[:limit]


def compute_stats(roster, procedures, period, executive=None, executives=None, limit=RECENT_LIMIT) -> DashboardStats:
    roster = list(roster or [])
    procedures = list(procedures or [])

    doctors = [d for d in roster if d.get('executive') == executive] if executive else roster
    counts = count_visits(doctors, period)

    if executive:
        own_ids = {d.get('id') for d in doctors}
        relevant = [p for p in procedures if period.matches(p.get('date')) and p.get('doctorId') in own_ids]
    else:
        relevant = [p for p in procedures if period.matches(p.get('date'))]
    performed = [p for p in relevant if p.get('status') == PERFORMED]

    # stable sort: same-day procedures keep their input order
    recent = sorted(relevant, key=lambda p: p.get('date') or '', reverse=True)[:limit]

    return DashboardStats(
        totalDoctors=len(doctors),
        plannedVisits=counts.planned,
        completedVisits=counts.completed,
        otherVisits=counts.other,
        totalRevenue=sum((_money(p.get('cost')) for p in performed), 0),
        totalCommission=sum((_money(p.get('commission')) for p in performed), 0),
        performance=percent(counts.completed, counts.planned + counts.completed + counts.other),
        classifications=classify(doctors),
        teamBreakdown=[asdict(r) for r in team_breakdown(roster, procedures, period, executives)],
        recentProcedures=[dict(p) for p in recent],
        recentVisits=activity_feed(doctors, period),
    )
