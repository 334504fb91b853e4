from django.contrib.auth.decorators import login_required
from django.core.exceptions import ValidationError
from django.http import JsonResponse, HttpResponseBadRequest
from django.utils import timezone
from django.utils.dateparse import parse_date
from django.views.decorators.http import require_GET, require_POST

from doctors import store as doctor_store
from medicall.http import flag, not_found, read_payload, validation_error
from reps.executives import requested_executive

from . import ledger
from .calendar_grid import MONTH, VIEW_MODES, executives_of, render_calendar
from .exceptions import NotFoundError


# ============================
# Helpers
# ============================

def _scoped_doctor(request, doctor_id):
    """The doctor as a one-item roster, empty when unknown or owned by another executive."""
    if not doctor_id:
        return []
    doc = doctor_store.get_doctor(doctor_id)
    if doc is None:
        return []
    executive = requested_executive(request)
    if executive and doc.get('executive') != executive:
        return []
    return [doc]


def _pick(data, *names, default=''):
    for n in names:
        v = data.get(n)
        if v not in (None, ''):
            return v
    return default


# ============================
# API Endpoints
# ============================

@login_required
@require_POST
def api_plan(request):
    """
    Plan a routine visit or book an appointment for one doctor.
    Body: doctorId, date, time, objective, isAppointment.
    """
    data = read_payload(request)
    if not isinstance(data, dict):
        return HttpResponseBadRequest("Invalid payload")

    doctor_id = _pick(data, 'doctorId', 'doctor_id')
    try:
        doc, visit = ledger.plan_visit(
            _scoped_doctor(request, doctor_id),
            doctor_id,
            _pick(data, 'date'),
            _pick(data, 'time', default=None),
            _pick(data, 'objective'),
            flag(_pick(data, 'isAppointment', 'is_appointment', default=False)),
        )
    except ValidationError as exc:
        return validation_error(exc)

    doc = doctor_store.upsert_doctor(doc)
    return JsonResponse({"ok": True, "row": doc, "visit": visit})


@login_required
@require_POST
def api_report(request):
    """
    Close a visit with its result.
    Body: doctorId, visitId, note, outcome, date, time, followUp.
    """
    data = read_payload(request)
    if not isinstance(data, dict):
        return HttpResponseBadRequest("Invalid payload")

    doctor_id = _pick(data, 'doctorId', 'doctor_id')
    try:
        doc = ledger.report_visit(
            _scoped_doctor(request, doctor_id),
            doctor_id,
            _pick(data, 'visitId', 'visit_id'),
            _pick(data, 'note'),
            _pick(data, 'outcome'),
            _pick(data, 'date'),
            _pick(data, 'time', default=None),
            _pick(data, 'followUp', 'follow_up'),
        )
    except ValidationError as exc:
        return validation_error(exc)
    except NotFoundError as exc:
        return not_found(exc)

    doc = doctor_store.upsert_doctor(doc)
    return JsonResponse({"ok": True, "row": doc})


@login_required
@require_POST
def api_delete(request, doctor_id, visit_id):
    """Remove one visit (the UI asks for confirmation). Unknown ids are a no-op."""
    if not _scoped_doctor(request, doctor_id):
        return JsonResponse({"ok": True, "row": None})
    doc = doctor_store.delete_visit(doctor_id, visit_id)
    return JsonResponse({"ok": True, "row": doc})


@login_required
@require_GET
def api_report_form(request, doctor_id, visit_id):
    """Initial values for the report form of one visit."""
    roster = _scoped_doctor(request, doctor_id)
    visit = ledger.VisitLedger(roster[0]).get(visit_id) if roster else None
    if visit is None:
        return not_found(NotFoundError('visit', visit_id))
    return JsonResponse({"ok": True, "form": ledger.report_defaults(visit)})


@login_required
@require_GET
def api_calendar(request):
    """
    Month / week / day planner for one executive.
    ?date=YYYY-MM-DD (default today) &mode=month|week|day &exec=<name> (managers)
    """
    today = timezone.localdate()
    raw_date = (request.GET.get('date') or '').strip()
    try:
        ref = parse_date(raw_date) if raw_date else None
    except ValueError:
        return HttpResponseBadRequest("date is not a valid calendar day")
    ref = ref or today

    mode = (request.GET.get('mode') or MONTH).strip().lower()
    if mode not in VIEW_MODES:
        return HttpResponseBadRequest("mode must be month, week or day")

    doctors = doctor_store.list_doctors()
    executives = executives_of(doctors)
    executive = requested_executive(request)
    if executive is None and executives:
        executive = executives[0]

    payload = render_calendar(doctors, ref, mode, today, executive=executive)
    payload['executives'] = executives
    return JsonResponse(payload)
