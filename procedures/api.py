# procedures/api.py
from django.contrib.auth.decorators import login_required
from django.core.exceptions import ValidationError
from django.http import JsonResponse
from django.views.decorators.http import require_GET, require_POST

from doctors import store as doctor_store
from medicall.http import read_payload, validation_error
from reps.executives import requested_executive

from . import store


def _owned_ids(executive):
    return {d['id'] for d in doctor_store.list_doctors() if d.get('executive') == executive}


@login_required
@require_GET
def api_list(request):
    """Procedures, newest first. Executives see the ones of their own doctors."""
    rows = store.list_procedures()
    executive = requested_executive(request)
    if executive:
        owned = _owned_ids(executive)
        rows = [p for p in rows if p.get('doctorId') in owned]

    status = (request.GET.get('status') or '').strip().lower()
    if status:
        rows = [p for p in rows if p.get('status') == status]
    return JsonResponse({"rows": rows})


@login_required
@require_POST
def api_save(request):
    data = read_payload(request)
    if not isinstance(data, dict):
        return JsonResponse({"ok": False, "error": "Invalid procedure payload"}, status=400)
    try:
        doc = store.upsert_procedure(data)
    except (ValidationError, ValueError, TypeError) as exc:
        return validation_error(exc)
    return JsonResponse({"ok": True, "row": doc})


@login_required
@require_POST
def api_delete(request, pk):
    store.delete_procedure(pk)
    return JsonResponse({"ok": True})
