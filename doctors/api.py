# doctors/api.py
from django.contrib.auth.decorators import login_required
from django.core.exceptions import ValidationError
from django.http import JsonResponse
from django.views.decorators.http import require_GET, require_POST

from medicall.http import read_payload, validation_error
from reps.executives import is_manager, requested_executive

from . import store


@login_required
@require_GET
def api_list(request):
    """Roster, most recently updated first. Executives only get their own doctors."""
    executive = requested_executive(request)
    q = (request.GET.get('q') or '').strip().upper()

    rows = store.list_doctors()
    if executive:
        rows = [d for d in rows if d.get('executive') == executive]
    if q:
        rows = [d for d in rows if q in (d.get('name') or '').upper()]
    return JsonResponse({"rows": rows})


@login_required
@require_POST
def api_save(request):
    """Create/Update a doctor (whole record, upsert by id)."""
    data = read_payload(request)
    if not isinstance(data, dict):
        return JsonResponse({"ok": False, "error": "Invalid doctor payload"}, status=400)

    # executives cannot hand a doctor to somebody else
    if not is_manager(request.user):
        data['executive'] = requested_executive(request)

    try:
        doc = store.upsert_doctor(data)
    except ValidationError as exc:
        return validation_error(exc)
    return JsonResponse({"ok": True, "row": doc})


@login_required
@require_POST
def api_delete(request, pk):
    """Hard delete. Unknown ids succeed quietly (stale clients)."""
    if not is_manager(request.user):
        return JsonResponse({"ok": False, "error": "Not allowed"}, status=403)
    store.delete_doctor(pk)
    return JsonResponse({"ok": True})


@login_required
@require_POST
def api_seed(request):
    """Initial bulk load; refused once the roster holds any doctor."""
    if not is_manager(request.user):
        return JsonResponse({"ok": False, "error": "Not allowed"}, status=403)
    try:
        result = store.seed_doctors(read_payload(request))
    except ValidationError as exc:
        return validation_error(exc)
    return JsonResponse({"ok": True, **result})
