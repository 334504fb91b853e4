# reps/api.py
from django.contrib.auth.decorators import login_required
from django.http import JsonResponse
from django.views.decorators.http import require_GET

from doctors.store import list_doctors

from .executives import configured_executives, is_manager, requested_executive
from .store import list_time_off


@login_required
@require_GET
def api_executives(request):
    """Configured team plus any executive name that appears in the roster."""
    rows = configured_executives()
    known = {r['name'] for r in rows}
    for name in sorted({d.get('executive') for d in list_doctors() if d.get('executive')} - known):
        rows.append({'name': name, 'color': ''})

    if not is_manager(request.user):
        mine = requested_executive(request)
        rows = [r for r in rows if r['name'] == mine]
    return JsonResponse({"rows": rows})


@login_required
@require_GET
def api_time_off(request):
    return JsonResponse({"rows": list_time_off(requested_executive(request))})
