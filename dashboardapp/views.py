from django.conf import settings
from django.contrib.auth.decorators import login_required
from django.http import JsonResponse
from django.utils import timezone
from django.views.decorators.http import require_GET

from doctors.store import list_doctors
from procedures.store import list_procedures
from reps.executives import configured_executives, is_manager, requested_executive

from .periods import Period
from .stats import compute_stats


@login_required
@require_GET
def stats(request):
    """
    KPIs for the selected period.
    ?year=2025&month=ALL|0..11&day=1..31 ; managers may add &exec=<name>.
    """
    period = Period.from_query(request.GET, timezone.localdate())
    executive = requested_executive(request)

    result = compute_stats(
        list_doctors(),
        list_procedures(),
        period,
        executive=executive,
        executives=configured_executives(),
        limit=getattr(settings, 'MEDICALL_RECENT_PROCEDURES', 10),
    )

    dash = result.as_dict()
    # the team table is a manager view
    if not is_manager(request.user):
        dash['teamBreakdown'] = []

    return JsonResponse({
        'period': {
            'year': period.year,
            'month': 'ALL' if period.month is None else period.month,
            'day': period.day,
            'label': period.label(),
        },
        'executive': executive,
        'dash': dash,
    })
