# exports/views.py
import csv
import json
import logging

from django.contrib.auth.decorators import login_required, user_passes_test
from django.core.exceptions import ValidationError
from django.core.serializers.json import DjangoJSONEncoder
from django.db import transaction
from django.http import HttpResponse, JsonResponse
from django.utils import timezone
from django.views.decorators.http import require_GET, require_POST

from dashboardapp.periods import Period
from doctors import store as doctor_store
from medicall.http import read_payload, validation_error
from procedures import store as procedure_store
from reps import store as time_off_store
from reps.executives import is_manager, requested_executive

from . import rows

logger = logging.getLogger(__name__)


def _csv_response(filename, headers, data_rows):
    resp = HttpResponse(content_type='text/csv; charset=utf-8')
    resp['Content-Disposition'] = f'attachment; filename="{filename}"'

    # BOM so Excel reads the accents as UTF-8
    resp.write('\ufeff')
    w = csv.writer(resp, lineterminator='\n')
    w.writerow(headers)
    for r in data_rows:
        w.writerow(r)
    return resp


def _period_suffix(period):
    return f"{period.year}_{'ALL' if period.month is None else period.month}"


@login_required
@require_GET
def visits_csv(request):
    period = Period.from_query(request.GET, timezone.localdate())
    data = rows.visit_rows(doctor_store.list_doctors(), period, requested_executive(request))
    return _csv_response(f"REPORTE_VISITAS_{_period_suffix(period)}.csv", rows.VISIT_HEADERS, data)


@login_required
@require_GET
def procedures_csv(request):
    period = Period.from_query(request.GET, timezone.localdate())
    data = rows.procedure_rows(
        procedure_store.list_procedures(), doctor_store.list_doctors(), period, requested_executive(request)
    )
    return _csv_response(f"REPORTE_PROCEDIMIENTOS_{_period_suffix(period)}.csv", rows.PROCEDURE_HEADERS, data)


@login_required
@require_GET
def time_off_csv(request):
    executive = requested_executive(request)
    data = rows.time_off_rows(time_off_store.list_time_off(), executive)
    return _csv_response("REPORTE_AUSENCIAS.csv", rows.TIME_OFF_HEADERS, data)


@login_required
@user_passes_test(is_manager)
@require_GET
def backup_json(request):
    now = timezone.now()
    payload = rows.backup(
        doctor_store.list_doctors(),
        procedure_store.list_procedures(),
        time_off_store.list_time_off(),
        now,
    )
    resp = HttpResponse(
        json.dumps(payload, cls=DjangoJSONEncoder, ensure_ascii=False, indent=2),
        content_type='application/json; charset=utf-8',
    )
    resp['Content-Disposition'] = f'attachment; filename="RESPALDO_CRM_{now:%Y-%m-%d}.json"'
    return resp


@login_required
@user_passes_test(is_manager)
@require_POST
def restore(request):
    """
    Restore a backup file: every doctor / procedure / time-off record is
    upserted by id, overwriting what the store holds for that id.
    """
    data = read_payload(request)
    if not isinstance(data, dict) or not isinstance(data.get('doctors'), list):
        return JsonResponse({"ok": False, "error": "Invalid backup format"}, status=400)

    sections = {key: data.get(key) or [] for key in ('doctors', 'procedures', 'timeOff')}
    for records in sections.values():
        if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
            return JsonResponse({"ok": False, "error": "Invalid backup format"}, status=400)

    try:
        with transaction.atomic():
            for d in sections['doctors']:
                doctor_store.upsert_doctor(d)
            for p in sections['procedures']:
                procedure_store.upsert_procedure(p)
            for t in sections['timeOff']:
                time_off_store.upsert_time_off(t)
    except (ValidationError, ValueError, TypeError) as exc:
        return validation_error(exc)

    counts = {key: len(records) for key, records in sections.items()}
    logger.info('backup restored by %s: %s', request.user.get_username(), counts)
    return JsonResponse({"ok": True, "restored": counts})
