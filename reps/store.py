# reps/store.py
import logging

from django.core.exceptions import ValidationError

from .models import TimeOffEvent

logger = logging.getLogger(__name__)


def list_time_off(executive=None):
    qs = TimeOffEvent.objects.order_by('-start_date', 'id')
    if executive:
        qs = qs.filter(executive=executive)
    return [t.as_document() for t in qs]


def upsert_time_off(data):
    event_id = (data or {}).get('id')
    if not event_id:
        raise ValidationError('Time-off id is required.', code='no_id')
    obj, created = TimeOffEvent.objects.update_or_create(
        pk=str(event_id), defaults=TimeOffEvent.fields_from_document(data)
    )
    logger.info('time off %s %s', obj.pk, 'created' if created else 'updated')
    return obj.as_document()
