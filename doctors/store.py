# doctors/store.py
"""
Roster persistence: doctors are read and written as whole documents.

Writes are last-write-wins upserts keyed by ``id``; every successful write
is followed by a change notification (see ``doctors.signals``).
"""
import logging

from django.core.exceptions import ValidationError
from django.db import transaction

from visits.ledger import VisitLedger

from .models import Doctor
from .signals import announce, doctor_deleted, doctor_updated

logger = logging.getLogger(__name__)


def list_doctors():
    return [d.as_document() for d in Doctor.objects.order_by('-updated_at', 'id')]


def get_doctor(doctor_id):
    obj = Doctor.objects.filter(pk=doctor_id).first()
    return obj.as_document() if obj else None


def upsert_doctor(data):
    doctor_id = (data or {}).get('id')
    if not doctor_id:
        raise ValidationError('Doctor id is required.', code='no_id')

    obj, created = Doctor.objects.update_or_create(
        pk=str(doctor_id), defaults=Doctor.fields_from_document(data)
    )
    doc = obj.as_document()
    logger.info('doctor %s %s', obj.pk, 'created' if created else 'updated')
    announce(doctor_updated, sender=Doctor, doctor=doc)
    return doc


def delete_doctor(doctor_id):
    """Unknown ids are a no-op; the deletion is announced either way."""
    deleted, _ = Doctor.objects.filter(pk=doctor_id).delete()
    if deleted:
        logger.info('doctor %s deleted', doctor_id)
    announce(doctor_deleted, sender=Doctor, doctor_id=doctor_id)
    return bool(deleted)


def delete_visit(doctor_id, visit_id):
    """Doctor document without the visit, or None when the doctor is unknown."""
    obj = Doctor.objects.filter(pk=doctor_id).first()
    if obj is None:
        return None

    ledger = VisitLedger(obj.as_document())
    if ledger.delete(visit_id):
        obj.visits = ledger.document()['visits']
        obj.save(update_fields=['visits', 'updated_at'])
        logger.info('visit %s removed from doctor %s', visit_id, doctor_id)

    doc = obj.as_document()
    announce(doctor_updated, sender=Doctor, doctor=doc)
    return doc


def seed_doctors(rows):
    """
    One-time bulk load. Refuses (reports the existing count) once the roster
    holds any doctor; it never merges.
    """
    existing = Doctor.objects.count()
    if existing > 0:
        return {'seeded': False, 'count': existing}

    if not isinstance(rows, list) or not rows:
        raise ValidationError('Seed data must be a non-empty list of doctors.', code='bad_seed')

    objs = []
    for row in rows:
        if not isinstance(row, dict) or not row.get('id'):
            raise ValidationError('Every seeded doctor needs an id.', code='bad_seed')
        objs.append(Doctor(pk=str(row['id']), **Doctor.fields_from_document(row)))

    with transaction.atomic():
        Doctor.objects.bulk_create(objs)

    logger.info('roster seeded with %d doctors', len(objs))
    return {'seeded': True, 'count': len(objs)}
