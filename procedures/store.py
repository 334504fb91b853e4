# procedures/store.py
import logging

from django.core.exceptions import ValidationError

from doctors.signals import announce, procedure_deleted, procedure_updated

from .models import Procedure

logger = logging.getLogger(__name__)


def list_procedures():
    return [p.as_document() for p in Procedure.objects.order_by('-date', 'id')]


def upsert_procedure(data):
    procedure_id = (data or {}).get('id')
    if not procedure_id:
        raise ValidationError('Procedure id is required.', code='no_id')

    fields = Procedure.fields_from_document(data)
    for key in ('cost', 'commission'):
        if fields.get(key, 0) < 0:
            raise ValidationError(f'{key} cannot be negative.', code='negative_amount')

    obj, created = Procedure.objects.update_or_create(pk=str(procedure_id), defaults=fields)
    doc = obj.as_document()
    logger.info('procedure %s %s', obj.pk, 'created' if created else 'updated')
    announce(procedure_updated, sender=Procedure, procedure=doc)
    return doc


def delete_procedure(procedure_id):
    deleted, _ = Procedure.objects.filter(pk=procedure_id).delete()
    if deleted:
        logger.info('procedure %s deleted', procedure_id)
    announce(procedure_deleted, sender=Procedure, procedure_id=procedure_id)
    return bool(deleted)
