# doctors/receivers.py
import logging

from django.dispatch import receiver

from .signals import doctor_deleted, doctor_updated, procedure_deleted, procedure_updated

logger = logging.getLogger(__name__)


@receiver(doctor_updated)
def log_doctor_updated(sender, doctor, **kwargs):
    logger.debug('server:doctor_updated %s (%d visits)', doctor.get('id'), len(doctor.get('visits') or []))


@receiver(doctor_deleted)
def log_doctor_deleted(sender, doctor_id, **kwargs):
    logger.debug('server:doctor_deleted %s', doctor_id)


@receiver(procedure_updated)
def log_procedure_updated(sender, procedure, **kwargs):
    logger.debug('server:procedure_updated %s', procedure.get('id'))


@receiver(procedure_deleted)
def log_procedure_deleted(sender, procedure_id, **kwargs):
    logger.debug('server:procedure_deleted %s', procedure_id)
