# doctors/signals.py
"""
Change notifications for the real-time fan-out.

The stores send these once a write has committed. Receivers (a websocket
broadcaster, a cache invalidator, ...) live outside this project; a failing
receiver is logged and never retried, and never fails the write.
"""
import logging

from django.db import transaction
from django.dispatch import Signal

logger = logging.getLogger(__name__)

# kwargs: doctor (document)
doctor_updated = Signal()
# kwargs: doctor_id
doctor_deleted = Signal()
# kwargs: procedure (document)
procedure_updated = Signal()
# kwargs: procedure_id
procedure_deleted = Signal()


def broadcast(signal, sender, **payload):
    """Fire-and-forget send; receiver errors are logged."""
    for receiver, result in signal.send_robust(sender=sender, **payload):
        if isinstance(result, Exception):
            logger.warning(
                'change notification receiver %r failed: %s',
                getattr(receiver, '__qualname__', receiver), result,
                exc_info=result,
            )


def announce(signal, sender, **payload):
    """Broadcast once the surrounding transaction commits; dropped on rollback."""
    transaction.on_commit(lambda: broadcast(signal, sender, **payload))
