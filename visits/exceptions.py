"""
Errors raised by the visit ledger.

Missing selections (no doctor chosen, blank report note) are reported with
Django's ``ValidationError``; this module only adds the lookup failure.
"""

from __future__ import annotations


class NotFoundError(LookupError):
    """A doctor or visit id is not present in the roster."""

    def __init__(self, kind: str, key: str):
        self.kind = kind
        self.key = key
        super().__init__(f"{kind} not found: {key}")

    def to_dict(self) -> dict:
        return {'detail': str(self), 'kind': self.kind, 'id': self.key}
