# procedures/models.py
from django.core.validators import MinValueValidator
from django.db import models


class Procedure(models.Model):
    STATUS_CHOICES = [
        ('scheduled', 'Scheduled'),
        ('performed', 'Performed'),
    ]

    id              = models.CharField(primary_key=True, max_length=64)
    date            = models.CharField(max_length=10, blank=True, db_index=True)   # YYYY-MM-DD
    time            = models.CharField(max_length=5, blank=True)                   # HH:MM
    hospital        = models.CharField(max_length=255, blank=True)

    # weak back-reference, the doctor may be gone
    doctor_id       = models.CharField(max_length=64, blank=True, db_index=True)
    doctor_name     = models.CharField(max_length=255, blank=True)

    procedure_type  = models.CharField(max_length=120, blank=True)
    payment_type    = models.CharField(max_length=60, blank=True)
    cost            = models.FloatField(default=0, validators=[MinValueValidator(0)])
    commission      = models.FloatField(default=0, validators=[MinValueValidator(0)])
    technician      = models.CharField(max_length=120, blank=True)
    notes           = models.TextField(blank=True)
    status          = models.CharField(max_length=10, choices=STATUS_CHOICES, default='scheduled', db_index=True)

    created_at      = models.DateTimeField(auto_now_add=True)
    updated_at      = models.DateTimeField(auto_now=True)

    DOCUMENT_FIELDS = {
        'date': 'date',
        'time': 'time',
        'hospital': 'hospital',
        'doctorId': 'doctor_id',
        'doctorName': 'doctor_name',
        'procedureType': 'procedure_type',
        'paymentType': 'payment_type',
        'cost': 'cost',
        'commission': 'commission',
        'technician': 'technician',
        'notes': 'notes',
        'status': 'status',
    }

    class Meta:
        ordering = ['-date', 'id']

    def __str__(self):
        return f"{self.date} • {self.procedure_type or '-'} • {self.doctor_name or self.doctor_id}"

    @classmethod
    def fields_from_document(cls, data):
        values = {}
        for key, field_name in cls.DOCUMENT_FIELDS.items():
            if key not in data:
                continue
            value = data[key]
            if field_name in ('cost', 'commission'):
                value = float(value or 0)
            elif value is None:
                value = ''
            values[field_name] = value
        return values

    def as_document(self):
        doc = {'id': self.id}
        for key, field_name in self.DOCUMENT_FIELDS.items():
            doc[key] = getattr(self, field_name)
        return doc
