# doctors/models.py
from django.db import models


class Doctor(models.Model):
    CLASSIFICATION_CHOICES = [
        ('A', 'A'),
        ('B', 'B'),
        ('C', 'C'),
    ]

    # client-generated id, upserts are keyed on it
    id                   = models.CharField(primary_key=True, max_length=64)

    category             = models.CharField(max_length=40, default='MEDICO', db_index=True)
    executive            = models.CharField(max_length=120, blank=True, db_index=True)
    name                 = models.CharField(max_length=255, blank=True, db_index=True)
    specialty            = models.CharField(max_length=120, blank=True)
    sub_specialty        = models.CharField(max_length=120, blank=True)
    address              = models.CharField(max_length=255, blank=True)
    hospital             = models.CharField(max_length=255, blank=True)
    area                 = models.CharField(max_length=120, blank=True)
    phone                = models.CharField(max_length=40, blank=True)
    email                = models.CharField(max_length=255, blank=True)
    floor                = models.CharField(max_length=40, blank=True)
    office_number        = models.CharField(max_length=40, blank=True)
    birth_date           = models.CharField(max_length=10, blank=True)
    cedula               = models.CharField(max_length=40, blank=True)
    profile              = models.TextField(blank=True)
    classification       = models.CharField(max_length=1, blank=True, choices=CLASSIFICATION_CHOICES)
    social_style         = models.CharField(max_length=80, blank=True)
    attitudinal_segment  = models.CharField(max_length=80, blank=True)
    important_notes      = models.TextField(blank=True)
    is_insurance_doctor  = models.BooleanField(default=False)

    # embedded sub-collections, always replaced together with the doctor
    visits               = models.JSONField(default=list, blank=True)
    schedule             = models.JSONField(default=list, blank=True)

    created_at           = models.DateTimeField(auto_now_add=True)
    updated_at           = models.DateTimeField(auto_now=True)

    # document key -> model field
    DOCUMENT_FIELDS = {
        'category': 'category',
        'executive': 'executive',
        'name': 'name',
        'specialty': 'specialty',
        'subSpecialty': 'sub_specialty',
        'address': 'address',
        'hospital': 'hospital',
        'area': 'area',
        'phone': 'phone',
        'email': 'email',
        'floor': 'floor',
        'officeNumber': 'office_number',
        'birthDate': 'birth_date',
        'cedula': 'cedula',
        'profile': 'profile',
        'classification': 'classification',
        'socialStyle': 'social_style',
        'attitudinalSegment': 'attitudinal_segment',
        'importantNotes': 'important_notes',
        'isInsuranceDoctor': 'is_insurance_doctor',
        'visits': 'visits',
        'schedule': 'schedule',
    }

    class Meta:
        ordering = ['-updated_at', 'id']
        indexes = [
            models.Index(fields=['executive', 'classification'], name='doctor_exec_class_idx'),
        ]

    def __str__(self):
        return self.name or self.id

    @classmethod
    def fields_from_document(cls, data):
        """Model field values for the keys present in a document."""
        values = {}
        for key, field_name in cls.DOCUMENT_FIELDS.items():
            if key not in data:
                continue
            value = data[key]
            if field_name in ('visits', 'schedule'):
                value = list(value or [])
            elif field_name == 'is_insurance_doctor':
                value = bool(value)
            elif value is None:
                value = ''
            values[field_name] = value
        return values

    def as_document(self):
        doc = {'id': self.id}
        for key, field_name in self.DOCUMENT_FIELDS.items():
            doc[key] = getattr(self, field_name)
        doc['classification'] = self.classification or None
        doc['visits'] = list(self.visits or [])
        doc['schedule'] = list(self.schedule or [])
        doc['createdAt'] = self.created_at.isoformat() if self.created_at else None
        doc['updatedAt'] = self.updated_at.isoformat() if self.updated_at else None
        return doc
