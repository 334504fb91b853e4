# reps/models.py
from django.conf import settings
from django.db import models


class RepProfile(models.Model):
    user           = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='repprofile')
    # key used in Doctor.executive; blank means the upper-cased username
    executive_name = models.CharField(max_length=120, blank=True)
    phone1         = models.CharField(max_length=20, blank=True)
    phone2         = models.CharField(max_length=20, blank=True)
    territory      = models.CharField(max_length=100, blank=True)

    def __str__(self):
        return self.executive_name or self.user.get_username()


class TimeOffEvent(models.Model):
    id          = models.CharField(primary_key=True, max_length=64)
    executive   = models.CharField(max_length=120, db_index=True)
    start_date  = models.CharField(max_length=10)
    end_date    = models.CharField(max_length=10)
    duration    = models.CharField(max_length=40, blank=True)
    reason      = models.CharField(max_length=120, blank=True)
    notes       = models.TextField(blank=True)

    created_at  = models.DateTimeField(auto_now_add=True)
    updated_at  = models.DateTimeField(auto_now=True)

    DOCUMENT_FIELDS = {
        'executive': 'executive',
        'startDate': 'start_date',
        'endDate': 'end_date',
        'duration': 'duration',
        'reason': 'reason',
        'notes': 'notes',
    }

    class Meta:
        ordering = ['-start_date', 'id']

    def __str__(self):
        return f"{self.executive} {self.start_date} → {self.end_date}"

    @classmethod
    def fields_from_document(cls, data):
        return {
            field_name: ('' if data[key] is None else str(data[key]))
            for key, field_name in cls.DOCUMENT_FIELDS.items()
            if key in data
        }

    def as_document(self):
        doc = {'id': self.id}
        for key, field_name in self.DOCUMENT_FIELDS.items():
            doc[key] = getattr(self, field_name)
        return doc
