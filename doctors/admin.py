# doctors/admin.py
from django.contrib import admin
from .models import Doctor

@admin.register(Doctor)
class DoctorAdmin(admin.ModelAdmin):
    list_display  = ('id','name','category','executive','specialty','hospital','classification','visit_count','updated_at')
    list_filter   = ('executive','category','classification','is_insurance_doctor')
    search_fields = ('id','name','specialty','hospital','area','phone','email','executive')
    readonly_fields = ('created_at','updated_at')

    def visit_count(self, obj):
        return len(obj.visits or [])
    visit_count.short_description = 'Visits'
