# procedures/admin.py
from django.contrib import admin
from .models import Procedure

@admin.register(Procedure)
class ProcedureAdmin(admin.ModelAdmin):
    list_display  = ('id','date','time','hospital','doctor_name','procedure_type','payment_type','cost','commission','status')
    list_filter   = ('status','payment_type','hospital')
    search_fields = ('id','doctor_id','doctor_name','procedure_type','hospital','technician','notes')
    readonly_fields = ('created_at','updated_at')
