from django.contrib import admin
from .models import RepProfile, TimeOffEvent

@admin.register(RepProfile)
class RepProfileAdmin(admin.ModelAdmin):
    list_display = ('user','executive_name','phone1','phone2','territory')
    search_fields = ('user__username','user__first_name','user__last_name','executive_name','phone1','phone2','territory')

@admin.register(TimeOffEvent)
class TimeOffEventAdmin(admin.ModelAdmin):
    list_display  = ('id','executive','start_date','end_date','duration','reason')
    list_filter   = ('executive','reason')
    search_fields = ('executive','reason','notes')
    readonly_fields = ('created_at','updated_at')
