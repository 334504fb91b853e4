# visits/urls.py
from django.urls import path
from . import api

app_name = "visits"

urlpatterns = [
    path('api/plan/', api.api_plan, name='api_plan'),
    path('api/report/', api.api_report, name='api_report'),
    path('api/delete/<str:doctor_id>/<str:visit_id>/', api.api_delete, name='api_delete'),
    path('api/report-form/<str:doctor_id>/<str:visit_id>/', api.api_report_form, name='api_report_form'),
    path('api/calendar/', api.api_calendar, name='api_calendar'),
]
