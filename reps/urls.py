# reps/urls.py
from django.urls import path
from . import api

app_name = 'reps'
urlpatterns = [
    path('api/executives/', api.api_executives, name='api_executives'),
    path('api/timeoff/', api.api_time_off, name='api_time_off'),
]
