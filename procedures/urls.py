# procedures/urls.py
from django.urls import path
from . import api

app_name = 'procedures'

urlpatterns = [
    path('api/list/', api.api_list, name='api_list'),
    path('api/save/', api.api_save, name='api_save'),
    path('api/delete/<str:pk>/', api.api_delete, name='api_delete'),
]
