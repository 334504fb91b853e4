# dashboardapp/urls.py
from django.urls import path
from . import views

app_name = 'dashboard'

urlpatterns = [
    path('api/stats/', views.stats, name='stats'),
]
