# exports/urls.py
from django.urls import path
from . import views

app_name = 'exports'
urlpatterns = [
    path('visits.csv', views.visits_csv, name='visits_csv'),
    path('procedures.csv', views.procedures_csv, name='procedures_csv'),
    path('timeoff.csv', views.time_off_csv, name='time_off_csv'),
    path('backup.json', views.backup_json, name='backup'),
    path('restore/', views.restore, name='restore'),
]
