"""
URL configuration for the medicall project.

Every app mounts its JSON endpoints under its own prefix.
"""
from django.contrib import admin
from django.urls import path, include
from django.views.generic import RedirectView

urlpatterns = [
    path('', RedirectView.as_view(pattern_name='dashboard:stats', permanent=False)),

    path('admin/', admin.site.urls),

    # login / logout (session auth)
    path('users/', include('django.contrib.auth.urls')),

    path('doctors/',    include(('doctors.urls', 'doctors'), namespace='doctors')),
    path('visits/',     include(('visits.urls', 'visits'), namespace='visits')),
    path('procedures/', include(('procedures.urls', 'procedures'), namespace='procedures')),
    path('reps/',       include(('reps.urls', 'reps'), namespace='reps')),
    path('dashboard/',  include(('dashboardapp.urls', 'dashboard'), namespace='dashboard')),
    path('exports/',    include(('exports.urls', 'exports'), namespace='exports')),
]
