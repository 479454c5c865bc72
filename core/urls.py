"""
URL configuration for the lead capture backend.

Paths match what the marketing site and dashboard SPA call, without trailing
slashes.
"""
from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', include('contact.urls')),  # Public contact form
    path('api/', include('tracking.urls')),  # Public click beacons
    path('api/dashboard/', include('dashboards.urls')),  # Internal dashboard
]
