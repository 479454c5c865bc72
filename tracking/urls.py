"""
Click Tracking URL Configuration
"""
from django.urls import path
from .views import TrackClickView

app_name = 'tracking'

urlpatterns = [
    path('track-click', TrackClickView.as_view(), name='track-click'),
]
