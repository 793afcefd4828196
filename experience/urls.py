"""
Experience app URLs
"""
from django.urls import path
from .views import ExperienceSummaryView

urlpatterns = [
    path('', ExperienceSummaryView.as_view(), name='experience-summary'),
]
