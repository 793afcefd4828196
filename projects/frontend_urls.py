"""
Frontend URLs for projects app.
"""
from django.urls import path
from . import frontend_views

urlpatterns = [
    path('', frontend_views.project_list, name='project_list'),
    path('add/', frontend_views.project_add, name='project_add'),
    path('sync/', frontend_views.project_sync, name='project_sync'),
    path('<str:project_id>/edit/', frontend_views.project_edit, name='project_edit'),
    path('<str:project_id>/delete/', frontend_views.project_delete, name='project_delete'),
]
