"""
Frontend URLs for profiles app.
"""
from django.urls import path
from . import frontend_views

urlpatterns = [
    path('', frontend_views.profile_view, name='profile_view'),
    path('edit/', frontend_views.profile_edit, name='profile_edit'),
    path('projects/<str:project_id>/toggle/', frontend_views.profile_project_toggle, name='profile_project_toggle'),
    path('<int:profile_id>/', frontend_views.profile_detail, name='profile_detail'),
]
