"""
URL configuration for teamboard project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/4.2/topics/http/urls/
"""
from django.contrib import admin
from django.urls import path, include
from rest_framework.routers import DefaultRouter

from accounts.views import UserViewSet
from profiles.views import ConsultantProfileViewSet
from projects.views import ProjectViewSet
from teamboard.views import login_view, logout_view, dashboard, about_view

router = DefaultRouter()
router.register(r'users', UserViewSet, basename='user')
router.register(r'profiles', ConsultantProfileViewSet, basename='profile')
router.register(r'projects', ProjectViewSet, basename='project')

urlpatterns = [
    # Frontend views
    path('', dashboard, name='dashboard'),
    path('about/', about_view, name='about'),
    path('login/', login_view, name='login'),
    path('logout/', logout_view, name='logout'),
    path('profile/', include('profiles.frontend_urls')),
    path('projects/', include('projects.frontend_urls')),
    path('accounts/', include('accounts.urls')),

    # API views
    path('admin/', admin.site.urls),
    path('api/', include(router.urls)),
    path('api/experience/', include('experience.urls')),
    path('api-auth/', include('rest_framework.urls')),
]
