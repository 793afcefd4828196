from django.contrib import admin
from .models import Project


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    """Admin interface for Project."""

    list_display = ['name', 'industry', 'project_type', 'start_date', 'end_date', 'harvest_id']
    list_filter = ['industry', 'project_type', 'start_date']
    search_fields = ['name', 'description', 'harvest_id']
    readonly_fields = ['harvest_id', 'days_worked', 'total_hours', 'team_members', 'created_at', 'updated_at']
