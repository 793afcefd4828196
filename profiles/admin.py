from django.contrib import admin
from .models import ConsultantProfile


@admin.register(ConsultantProfile)
class ConsultantProfileAdmin(admin.ModelAdmin):
    """Admin interface for ConsultantProfile."""

    list_display = ['user', 'display_name', 'job_title', 'location', 'start_date', 'harvest_user_id']
    list_filter = ['location', 'created_at']
    search_fields = ['user__username', 'user__email', 'display_name', 'location']
    readonly_fields = ['created_at', 'updated_at']
    filter_horizontal = ['projects']
