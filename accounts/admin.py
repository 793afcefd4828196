from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from profiles.models import ConsultantProfile
from .models import User


class ConsultantProfileInline(admin.StackedInline):
    """Edit the consultant profile on the user page."""

    model = ConsultantProfile
    can_delete = False
    fields = ['display_name', 'job_title', 'location', 'start_date', 'harvest_user_id']
    extra = 0


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Admin interface for consultants and admins."""

    inlines = [ConsultantProfileInline]
    list_display = ['username', 'get_full_name', 'email', 'role', 'is_active']
    list_filter = ['role', 'is_active', 'is_staff']

    fieldsets = BaseUserAdmin.fieldsets + (
        ('Team role', {'fields': ('role',)}),
    )

    add_fieldsets = BaseUserAdmin.add_fieldsets + (
        ('Team role', {'fields': ('role',)}),
    )
