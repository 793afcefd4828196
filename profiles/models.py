"""
Profiles app models

ConsultantProfile model for team member details and project membership.
"""
from datetime import date
from typing import Optional

from django.conf import settings
from django.db import models

from experience.durations import tenure_months


class ConsultantProfile(models.Model):
    """
    Profile of a team member.

    Links a user to the projects they worked on. ``harvest_user_id`` lets
    the Harvest sync attach projects from logged time; ``start_date`` is
    the firm start date used for direct tenure.
    """

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='profile',
    )
    display_name = models.CharField(max_length=255, blank=True)
    job_title = models.CharField(max_length=255, blank=True)
    location = models.CharField(max_length=255, blank=True)
    bio = models.TextField(blank=True)
    avatar_url = models.URLField(blank=True)
    start_date = models.DateField(null=True, blank=True)
    harvest_user_id = models.CharField(max_length=64, unique=True, null=True, blank=True)
    projects = models.ManyToManyField(
        'projects.Project',
        related_name='members',
        blank=True,
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"Profile for {self.user.username}"

    @property
    def name(self) -> str:
        return self.display_name or self.user.get_full_name() or self.user.username

    @property
    def initials(self) -> str:
        return ''.join(part[0] for part in self.name.split() if part).upper()

    def tenure_months(self, today: Optional[date] = None) -> float:
        return tenure_months(self.start_date, today)

    class Meta:
        verbose_name = 'Consultant Profile'
        verbose_name_plural = 'Consultant Profiles'
        ordering = ['display_name']
