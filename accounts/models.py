"""
Accounts app models

Custom User model extending AbstractUser with role-based access.
"""
from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """
    Custom user model with a role.

    Extends Django's AbstractUser to add:
    - role: Distinguish between admins and consultants
    """

    ADMIN = 'ADMIN'
    CONSULTANT = 'CONSULTANT'

    ROLE_CHOICES = [
        (ADMIN, 'Admin'),
        (CONSULTANT, 'Consultant'),
    ]

    role = models.CharField(
        max_length=20,
        choices=ROLE_CHOICES,
        default=CONSULTANT,
    )

    def __str__(self):
        return f"{self.username} ({self.role})"

    @property
    def is_admin_role(self) -> bool:
        """
        Admin role or Django superuser.
        """
        return self.role == self.ADMIN or self.is_superuser

    class Meta:
        verbose_name = 'User'
        verbose_name_plural = 'Users'
