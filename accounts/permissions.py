"""
Accounts app permissions

Custom permissions for role-based access control.
"""
from rest_framework import permissions


class IsAdminOrSelf(permissions.BasePermission):
    """
    Permission that allows:
    - Admins to access any user or profile
    - Users to access only their own user record or profile
    """

    def has_object_permission(self, request, view, obj):
        # Admin users can access anything
        if getattr(request.user, 'is_admin_role', False):
            return True

        # Users can only access their own data
        owner = getattr(obj, 'user', obj)
        return owner == request.user
