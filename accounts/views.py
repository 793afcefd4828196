"""
Accounts app views

ViewSet and endpoints for user management and signup.
"""
from django.contrib import messages
from django.db import transaction
from django.shortcuts import render, redirect
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated, IsAdminUser

from profiles.models import ConsultantProfile
from .forms import ConsultantSignupForm
from .models import User
from .permissions import IsAdminOrSelf
from .serializers import UserSerializer


class UserViewSet(viewsets.ModelViewSet):
    """
    ViewSet for User management.

    - List/create: Staff/admin only
    - Retrieve/update/delete: Admin or self only
    - Special 'me' endpoint for current user
    """

    queryset = User.objects.all()
    serializer_class = UserSerializer

    def get_permissions(self):
        """
        Instantiate and return the list of permissions that this view requires.
        """
        if self.action in ['list', 'create']:
            permission_classes = [IsAdminUser]
        elif self.action == 'me':
            permission_classes = [IsAuthenticated]
        else:
            permission_classes = [IsAuthenticated, IsAdminOrSelf]
        return [permission() for permission in permission_classes]

    @action(detail=False, methods=['get'])
    def me(self, request):
        """
        Return the current authenticated user's data.

        GET /api/users/me/
        """
        serializer = self.get_serializer(request.user)
        return Response(serializer.data)


def signup(request):
    """Create a consultant account together with an empty profile."""
    if request.method == "POST":
        form = ConsultantSignupForm(request.POST)
        if form.is_valid():
            with transaction.atomic():
                user = form.save()
                ConsultantProfile.objects.create(
                    user=user,
                    display_name=user.get_full_name(),
                    job_title=form.cleaned_data.get('job_title', ''),
                )
            messages.success(request, "Account created successfully! Please log in.")
            return redirect("login")
    else:
        form = ConsultantSignupForm()

    return render(request, "accounts/signup.html", {"form": form})
