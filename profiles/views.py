"""
Profiles app views

ViewSet for ConsultantProfile management and experience metrics.
"""
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from accounts.permissions import IsAdminOrSelf
from experience.serializers import ExperienceSummarySerializer
from experience.services import ExperienceSummaryService
from .models import ConsultantProfile
from .serializers import ConsultantProfileSerializer


class ConsultantProfileViewSet(viewsets.ModelViewSet):
    """
    ViewSet for ConsultantProfile.

    - Any authenticated user can list and read profiles (team directory)
    - Only admins or the owner can update or delete a profile
    - GET {id}/metrics/: experience summary for the profile's projects
    """

    serializer_class = ConsultantProfileSerializer
    queryset = ConsultantProfile.objects.select_related('user').prefetch_related('projects')

    def get_permissions(self):
        """
        Instantiate and return the list of permissions that this view requires.
        """
        if self.action in ['update', 'partial_update', 'destroy']:
            permission_classes = [IsAuthenticated, IsAdminOrSelf]
        else:
            permission_classes = [IsAuthenticated]
        return [permission() for permission in permission_classes]

    def perform_create(self, serializer):
        """Automatically set user from request."""
        serializer.save(user=self.request.user)

    @action(detail=True, methods=['get'])
    def metrics(self, request, pk=None):
        """
        Return the experience summary for a profile.

        GET /api/profiles/{id}/metrics/
        """
        profile = self.get_object()
        records = [project.to_record() for project in profile.projects.all()]
        summary = ExperienceSummaryService.build_summary(records, start_date=profile.start_date)
        return Response(ExperienceSummarySerializer(summary).data)
