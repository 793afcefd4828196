"""
Experience app views

Experience summary for the authenticated user.
"""
from rest_framework import generics
from rest_framework.exceptions import NotFound
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from profiles.models import ConsultantProfile
from .serializers import ExperienceSummarySerializer
from .services import ExperienceSummaryService


class ExperienceSummaryView(generics.GenericAPIView):
    """
    Retrieve the authenticated user's experience summary.

    GET /api/experience/ - Metrics, badges and chart data for the current
    user's projects
    """

    serializer_class = ExperienceSummarySerializer
    permission_classes = [IsAuthenticated]

    def get_object(self):
        """
        Get the consultant profile for the current user.
        """
        try:
            return ConsultantProfile.objects.prefetch_related('projects').get(user=self.request.user)
        except ConsultantProfile.DoesNotExist:
            raise NotFound('No consultant profile for the current user.')

    def get(self, request, *args, **kwargs):
        profile = self.get_object()
        records = [project.to_record() for project in profile.projects.all()]
        summary = ExperienceSummaryService.build_summary(records, start_date=profile.start_date)
        return Response(self.get_serializer(summary).data)
