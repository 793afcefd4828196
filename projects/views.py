"""
Projects app views

ViewSet for Project management, filtering and Harvest sync.
"""
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAdminUser, IsAuthenticated
from rest_framework.response import Response

from experience.filters import FilterSpec, matches
from experience.serializers import ProjectRecordSerializer
from harvest.tasks import queue_harvest_sync
from .models import Project
from .serializers import ProjectSerializer
from .services import ProjectService


class ProjectViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Project.

    - GET: List projects, narrowed by q/industry/type/tool/year query params
    - POST/PUT/PATCH/DELETE: Manage projects
    - GET combined/: Live Harvest projects merged over stored ones
    - POST sync/: Queue a Harvest sync (admins only)
    """

    serializer_class = ProjectSerializer
    queryset = Project.objects.all()

    def get_permissions(self):
        """
        Instantiate and return the list of permissions that this view requires.
        """
        if self.action == 'sync':
            permission_classes = [IsAdminUser]
        else:
            permission_classes = [IsAuthenticated]
        return [permission() for permission in permission_classes]

    def list(self, request, *args, **kwargs):
        """
        List projects matching the filter query parameters.
        """
        spec = FilterSpec.from_query_params(request.query_params)
        projects = [
            project for project in self.get_queryset()
            if matches(project.to_record(), spec)
        ]
        serializer = self.get_serializer(projects, many=True)
        return Response(serializer.data)

    @action(detail=False, methods=['get'])
    def combined(self, request):
        """
        GET /api/projects/combined/
        """
        spec = FilterSpec.from_query_params(request.query_params)
        records = [
            record for record in ProjectService.combined_records()
            if matches(record, spec)
        ]
        return Response(ProjectRecordSerializer(records, many=True).data)

    @action(detail=False, methods=['post'])
    def sync(self, request):
        """
        POST /api/projects/sync/
        """
        task_id = queue_harvest_sync()
        return Response({'task_id': task_id}, status=status.HTTP_202_ACCEPTED)
