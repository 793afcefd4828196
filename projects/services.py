"""
Project Service Layer
Handles validation and business logic for project management.
"""
import logging
from datetime import date, datetime
from typing import Dict, Iterable, List, Optional

from django.core.exceptions import ValidationError

from experience.categories import Industry, ProjectType, Tool, normalize_tools
from experience.metrics import ProjectRecord, coerce_date
from experience.reconcile import merge_projects
from harvest.exceptions import HarvestError
from harvest.services import HarvestProjectFeed

from .models import Project

logger = logging.getLogger(__name__)

DATE_FORMAT = '%Y-%m-%d'


class ProjectService:
    """Service for managing projects with validation."""

    @staticmethod
    def validate_project(data: Dict) -> Dict:
        """
        Validate project data structure and types.

        Args:
            data: Dictionary with project fields

        Returns:
            Cleaned data dictionary

        Raises:
            ValidationError: If validation fails
        """
        errors = []

        name = (data.get('name') or '').strip()
        if not name:
            errors.append("name is required")

        dates = {}
        for field in ('start_date', 'end_date'):
            raw = data.get(field)
            if not raw:
                errors.append(f"{field} is required")
                continue
            if isinstance(raw, date):
                dates[field] = coerce_date(raw)
                continue
            try:
                dates[field] = datetime.strptime(str(raw).strip(), DATE_FORMAT).date()
            except ValueError:
                errors.append(f"{field} must be in YYYY-MM-DD format")

        if len(dates) == 2 and dates['end_date'] < dates['start_date']:
            errors.append("end_date cannot be before start_date")

        industry = data.get('industry') or Industry.OTHER
        if industry not in Industry.values:
            errors.append(f"industry must be one of: {', '.join(Industry.values)}")

        project_type = data.get('project_type') or data.get('type') or ProjectType.OTHER
        if project_type not in ProjectType.values:
            errors.append(f"project_type must be one of: {', '.join(ProjectType.values)}")

        tools = data.get('tools', [])
        if not isinstance(tools, (list, tuple)):
            errors.append("tools must be a list")
        else:
            unknown = [tool for tool in tools if tool not in Tool.values]
            if unknown:
                errors.append(f"unknown tools: {', '.join(map(str, unknown))}")

        if errors:
            raise ValidationError(errors)

        return {
            'name': name,
            'description': (data.get('description') or '').strip(),
            'start_date': dates['start_date'],
            'end_date': dates['end_date'],
            'industry': str(industry),
            'project_type': str(project_type),
            'tools': list(dict.fromkeys(tool.value for tool in normalize_tools(tools))),
        }

    @staticmethod
    def create_project(data: Dict) -> Project:
        """
        Validate and store a new project.

        Raises:
            ValidationError: If validation fails
        """
        clean_data = ProjectService.validate_project(data)
        project = Project.objects.create(**clean_data)
        logger.info("Created project %s (%s)", project.id, project.name)
        return project

    @staticmethod
    def update_project(project_id: str, data: Dict) -> Project:
        """
        Update an existing project.

        Raises:
            ValidationError: If validation fails or project not found
        """
        clean_data = ProjectService.validate_project(data)
        try:
            project = Project.objects.get(id=project_id)
        except Project.DoesNotExist:
            raise ValidationError(f"Project with id {project_id} not found")

        for attr, value in clean_data.items():
            setattr(project, attr, value)
        project.save()
        logger.info("Updated project %s (%s)", project.id, project.name)
        return project

    @staticmethod
    def delete_project(project_id: str) -> bool:
        """
        Delete a project.

        Returns:
            True if deleted, False if not found
        """
        deleted, _ = Project.objects.filter(id=project_id).delete()
        if deleted:
            logger.info("Deleted project %s", project_id)
        return bool(deleted)

    @staticmethod
    def list_records(queryset: Optional[Iterable[Project]] = None) -> List[ProjectRecord]:
        """Stored projects as metrics records."""
        if queryset is None:
            queryset = Project.objects.all()
        return [project.to_record() for project in queryset]

    @staticmethod
    def combined_records(feed: Optional[HarvestProjectFeed] = None) -> List[ProjectRecord]:
        """
        Live Harvest projects merged over the stored projects.

        Harvest takes precedence; stored projects not present in the feed
        follow. When Harvest is unreachable only stored projects are
        returned.
        """
        stored = Project.objects.all()
        local_records = ProjectService.list_records(stored)
        local_ids = {
            project.harvest_id: str(project.id)
            for project in stored
            if project.harvest_id
        }

        try:
            feed = feed or HarvestProjectFeed()
            live_records = feed.fetch_records(local_ids)
        except HarvestError as exc:
            logger.warning("Harvest feed unavailable, using stored projects only: %s", exc)
            return local_records

        return merge_projects(live_records, local_records)
