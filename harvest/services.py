"""
Harvest Service Layer

- HarvestSyncService: mirrors Harvest projects into the local project table
- HarvestProjectFeed: live Harvest projects converted to project records

Designed to work with Django-Q for asynchronous sync (see tasks.py).
"""
import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional

from django.conf import settings
from django.db import DatabaseError, transaction

from experience.categories import Tool
from experience.metrics import ProjectRecord
from profiles.models import ConsultantProfile
from projects.models import Project

from .client import HarvestClient, get_client
from .converters import (
    convert_harvest_project,
    days_worked,
    infer_industry,
    infer_project_type,
    project_date_range,
    project_team_members,
    project_total_hours,
    project_user_ids,
)
from .exceptions import HarvestError

logger = logging.getLogger(__name__)


DEFAULT_EXCLUDED_PROJECTS = [
    "Time off",
    "Business Development",
    "Administration",
    "HR",
    "Marketing",
    "Product Development",
    "Training",
    "Internal Events",
    "Marketing ABM Engine",
    "IT & Operations",
    "Knowledge management",
    "Operations & Finance Project",
]


@dataclass
class SyncResult:
    """
    Outcome of one Harvest sync run.
    """

    success: bool = True
    processed: int = 0
    deleted: int = 0
    errors: List[str] = field(default_factory=list)
    error: str = ""

    @property
    def message(self) -> str:
        if not self.success:
            return self.error or "Unknown error occurred during sync"
        return (
            f"Projects synced successfully. {self.processed} projects processed, "
            f"{self.deleted} projects deleted, {len(self.errors)} errors."
        )

    def to_dict(self) -> Dict[str, object]:
        return {
            'success': self.success,
            'processed': self.processed,
            'deleted': self.deleted,
            'errors': self.errors,
            'message': self.message,
        }


class HarvestSyncService:
    """Service that mirrors Harvest projects into the Project table."""

    def __init__(self, client: Optional[HarvestClient] = None):
        self._client = client
        self.excluded_projects = set(
            getattr(settings, 'HARVEST_EXCLUDED_PROJECTS', DEFAULT_EXCLUDED_PROJECTS)
        )

    @property
    def client(self) -> HarvestClient:
        if self._client is None:
            self._client = get_client()
        return self._client

    def sync_projects(self) -> SyncResult:
        """
        Sync every active Harvest project.

        Excluded projects and projects without time entries are removed
        locally. A failure on one project is recorded and the run goes on;
        only a failure to list projects marks the run unsuccessful.
        """
        result = SyncResult()
        try:
            harvest_projects = self.client.get_projects()
        except HarvestError as exc:
            logger.error("Error syncing projects: %s", exc)
            result.success = False
            result.error = str(exc)
            return result

        logger.info("Found %s projects in Harvest", len(harvest_projects))

        for harvest_project in harvest_projects:
            harvest_id = str(harvest_project.get('id'))
            name = harvest_project.get('name', '')
            try:
                if self._sync_one(harvest_project, result):
                    result.processed += 1
            except (HarvestError, DatabaseError, KeyError, ValueError) as exc:
                message = f"Project {name} ({harvest_id}): {exc}"
                result.errors.append(message)
                logger.warning(message)

        logger.info(result.message)
        return result

    def _sync_one(self, harvest_project: Dict, result: SyncResult) -> bool:
        """
        Sync a single Harvest project.

        Returns:
            True if the project was stored, False if it was skipped
        """
        harvest_id = str(harvest_project['id'])
        name = harvest_project.get('name', '')
        logger.info("Processing project: %s (%s)", name, harvest_id)

        if name in self.excluded_projects:
            logger.info("Project %s is excluded from sync", name)
            result.deleted += self._delete_local(harvest_id)
            return False

        time_entries = self.client.get_time_entries(project_id=harvest_project['id'])
        date_range = project_date_range(time_entries)
        if date_range is None:
            logger.info("Project %s has no time entries", name)
            result.deleted += self._delete_local(harvest_id)
            return False

        start_date, end_date = date_range
        with transaction.atomic():
            project, created = Project.objects.update_or_create(
                harvest_id=harvest_id,
                defaults={
                    'name': name,
                    'description': harvest_project.get('notes') or '',
                    'start_date': start_date,
                    'end_date': end_date,
                    'days_worked': days_worked(time_entries),
                    'total_hours': Decimal(str(project_total_hours(time_entries))),
                    'team_members': project_team_members(time_entries),
                },
            )
            if created:
                # Categories are curated by hand after the first import.
                project.industry = infer_industry(name)
                project.project_type = infer_project_type(name)
                project.tools = [Tool.NONE.value]
                project.save(update_fields=['industry', 'project_type', 'tools', 'updated_at'])

            members = ConsultantProfile.objects.filter(
                harvest_user_id__in=project_user_ids(time_entries)
            )
            project.members.add(*members)

        logger.info(
            "%s project %s (%s)",
            "Inserted" if created else "Updated",
            project.id,
            name,
        )
        return True

    @staticmethod
    def _delete_local(harvest_id: str) -> int:
        deleted, _ = Project.objects.filter(harvest_id=harvest_id).delete()
        if deleted:
            logger.info("Deleted local project for Harvest id %s", harvest_id)
        return 1 if deleted else 0


class HarvestProjectFeed:
    """Live view of Harvest projects as project records."""

    def __init__(self, client: Optional[HarvestClient] = None):
        self._client = client

    def fetch_records(
        self,
        local_ids: Optional[Dict[str, str]] = None,
        today: Optional[date] = None,
    ) -> List[ProjectRecord]:
        """
        Fetch active Harvest projects.

        Args:
            local_ids: Harvest id -> local project id, so projects already
                stored keep their local identity
            today: End date for open projects

        Raises:
            HarvestError: If Harvest is not configured or unreachable
        """
        client = self._client or get_client()
        local_ids = local_ids or {}
        return [
            convert_harvest_project(
                payload,
                record_id=local_ids.get(str(payload['id'])),
                today=today,
            )
            for payload in client.get_projects()
        ]
