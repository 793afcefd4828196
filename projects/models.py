"""
Projects app models

Project model for client engagements, entered manually or synced from
Harvest.
"""
import uuid

from django.db import models

from experience.categories import (
    Industry,
    ProjectType,
    Tool,
    normalize_tools,
    parse_industry,
    parse_project_type,
)
from experience.metrics import ProjectRecord


def generate_project_id():
    return str(uuid.uuid4())


def default_tools():
    return [Tool.NONE.value]


class Project(models.Model):
    """
    A single client engagement.

    ``harvest_id`` links a row to its Harvest project; rows entered by hand
    leave it empty. ``days_worked``, ``total_hours`` and ``team_members``
    are only filled in by the Harvest sync.
    """

    id = models.CharField(
        primary_key=True,
        max_length=36,
        default=generate_project_id,
        editable=False,
    )
    harvest_id = models.CharField(max_length=64, unique=True, null=True, blank=True)
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    start_date = models.DateField()
    end_date = models.DateField()
    industry = models.CharField(
        max_length=32,
        choices=Industry.choices,
        default=Industry.OTHER,
    )
    project_type = models.CharField(
        max_length=32,
        choices=ProjectType.choices,
        default=ProjectType.OTHER,
    )
    tools = models.JSONField(default=default_tools, blank=True)
    days_worked = models.PositiveIntegerField(null=True, blank=True)
    total_hours = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    team_members = models.JSONField(default=list, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.name

    @property
    def start_year(self) -> str:
        return str(self.start_date.year)

    @property
    def display_tools(self):
        """Distinct tool tags without the none sentinel."""
        tools = [tool.value for tool in normalize_tools(self.tools) if tool != Tool.NONE]
        return list(dict.fromkeys(tools))

    def to_record(self) -> ProjectRecord:
        """
        Convert to the metrics engine's record type.

        Stored category strings go through the fallback parsers, so rows
        holding values outside the current registry land in Other / none.
        """
        return ProjectRecord(
            id=str(self.id),
            name=self.name,
            start_date=self.start_date,
            end_date=self.end_date,
            industry=parse_industry(self.industry),
            project_type=parse_project_type(self.project_type),
            tools=tuple(normalize_tools(self.tools)),
            description=self.description or None,
            days_worked=self.days_worked,
            team_members=tuple(self.team_members or ()),
            total_hours=float(self.total_hours) if self.total_hours is not None else None,
        )

    class Meta:
        verbose_name = 'Project'
        verbose_name_plural = 'Projects'
        ordering = ['name']
        indexes = [
            models.Index(fields=['start_date', 'end_date'], name='project_dates_idx'),
        ]
