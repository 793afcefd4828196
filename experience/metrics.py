"""
Experience metrics aggregation

Folds a list of project records into totals plus per-industry, per-type
and per-tool buckets. Every bucket map always carries one entry per
registry member, in registry order, so consumers can iterate without
null checks.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from .categories import (
    Industry,
    ProjectType,
    Tool,
    normalize_tools,
    parse_industry,
    parse_project_type,
)
from .durations import months_between, round_months


def coerce_date(value) -> date:
    """Accept a date, a datetime or an ISO formatted string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value).strip()[:10])


@dataclass(frozen=True)
class ProjectRecord:
    """
    A single engagement as seen by the metrics engine.

    Category fields must be members of their closed sets; a value outside
    the set raises ``ValueError``. Use :meth:`from_raw` for untrusted input.
    """

    id: str
    name: str
    start_date: date
    end_date: date
    industry: Industry = Industry.OTHER
    project_type: ProjectType = ProjectType.OTHER
    tools: Tuple[Tool, ...] = (Tool.NONE,)
    description: Optional[str] = None
    days_worked: Optional[int] = None
    team_members: Tuple[str, ...] = ()
    total_hours: Optional[float] = None

    def __post_init__(self):
        object.__setattr__(self, 'id', str(self.id))
        object.__setattr__(self, 'industry', Industry(self.industry))
        object.__setattr__(self, 'project_type', ProjectType(self.project_type))
        strict_tools = [Tool(tool) for tool in self.tools]
        object.__setattr__(self, 'tools', tuple(normalize_tools(strict_tools)))
        object.__setattr__(self, 'team_members', tuple(self.team_members))

    @classmethod
    def from_raw(cls, data: Mapping[str, Any]) -> 'ProjectRecord':
        """
        Build a record from loosely typed input (API payloads, imports).

        Unknown categories fall back to Other / none instead of failing.
        """
        return cls(
            id=str(data['id']),
            name=data.get('name') or '',
            start_date=coerce_date(data['start_date']),
            end_date=coerce_date(data['end_date']),
            industry=parse_industry(data.get('industry')),
            project_type=parse_project_type(data.get('project_type', data.get('type'))),
            tools=tuple(normalize_tools(data.get('tools'))),
            description=data.get('description') or None,
            days_worked=data.get('days_worked'),
            team_members=tuple(data.get('team_members') or ()),
            total_hours=data.get('total_hours'),
        )

    @property
    def duration_months(self) -> float:
        return months_between(self.start_date, self.end_date)

    @property
    def start_year(self) -> str:
        return str(self.start_date.year)


@dataclass(frozen=True)
class CategoryBucket:
    """Project count and month sum for one category value."""

    projects: int = 0
    months: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return {'projects': self.projects, 'months': self.months}


@dataclass(frozen=True)
class ExperienceMetrics:
    """Read-only aggregate computed by :func:`compute_metrics`."""

    total_projects: int = 0
    total_months: float = 0.0
    by_industry: Mapping[Industry, CategoryBucket] = field(default_factory=dict)
    by_type: Mapping[ProjectType, CategoryBucket] = field(default_factory=dict)
    by_tool: Mapping[Tool, CategoryBucket] = field(default_factory=dict)

    def active_industries(self) -> List[Tuple[Industry, CategoryBucket]]:
        return _active(self.by_industry)

    def active_types(self) -> List[Tuple[ProjectType, CategoryBucket]]:
        return _active(self.by_type)

    def active_tools(self, include_none: bool = False) -> List[Tuple[Tool, CategoryBucket]]:
        return [
            (tool, bucket) for tool, bucket in _active(self.by_tool)
            if include_none or tool != Tool.NONE
        ]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'total_projects': self.total_projects,
            'total_months': self.total_months,
            'by_industry': {str(k): v.to_dict() for k, v in self.by_industry.items()},
            'by_type': {str(k): v.to_dict() for k, v in self.by_type.items()},
            'by_tool': {str(k): v.to_dict() for k, v in self.by_tool.items()},
        }


def _active(buckets):
    return [(key, bucket) for key, bucket in buckets.items() if bucket.projects > 0]


def _zero_accumulator(enum_cls) -> Dict[Any, List[float]]:
    # [projects, months] per registry member, in declaration order
    return {member: [0, 0.0] for member in enum_cls}


def _freeze(accumulator) -> Mapping[Any, CategoryBucket]:
    return MappingProxyType({
        key: CategoryBucket(projects=count, months=round_months(months))
        for key, (count, months) in accumulator.items()
    })


def compute_metrics(projects: Iterable[ProjectRecord]) -> ExperienceMetrics:
    """
    Aggregate project records into an :class:`ExperienceMetrics`.

    Industry and type buckets partition the total; tool buckets do not,
    since a project contributes once to each of its tools.
    """
    by_industry = _zero_accumulator(Industry)
    by_type = _zero_accumulator(ProjectType)
    by_tool = _zero_accumulator(Tool)
    total_projects = 0
    total_months = 0.0

    for project in projects:
        months = project.duration_months
        total_projects += 1
        total_months += months

        for bucket in (by_industry[project.industry], by_type[project.project_type]):
            bucket[0] += 1
            bucket[1] += months

        for tool in project.tools:
            by_tool[tool][0] += 1
            by_tool[tool][1] += months

    return ExperienceMetrics(
        total_projects=total_projects,
        total_months=round_months(total_months),
        by_industry=_freeze(by_industry),
        by_type=_freeze(by_type),
        by_tool=_freeze(by_tool),
    )
