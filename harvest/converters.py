"""
Conversion from Harvest payloads to project records.

Harvest has no industry, type or tool fields, so industry and type are
inferred from the project name and tools default to the none sentinel.
"""
from datetime import date
from typing import Dict, Iterable, List, Optional, Tuple

from experience.categories import Industry, ProjectType, Tool
from experience.metrics import ProjectRecord, coerce_date


def _infer(enum_cls, name: str, fallback):
    lowered = (name or '').lower()
    for member in enum_cls:
        if member.value.lower() in lowered:
            return member
    return fallback


def infer_industry(project_name: str) -> Industry:
    """First industry (registry order) named in the project name, else Other."""
    return _infer(Industry, project_name, Industry.OTHER)


def infer_project_type(project_name: str) -> ProjectType:
    """First project type (registry order) named in the project name, else Other."""
    return _infer(ProjectType, project_name, ProjectType.OTHER)


def convert_harvest_project(
    payload: Dict,
    record_id: Optional[str] = None,
    today: Optional[date] = None,
) -> ProjectRecord:
    """
    Convert a Harvest project payload into a ProjectRecord.

    Args:
        payload: Project object from the Harvest API
        record_id: Local id to use instead of the Harvest id
        today: End date for open projects and start date for projects
            with neither starts_on nor created_at (defaults to today)
    """
    today = today or date.today()
    starts_on = payload.get('starts_on') or payload.get('created_at')
    ends_on = payload.get('ends_on')
    return ProjectRecord(
        id=record_id or str(payload['id']),
        name=payload.get('name') or '',
        start_date=coerce_date(starts_on) if starts_on else today,
        end_date=coerce_date(ends_on) if ends_on else today,
        industry=infer_industry(payload.get('name', '')),
        project_type=infer_project_type(payload.get('name', '')),
        tools=(Tool.NONE,),
        description=payload.get('notes') or None,
    )


def project_team_members(time_entries: Iterable[Dict]) -> List[str]:
    """Unique names of users who logged time, first seen first."""
    names: List[str] = []
    for entry in time_entries:
        name = (entry.get('user') or {}).get('name')
        if name and name not in names:
            names.append(name)
    return names


def project_user_ids(time_entries: Iterable[Dict]) -> List[str]:
    ids: List[str] = []
    for entry in time_entries:
        user_id = (entry.get('user') or {}).get('id')
        if user_id is not None and str(user_id) not in ids:
            ids.append(str(user_id))
    return ids


def project_total_hours(time_entries: Iterable[Dict]) -> float:
    return round(sum(float(entry.get('hours') or 0) for entry in time_entries), 2)


def user_time_entries(time_entries: Iterable[Dict], user_name: str) -> List[Dict]:
    return [
        entry for entry in time_entries
        if (entry.get('user') or {}).get('name') == user_name
    ]


def project_date_range(time_entries: Iterable[Dict]) -> Optional[Tuple[date, date]]:
    """First and last ``spent_date`` across the entries, or None if there are none."""
    dates = [coerce_date(entry['spent_date']) for entry in time_entries if entry.get('spent_date')]
    if not dates:
        return None
    return min(dates), max(dates)


def days_worked(time_entries: Iterable[Dict]) -> int:
    """Number of distinct days with logged time."""
    return len({entry['spent_date'] for entry in time_entries if entry.get('spent_date')})
