"""
Project list reconciliation.
"""
from typing import Iterable, List, Optional

from .metrics import ProjectRecord


def merge_projects(
    primary: Optional[Iterable[ProjectRecord]],
    secondary: Optional[Iterable[ProjectRecord]],
) -> List[ProjectRecord]:
    """
    Merge two project lists, the primary source taking precedence.

    Every primary record is kept in its original order, followed by the
    secondary records whose id does not appear in the primary list.
    Identity is the record id only; callers map ids across sources.
    """
    merged = list(primary or [])
    seen_ids = {project.id for project in merged}
    merged.extend(
        project for project in (secondary or []) if project.id not in seen_ids
    )
    return merged
