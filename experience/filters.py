"""
Project filter predicates

A filter spec is AND across dimensions and OR within a dimension. An
empty selection on any dimension means that dimension is not filtered.
"""
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List

from .categories import Industry, ProjectType, Tool
from .metrics import ProjectRecord

QUERY_KEYS = {
    'search': 'q',
    'industries': 'industry',
    'types': 'type',
    'tools': 'tool',
    'years': 'year',
}


@dataclass(frozen=True)
class FilterSpec:
    search: str = ''
    industries: FrozenSet[str] = field(default_factory=frozenset)
    types: FrozenSet[str] = field(default_factory=frozenset)
    tools: FrozenSet[str] = field(default_factory=frozenset)
    years: FrozenSet[str] = field(default_factory=frozenset)
    search_description: bool = True

    def __post_init__(self):
        object.__setattr__(self, 'search', (self.search or '').strip())
        for name in ('industries', 'types', 'tools', 'years'):
            values = getattr(self, name) or ()
            object.__setattr__(self, name, frozenset(str(v) for v in values if str(v).strip()))

    @classmethod
    def from_query_params(cls, params) -> 'FilterSpec':
        """
        Build a spec from request GET parameters.

        Accepts a Django ``QueryDict`` (repeated keys) or a plain dict whose
        values may be lists or comma separated strings.
        """
        def values_for(key):
            if hasattr(params, 'getlist'):
                raw = params.getlist(key)
            else:
                raw = params.get(key) or []
                if isinstance(raw, str):
                    raw = [raw]
            values = []
            for item in raw:
                values.extend(part.strip() for part in str(item).split(',') if part.strip())
            return values

        search = params.get(QUERY_KEYS['search'], '') or ''
        return cls(
            search=search,
            industries=frozenset(values_for(QUERY_KEYS['industries'])),
            types=frozenset(values_for(QUERY_KEYS['types'])),
            tools=frozenset(values_for(QUERY_KEYS['tools'])),
            years=frozenset(values_for(QUERY_KEYS['years'])),
        )

    @property
    def is_active(self) -> bool:
        return bool(self.search or self.industries or self.types or self.tools or self.years)


def _matches_search(project: ProjectRecord, spec: FilterSpec) -> bool:
    if not spec.search:
        return True
    needle = spec.search.lower()
    if needle in (project.name or '').lower():
        return True
    if spec.search_description and project.description:
        return needle in project.description.lower()
    return False


def matches(project: ProjectRecord, spec: FilterSpec) -> bool:
    """Whether a project passes every dimension of the filter spec."""
    if not _matches_search(project, spec):
        return False
    if spec.industries and project.industry not in spec.industries:
        return False
    if spec.types and project.project_type not in spec.types:
        return False
    if spec.tools and not any(tool in spec.tools for tool in project.tools):
        return False
    if spec.years and project.start_year not in spec.years:
        return False
    return True


def filter_projects(projects: Iterable[ProjectRecord], spec: FilterSpec) -> List[ProjectRecord]:
    return [project for project in projects if matches(project, spec)]


def filter_options(projects: Iterable[ProjectRecord]) -> Dict[str, List[str]]:
    """
    Distinct filter values present in a project list.

    Industries, types and tools follow registry order; the none tool is
    never offered; years are newest first.
    """
    projects = list(projects)
    present_industries = {p.industry for p in projects}
    present_types = {p.project_type for p in projects}
    present_tools = {tool for p in projects for tool in p.tools}
    years = sorted({p.start_date.year for p in projects}, reverse=True)

    return {
        'industries': [i.value for i in Industry if i in present_industries],
        'types': [t.value for t in ProjectType if t in present_types],
        'tools': [t.value for t in Tool if t in present_tools and t != Tool.NONE],
        'years': [str(year) for year in years],
    }
