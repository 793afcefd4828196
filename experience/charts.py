"""
Chart series built from experience metrics.
"""
from typing import Dict, List

from .categories import Tool, industry_color, project_type_color, tool_color
from .metrics import ExperienceMetrics

DIMENSIONS = {
    'industry': ('by_industry', industry_color, 'Projects by Industry', 'Experience (Months) by Industry'),
    'projectType': ('by_type', project_type_color, 'Projects by Type', 'Experience (Months) by Project Type'),
    'tool': ('by_tool', tool_color, 'Projects by Tool', 'Experience (Months) by Tool'),
}
DATA_TYPES = ('projects', 'months')
PIE_CHART_MAX_ENTRIES = 3


def chart_title(dimension: str, data_type: str) -> str:
    _, _, projects_title, months_title = DIMENSIONS[dimension]
    return projects_title if data_type == 'projects' else months_title


def chart_series(metrics: ExperienceMetrics, dimension: str, data_type: str = 'projects') -> List[Dict]:
    """
    Non-empty buckets of one dimension, largest first.

    The tool ``none`` sentinel is never charted.
    """
    if dimension not in DIMENSIONS:
        raise ValueError(f"Unknown chart dimension: {dimension}")
    if data_type not in DATA_TYPES:
        raise ValueError(f"Unknown chart data type: {data_type}")

    attribute, color_for, _, _ = DIMENSIONS[dimension]
    series = []
    for key, bucket in getattr(metrics, attribute).items():
        if dimension == 'tool' and key == Tool.NONE:
            continue
        value = getattr(bucket, data_type)
        if value > 0:
            series.append({
                'name': str(key),
                'value': value,
                'color': color_for(key).replace('bg-', ''),
            })

    # sorted() is stable, so ties keep registry order
    return sorted(series, key=lambda entry: entry['value'], reverse=True)


def chart_kind(series: List[Dict]) -> str:
    return 'pie' if len(series) <= PIE_CHART_MAX_ENTRIES else 'bar'
