"""
Experience Service Layer
Builds the experience summaries shown on team cards and profile pages.
"""
import logging
from datetime import date
from typing import Dict, Iterable, Optional

from .badges import achievement_tier, experience_level
from .categories import ProjectType, industry_color, project_type_color, tool_color
from .charts import chart_kind, chart_series, chart_title
from .durations import tenure_months
from .metrics import ProjectRecord, compute_metrics

logger = logging.getLogger(__name__)


class ExperienceSummaryService:
    """Assemble metrics, badges and chart data for a consultant."""

    CARD_INDUSTRY_LIMIT = 3
    PROGRESS_PER_PROJECT = 10

    @staticmethod
    def build_card(records: Iterable[ProjectRecord]) -> Dict:
        """
        Compact summary for a team overview card.

        Returns:
            Dictionary with totals, the first active industries and the
            number of further active industries.
        """
        metrics = compute_metrics(records)
        active = metrics.active_industries()
        limit = ExperienceSummaryService.CARD_INDUSTRY_LIMIT
        return {
            'metrics': metrics,
            'level': experience_level(metrics.total_projects).value,
            'top_industries': [
                {'name': str(industry), 'color': industry_color(industry)}
                for industry, _ in active[:limit]
            ],
            'more_industries': max(len(active) - limit, 0),
        }

    @staticmethod
    def build_summary(
        records: Iterable[ProjectRecord],
        start_date: Optional[date] = None,
        today: Optional[date] = None,
    ) -> Dict:
        """
        Full profile summary.

        Args:
            records: The consultant's projects
            start_date: Recorded firm start date, if any
            today: Reference date for tenure (defaults to today)

        Returns:
            Dictionary consumed by the profile template and the metrics API
        """
        records = list(records)
        metrics = compute_metrics(records)

        type_badges = []
        for project_type in ProjectType:
            count = metrics.by_type[project_type].projects
            tier = achievement_tier(count)
            if tier is not None:
                type_badges.append({
                    'name': project_type.value,
                    'count': count,
                    'tier': tier.value,
                    'color': project_type_color(project_type),
                })

        tool_rows = []
        for tool, bucket in metrics.active_tools():
            tool_rows.append({
                'name': tool.value,
                'projects': bucket.projects,
                'months': bucket.months,
                'level': experience_level(bucket.projects).value,
                'color': tool_color(tool),
                'progress': min(100, bucket.projects * ExperienceSummaryService.PROGRESS_PER_PROJECT),
            })

        charts = []
        for dimension in ('industry', 'projectType', 'tool'):
            series = chart_series(metrics, dimension, 'projects')
            charts.append({
                'dimension': dimension,
                'title': chart_title(dimension, 'projects'),
                'kind': chart_kind(series),
                'series': series,
            })

        history = sorted(records, key=lambda record: record.end_date, reverse=True)

        logger.debug(
            "Built experience summary: %s projects, %s months",
            metrics.total_projects,
            metrics.total_months,
        )
        return {
            'metrics': metrics,
            'level': experience_level(metrics.total_projects).value,
            'industries_covered': len(metrics.active_industries()),
            'type_badges': type_badges,
            'tool_rows': tool_rows,
            'charts': charts,
            'history': history,
            'tenure_months': tenure_months(start_date, today) if start_date else None,
        }
