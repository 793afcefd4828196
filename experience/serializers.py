"""
Experience app serializers

Read-only serializers for project records and computed experience metrics.
"""
from rest_framework import serializers


class ProjectRecordSerializer(serializers.Serializer):
    """Serializer for the metrics engine's ProjectRecord dataclass."""

    id = serializers.CharField(read_only=True)
    name = serializers.CharField(read_only=True)
    start_date = serializers.DateField(read_only=True)
    end_date = serializers.DateField(read_only=True)
    industry = serializers.CharField(read_only=True)
    project_type = serializers.CharField(read_only=True)
    tools = serializers.ListField(child=serializers.CharField(), read_only=True)
    description = serializers.CharField(read_only=True, allow_null=True)
    days_worked = serializers.IntegerField(read_only=True, allow_null=True)
    total_hours = serializers.FloatField(read_only=True, allow_null=True)
    team_members = serializers.ListField(child=serializers.CharField(), read_only=True)
    duration_months = serializers.FloatField(read_only=True)


class CategoryBucketSerializer(serializers.Serializer):
    projects = serializers.IntegerField(read_only=True)
    months = serializers.FloatField(read_only=True)


class ExperienceMetricsSerializer(serializers.Serializer):
    """
    Serializer for ExperienceMetrics.

    Bucket maps keep one entry per category value, zero buckets included.
    """

    total_projects = serializers.IntegerField(read_only=True)
    total_months = serializers.FloatField(read_only=True)
    by_industry = serializers.DictField(child=CategoryBucketSerializer(), read_only=True)
    by_type = serializers.DictField(child=CategoryBucketSerializer(), read_only=True)
    by_tool = serializers.DictField(child=CategoryBucketSerializer(), read_only=True)


class ExperienceSummarySerializer(serializers.Serializer):
    """Serializer for ExperienceSummaryService.build_summary output."""

    metrics = ExperienceMetricsSerializer(read_only=True)
    level = serializers.CharField(read_only=True)
    industries_covered = serializers.IntegerField(read_only=True)
    type_badges = serializers.ListField(child=serializers.DictField(), read_only=True)
    tool_rows = serializers.ListField(child=serializers.DictField(), read_only=True)
    charts = serializers.ListField(child=serializers.DictField(), read_only=True)
    history = ProjectRecordSerializer(many=True, read_only=True)
    tenure_months = serializers.FloatField(read_only=True, allow_null=True)
