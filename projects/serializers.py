"""
Projects app serializers

Serializers for Project model.
"""
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers

from experience.categories import Tool
from .models import Project
from .services import ProjectService


class ProjectSerializer(serializers.ModelSerializer):
    """
    Serializer for Project.

    Validation goes through ProjectService so the API and the HTML forms
    apply the same rules. Harvest-derived fields are read-only.
    """

    tools = serializers.ListField(
        child=serializers.ChoiceField(choices=Tool.choices),
        required=False,
    )
    duration_months = serializers.SerializerMethodField()

    class Meta:
        model = Project
        fields = [
            'id',
            'harvest_id',
            'name',
            'description',
            'start_date',
            'end_date',
            'industry',
            'project_type',
            'tools',
            'days_worked',
            'total_hours',
            'team_members',
            'duration_months',
            'created_at',
            'updated_at',
        ]
        read_only_fields = [
            'id',
            'harvest_id',
            'days_worked',
            'total_hours',
            'team_members',
            'created_at',
            'updated_at',
        ]

    def get_duration_months(self, obj) -> float:
        return obj.to_record().duration_months

    def validate(self, attrs):
        """
        Run the shared project validation, merging in existing values on
        partial updates.
        """
        data = {}
        if self.instance:
            data = {
                'name': self.instance.name,
                'description': self.instance.description,
                'start_date': self.instance.start_date,
                'end_date': self.instance.end_date,
                'industry': self.instance.industry,
                'project_type': self.instance.project_type,
                'tools': self.instance.tools,
            }
        data.update(attrs)

        try:
            return ProjectService.validate_project(data)
        except DjangoValidationError as exc:
            raise serializers.ValidationError(exc.messages)
