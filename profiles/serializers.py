"""
Profiles app serializers

Serializers for ConsultantProfile model.
"""
from rest_framework import serializers

from projects.models import Project
from .models import ConsultantProfile


class ConsultantProfileSerializer(serializers.ModelSerializer):
    """
    Serializer for ConsultantProfile.

    Exposes profile fields and the ids of linked projects.
    User is read-only and automatically set from request context.
    """

    username = serializers.CharField(source='user.username', read_only=True)
    name = serializers.CharField(read_only=True)
    projects = serializers.PrimaryKeyRelatedField(
        many=True,
        queryset=Project.objects.all(),
        required=False,
    )

    class Meta:
        model = ConsultantProfile
        fields = [
            'id',
            'user',
            'username',
            'name',
            'display_name',
            'job_title',
            'location',
            'bio',
            'avatar_url',
            'start_date',
            'harvest_user_id',
            'projects',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'user', 'created_at', 'updated_at']
