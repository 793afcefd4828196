"""
Accounts app serializers

Serializers for User model.
"""
from rest_framework import serializers
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """
    Serializer for User model.

    Only admins may assign a role; everyone else keeps the default
    consultant role. ``profile_id`` links to the consultant profile,
    if one exists.
    """

    profile_id = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            'id',
            'username',
            'email',
            'first_name',
            'last_name',
            'role',
            'is_admin_role',
            'profile_id',
            'password',
        ]
        extra_kwargs = {
            'password': {'write_only': True, 'required': False},
        }

    def get_profile_id(self, obj):
        profile = getattr(obj, 'profile', None)
        return profile.id if profile else None

    def validate_role(self, value):
        request = self.context.get('request')
        actor = getattr(request, 'user', None)
        current = self.instance.role if self.instance else User.CONSULTANT
        if value != current and not getattr(actor, 'is_admin_role', False):
            raise serializers.ValidationError("Only admins can change roles.")
        return value

    def create(self, validated_data):
        password = validated_data.pop('password', None)
        user = User(**validated_data)
        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()
        user.save()
        return user

    def update(self, instance, validated_data):
        password = validated_data.pop('password', None)
        for attr, value in validated_data.items():
            setattr(instance, attr, value)
        if password:
            instance.set_password(password)
        instance.save()
        return instance
