"""
User Profile Serializers V1
"""
from rest_framework import serializers

from user.models import User


class UserMinimalSerializer(serializers.ModelSerializer):
    """Minimal user info embedded in other payloads"""

    class Meta:
        model = User
        fields = ['id', 'full_name', 'email']
        read_only_fields = fields


class UserProfileSerializer(serializers.ModelSerializer):
    remaining_hours = serializers.FloatField(read_only=True)

    class Meta:
        model = User
        fields = [
            'id', 'email', 'full_name', 'phone', 'avatar_url', 'role',
            'remaining_minutes', 'remaining_hours', 'date_joined'
        ]
        read_only_fields = ['id', 'email', 'role', 'remaining_minutes', 'remaining_hours', 'date_joined']

    def update(self, instance, validated_data):
        # Write only the edited columns so a concurrent ledger credit is not overwritten
        for field, value in validated_data.items():
            setattr(instance, field, value)
        if validated_data:
            instance.save(update_fields=list(validated_data))
        return instance
