"""
Trainer Profile Serializers V1
"""
from django.core.exceptions import ObjectDoesNotExist
from rest_framework import serializers
from drf_spectacular.utils import extend_schema_field

from user.models import TrainerProfile, User


class TrainerProfileSerializer(serializers.ModelSerializer):
    """Trainer profile with the owning account's contact details"""
    full_name = serializers.CharField(source='user.full_name', read_only=True)
    email = serializers.EmailField(source='user.email', read_only=True)
    phone = serializers.CharField(source='user.phone', read_only=True)
    avatar_url = serializers.URLField(source='user.avatar_url', read_only=True)

    class Meta:
        model = TrainerProfile
        fields = [
            'id', 'full_name', 'email', 'phone', 'avatar_url',
            'bio', 'specialties', 'experience', 'certifications', 'availability',
            'created_at', 'updated_at'
        ]
        read_only_fields = fields


class TrainerProfileUpdateSerializer(serializers.Serializer):
    full_name = serializers.CharField(max_length=200, required=False)
    phone = serializers.CharField(max_length=30, required=False, allow_blank=True, allow_null=True)
    avatar_url = serializers.URLField(required=False, allow_blank=True, allow_null=True)
    bio = serializers.CharField(required=False, allow_blank=True)
    specialties = serializers.ListField(
        child=serializers.CharField(max_length=100), required=False, max_length=20
    )
    experience = serializers.CharField(max_length=255, required=False, allow_blank=True)
    certifications = serializers.CharField(required=False, allow_blank=True)
    availability = serializers.CharField(max_length=255, required=False, allow_blank=True)


class TrainerListSerializer(serializers.ModelSerializer):
    """Directory entry for one trainer"""
    specialties = serializers.SerializerMethodField()
    classes = serializers.IntegerField(source='class_count', read_only=True)
    active = serializers.BooleanField(source='is_active', read_only=True)

    class Meta:
        model = User
        fields = ['id', 'full_name', 'email', 'specialties', 'classes', 'active']
        read_only_fields = fields

    @extend_schema_field(serializers.ListField(child=serializers.CharField()))
    def get_specialties(self, obj):
        try:
            return obj.trainer_profile.specialties or []
        except ObjectDoesNotExist:
            return []
