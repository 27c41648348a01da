"""
User Registration Serializer V1
"""
from rest_framework import serializers
from django.db import transaction
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError as DjangoValidationError

from user.models import TrainerProfile, User, UserRole


class UserRegistrationSerializer(serializers.ModelSerializer):
    """
    User registration serializer.
    Members and trainers can sign up; admins are created from the admin site.
    """
    password = serializers.CharField(write_only=True, required=True)
    confirm_password = serializers.CharField(write_only=True, required=True)
    role = serializers.ChoiceField(
        choices=[UserRole.USER, UserRole.TRAINER],
        default=UserRole.USER,
        required=False
    )

    class Meta:
        model = User
        fields = [
            'id', 'email', 'full_name', 'password', 'confirm_password',
            'phone', 'role', 'avatar_url', 'date_joined'
        ]
        read_only_fields = ['id', 'avatar_url', 'date_joined']

    def validate_email(self, value):
        value = value.lower()
        if User.objects.filter(email=value).exists():
            raise serializers.ValidationError("A user with this email already exists.")
        return value

    def validate(self, attrs):
        password = attrs.get('password')
        confirm_password = attrs.pop('confirm_password', None)

        if password != confirm_password:
            raise serializers.ValidationError({
                'confirm_password': 'Passwords do not match.'
            })

        try:
            validate_password(password)
        except DjangoValidationError as e:
            raise serializers.ValidationError({
                'password': list(e.messages)
            })

        return attrs

    @transaction.atomic
    def create(self, validated_data):
        password = validated_data.pop('password')
        user = User.objects.create_user(password=password, **validated_data)
        if user.role == UserRole.TRAINER:
            TrainerProfile.objects.create(user=user)
        return user
