"""
Custom JWT Authentication to handle UUID user IDs
"""
from rest_framework_simplejwt.authentication import JWTAuthentication as SimpleJWTAuthentication
from rest_framework_simplejwt.exceptions import AuthenticationFailed
from rest_framework_simplejwt.settings import api_settings
from django.contrib.auth import get_user_model
import uuid
import logging

logger = logging.getLogger(__name__)
User = get_user_model()


class UUIDJWTAuthentication(SimpleJWTAuthentication):
    """
    JWT Authentication that converts UUID strings from the token claim
    into UUID objects for the user lookup
    """

    def get_user(self, validated_token):
        user_id_field = api_settings.USER_ID_FIELD
        user_id_claim = api_settings.USER_ID_CLAIM

        if user_id_claim not in validated_token:
            logger.warning(f"Token missing claim: {user_id_claim}")
            raise AuthenticationFailed(f'Token missing claim: {user_id_claim}')

        user_id = validated_token[user_id_claim]
        if isinstance(user_id, str):
            try:
                user_id = uuid.UUID(user_id)
            except (ValueError, TypeError):
                raise AuthenticationFailed('Malformed user id in token')

        try:
            user = User.objects.get(**{user_id_field: user_id})
        except User.DoesNotExist:
            logger.warning(f"User not found with {user_id_field}={user_id}")
            raise AuthenticationFailed('User not found')

        if not user.is_active:
            logger.warning(f"User {user.email} is inactive")
            raise AuthenticationFailed('User account is disabled')

        return user
