"""
User Authentication Views V1
"""
import logging

from rest_framework.views import APIView
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework_simplejwt.tokens import RefreshToken
from rest_framework_simplejwt.views import TokenRefreshView
from drf_spectacular.utils import extend_schema, OpenApiResponse
from django.utils import timezone

from core.responses import SuccessResponse, ErrorResponse
from core.services import EventBus, Event, EventTypes
from core.throttling import AnonBurstThrottle, AnonSustainedThrottle
from user.serializers.v1 import UserRegistrationSerializer, UserLoginSerializer, PasswordChangeSerializer

logger = logging.getLogger(__name__)


def _user_payload(user):
    return {
        'id': str(user.id),
        'email': user.email,
        'full_name': user.full_name,
        'role': user.role,
        'avatar_url': user.avatar_url,
        'remaining_minutes': user.remaining_minutes,
    }


def _token_payload(user):
    refresh = RefreshToken.for_user(user)
    return {
        'access': str(refresh.access_token),
        'refresh': str(refresh),
    }


class UserRegistrationView(APIView):
    """
    User registration endpoint
    """
    permission_classes = [AllowAny]
    throttle_classes = [AnonSustainedThrottle]

    @extend_schema(
        request=UserRegistrationSerializer,
        responses={
            201: OpenApiResponse(description='User registered successfully'),
            400: OpenApiResponse(description='Validation error'),
        },
        description='Register a new member or trainer account',
        tags=['Authentication']
    )
    def post(self, request):
        serializer = UserRegistrationSerializer(data=request.data)

        if not serializer.is_valid():
            return ErrorResponse(
                message='Registration failed',
                errors=serializer.errors,
                status_code=400
            )

        user = serializer.save()
        logger.info(f"Registered user {user.email} as {user.role}")

        EventBus.publish(Event(
            event_type=EventTypes.USER_REGISTERED,
            data={
                'user_id': str(user.id),
                'user_email': user.email,
                'role': user.role,
                'timestamp': timezone.now().isoformat()
            },
            source_module='user'
        ))

        return SuccessResponse(
            message='Registration successful',
            data={
                'user': _user_payload(user),
                'tokens': _token_payload(user),
            },
            status_code=201
        )


class UserLoginView(APIView):
    """
    User login endpoint with JWT token generation
    """
    permission_classes = [AllowAny]
    throttle_classes = [AnonSustainedThrottle, AnonBurstThrottle]

    @extend_schema(
        request=UserLoginSerializer,
        responses={
            200: OpenApiResponse(description='Login successful'),
            400: OpenApiResponse(description='Invalid credentials'),
        },
        description='User login - returns JWT access and refresh tokens',
        tags=['Authentication']
    )
    def post(self, request):
        serializer = UserLoginSerializer(data=request.data)

        if not serializer.is_valid():
            return ErrorResponse(
                message='Login failed',
                errors=serializer.errors,
                status_code=400
            )

        user = serializer.validated_data['user']
        user.last_login = timezone.now()
        user.save(update_fields=['last_login'])

        return SuccessResponse(
            message='Login successful',
            data={
                'user': _user_payload(user),
                'tokens': _token_payload(user),
            }
        )


@extend_schema(tags=['Authentication'])
class RefreshTokenView(TokenRefreshView):
    """Exchange a refresh token for a new access token"""
    pass


class ChangePasswordView(APIView):
    """Change the authenticated user's password"""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        request=PasswordChangeSerializer,
        responses={
            200: OpenApiResponse(description='Password updated'),
            400: OpenApiResponse(description='Validation error'),
        },
        tags=['Authentication']
    )
    def patch(self, request):
        serializer = PasswordChangeSerializer(data=request.data, context={'request': request})

        if not serializer.is_valid():
            return ErrorResponse(
                message='Password change failed',
                errors=serializer.errors,
                status_code=400
            )

        user = serializer.save()
        logger.info(f"Password changed for {user.email}")

        return SuccessResponse(
            message='Password updated successfully',
            data={
                'timestamp': timezone.now().isoformat(),
                'user': {
                    'id': str(user.id),
                    'full_name': user.full_name,
                    'email': user.email,
                    'role': user.role,
                },
            }
        )
