"""
User Profile Views V1
"""
from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated
from drf_spectacular.utils import extend_schema

from core.responses import SuccessResponse, ErrorResponse
from user.serializers.v1 import UserProfileSerializer


class UserProfileView(APIView):
    """Current user's profile, including the remaining minute balance"""
    permission_classes = [IsAuthenticated]

    @extend_schema(responses={200: UserProfileSerializer}, tags=['Profile'])
    def get(self, request):
        serializer = UserProfileSerializer(request.user)
        return SuccessResponse(
            message='Profile retrieved successfully',
            data={'user': serializer.data}
        )

    @extend_schema(request=UserProfileSerializer, responses={200: UserProfileSerializer}, tags=['Profile'])
    def patch(self, request):
        serializer = UserProfileSerializer(request.user, data=request.data, partial=True)
        if not serializer.is_valid():
            return ErrorResponse(
                message='Profile update failed',
                errors=serializer.errors,
                status_code=400
            )
        serializer.save()
        return SuccessResponse(
            message='Profile updated successfully',
            data={'user': serializer.data}
        )
