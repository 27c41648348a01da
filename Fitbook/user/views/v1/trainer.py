"""
Trainer Profile Views V1
"""
from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated
from drf_spectacular.utils import extend_schema, OpenApiResponse

from core.permissions import IsTrainer
from core.responses import SuccessResponse, ErrorResponse
from user.serializers.v1 import (
    TrainerProfileSerializer,
    TrainerProfileUpdateSerializer,
    TrainerListSerializer,
)
from user.services import TrainerService


class TrainerProfileView(APIView):
    """
    The authenticated trainer's own profile.
    GET: bio, specialties and contact details
    PATCH: update any subset of them
    """
    permission_classes = [IsAuthenticated, IsTrainer]

    @extend_schema(responses={200: TrainerProfileSerializer}, tags=['Trainers'])
    def get(self, request):
        profile = TrainerService.get_profile(request.user)
        return SuccessResponse(
            message='Trainer profile retrieved successfully',
            data={'trainer': TrainerProfileSerializer(profile).data}
        )

    @extend_schema(
        request=TrainerProfileUpdateSerializer,
        responses={
            200: TrainerProfileSerializer,
            400: OpenApiResponse(description='Validation error'),
        },
        tags=['Trainers']
    )
    def patch(self, request):
        serializer = TrainerProfileUpdateSerializer(data=request.data)
        if not serializer.is_valid():
            return ErrorResponse(
                message='Trainer profile update failed',
                errors=serializer.errors,
                status_code=400
            )

        profile = TrainerService.update_profile(request.user, **serializer.validated_data)
        return SuccessResponse(
            message='Trainer profile updated successfully',
            data={'trainer': TrainerProfileSerializer(profile).data}
        )


class TrainerListView(APIView):
    """All trainers with their specialties and class counts"""
    permission_classes = [IsAuthenticated]

    @extend_schema(responses={200: TrainerListSerializer(many=True)}, tags=['Trainers'])
    def get(self, request):
        trainers = TrainerService.list_trainers()
        data = TrainerListSerializer(trainers, many=True).data
        return SuccessResponse(
            message='Trainers retrieved successfully',
            data={'trainers': data, 'count': len(data)}
        )
