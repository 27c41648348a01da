"""
Fitness Class Views V1
"""
import logging

from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, extend_schema_view, OpenApiResponse

from classes.serializers.v1 import (
    FitnessClassCreateSerializer,
    FitnessClassListSerializer,
    FitnessClassDetailSerializer,
)
from classes.services import ClassService
from core.cache import CacheService
from core.exceptions import FitbookError
from core.pagination import StandardResultsSetPagination
from core.permissions import IsTrainer
from core.responses import SuccessResponse, ErrorResponse

logger = logging.getLogger(__name__)


@extend_schema_view(
    list=extend_schema(description="Browse the class catalogue", tags=['Classes']),
    retrieve=extend_schema(description="Class details with attendees and duration", tags=['Classes']),
)
class FitnessClassViewSet(viewsets.GenericViewSet):
    """Create and browse fitness classes"""
    pagination_class = StandardResultsSetPagination
    cache_timeout = CacheService.TIMEOUT_SHORT

    def get_permissions(self):
        if self.action in ('create', 'mine'):
            return [IsTrainer()]
        return [AllowAny()]

    def get_serializer_class(self):
        if self.action == 'create':
            return FitnessClassCreateSerializer
        if self.action == 'retrieve':
            return FitnessClassDetailSerializer
        return FitnessClassListSerializer

    def get_queryset(self):
        return ClassService.catalogue()

    def list(self, request):
        cache_key = CacheService.generate_key(
            ClassService.CACHE_PREFIX, 'list',
            page=request.query_params.get('page', '1'),
            page_size=request.query_params.get('page_size', ''),
        )
        cached = CacheService.get(cache_key)
        if cached is not None:
            return Response(cached)

        queryset = self.get_queryset()
        page = self.paginate_queryset(queryset)
        if page is not None:
            serializer = self.get_serializer(page, many=True)
            response = self.get_paginated_response(serializer.data)
            CacheService.set(cache_key, response.data, self.cache_timeout)
            return response

        serializer = self.get_serializer(queryset, many=True)
        return SuccessResponse(message='Classes retrieved successfully', data=serializer.data)

    def retrieve(self, request, pk=None):
        try:
            fitness_class = ClassService.get_class(pk)
            serializer = self.get_serializer(fitness_class)
            return SuccessResponse(
                message='Class retrieved successfully',
                data={'class': serializer.data}
            )
        except FitbookError as exc:
            return ErrorResponse.from_exception(exc)

    @extend_schema(
        request=FitnessClassCreateSerializer,
        responses={
            201: FitnessClassDetailSerializer,
            400: OpenApiResponse(description='Validation error'),
            403: OpenApiResponse(description='Only trainers can create classes'),
        },
        description='Create a class (trainers and admins)',
        tags=['Classes']
    )
    def create(self, request):
        serializer = FitnessClassCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return ErrorResponse(
                message='Invalid class data',
                errors=serializer.errors,
                status_code=400
            )

        try:
            fitness_class = ClassService.create_class(request.user, **serializer.validated_data)
        except FitbookError as exc:
            return ErrorResponse.from_exception(exc)

        return SuccessResponse(
            message='Class created successfully',
            data={'class': FitnessClassDetailSerializer(fitness_class).data},
            status_code=201
        )

    @extend_schema(responses={200: FitnessClassListSerializer(many=True)}, tags=['Classes'])
    @action(detail=False, methods=['get'])
    def mine(self, request):
        """Classes taught by the current trainer, upcoming first"""
        classes = ClassService.classes_for_trainer(request.user)
        serializer = FitnessClassListSerializer(classes, many=True)
        return SuccessResponse(
            message='Classes retrieved successfully',
            data={'classes': serializer.data, 'count': len(classes)}
        )
