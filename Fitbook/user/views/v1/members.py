"""
Member Administration Views V1
"""
from rest_framework.permissions import IsAuthenticated
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse

from core.exceptions import FitbookError
from core.pagination import StandardResultsSetPagination
from core.permissions import IsAdmin
from core.views import BaseAPIView
from user.serializers.v1 import MemberListSerializer, BlockMemberSerializer
from user.services import MemberAdminService


class MemberListView(BaseAPIView):
    """Admin listing of member accounts"""
    permission_classes = [IsAuthenticated, IsAdmin]
    serializer_class = MemberListSerializer
    pagination_class = StandardResultsSetPagination

    @extend_schema(
        parameters=[
            OpenApiParameter('search', str, description='Match on name or email'),
            OpenApiParameter('sort', str, enum=list(MemberAdminService.SORT_FIELDS)),
            OpenApiParameter('order', str, enum=['asc', 'desc']),
        ],
        responses={200: MemberListSerializer(many=True)},
        tags=['Members']
    )
    def get(self, request):
        queryset = MemberAdminService.list_members(
            search=request.query_params.get('search'),
            sort=request.query_params.get('sort', 'name'),
            order=request.query_params.get('order', 'asc'),
        )
        page = self.paginate_queryset(queryset)
        if page is not None:
            serializer = self.get_serializer(page, many=True)
            return self.get_paginated_response(serializer.data)
        serializer = self.get_serializer(queryset, many=True)
        return self.success_response(message='Members retrieved', data={'members': serializer.data})


class BlockMemberView(BaseAPIView):
    """Block or unblock an account"""
    permission_classes = [IsAuthenticated, IsAdmin]
    serializer_class = BlockMemberSerializer

    @extend_schema(
        request=BlockMemberSerializer,
        responses={
            200: OpenApiResponse(description='Blocked status updated'),
            404: OpenApiResponse(description='User not found'),
        },
        tags=['Members']
    )
    def patch(self, request, user_id):
        serializer = BlockMemberSerializer(data=request.data)
        if not serializer.is_valid():
            return self.error_response(message='Invalid data', errors=serializer.errors, status_code=400)

        blocked = serializer.validated_data['blocked']
        try:
            user = MemberAdminService.set_blocked(request.user, user_id, blocked)
        except FitbookError as exc:
            return self.service_error_response(exc)

        return self.success_response(
            message=f"User {'blocked' if blocked else 'unblocked'} successfully",
            data={
                'user': {
                    'id': str(user.id),
                    'full_name': user.full_name,
                    'email': user.email,
                    'blocked': not user.is_active,
                }
            }
        )
