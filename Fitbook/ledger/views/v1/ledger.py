"""
Balance and audit trail endpoints
"""
from rest_framework.permissions import IsAuthenticated
from drf_spectacular.utils import extend_schema

from classes.scheduling import format_duration
from core.pagination import StandardResultsSetPagination
from core.views import BaseAPIView
from ledger.serializers.v1 import BalanceSerializer, MinuteTransactionSerializer
from ledger.services import CreditLedger


class BalanceView(BaseAPIView):
    """Remaining minutes of the current user"""
    permission_classes = [IsAuthenticated]
    serializer_class = BalanceSerializer

    @extend_schema(responses={200: BalanceSerializer}, tags=['Ledger'])
    def get(self, request):
        request.user.refresh_from_db(fields=['remaining_minutes'])
        minutes = request.user.remaining_minutes
        return self.success_response(
            message='Balance retrieved successfully',
            data={'balance': {
                'remaining_minutes': minutes,
                'remaining_hours': round(minutes / 60, 2),
                'formatted': format_duration(max(minutes, 0)),
            }}
        )


class MinuteTransactionListView(BaseAPIView):
    """Paginated credit/debit history of the current user"""
    permission_classes = [IsAuthenticated]
    serializer_class = MinuteTransactionSerializer
    pagination_class = StandardResultsSetPagination

    @extend_schema(responses={200: MinuteTransactionSerializer(many=True)}, tags=['Ledger'])
    def get(self, request):
        queryset = CreditLedger.history(request.user)
        page = self.paginate_queryset(queryset)
        if page is not None:
            serializer = self.get_serializer(page, many=True)
            return self.get_paginated_response(serializer.data)
        serializer = self.get_serializer(queryset, many=True)
        return self.success_response(message='Transactions retrieved successfully', data=serializer.data)
