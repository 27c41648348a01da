"""
Ledger V1 Serializers
"""
from rest_framework import serializers

from ledger.models import MinuteTransaction


class MinuteTransactionSerializer(serializers.ModelSerializer):
    booking_id = serializers.UUIDField(source='booking.id', read_only=True, allow_null=True)
    package_id = serializers.UUIDField(source='package.id', read_only=True, allow_null=True)

    class Meta:
        model = MinuteTransaction
        fields = [
            'id', 'reference', 'transaction_type', 'category', 'minutes',
            'balance_before', 'balance_after', 'booking_id', 'package_id',
            'description', 'created_at'
        ]
        read_only_fields = fields


class BalanceSerializer(serializers.Serializer):
    remaining_minutes = serializers.IntegerField(read_only=True)
    remaining_hours = serializers.FloatField(read_only=True)
    formatted = serializers.CharField(read_only=True)


__all__ = ['MinuteTransactionSerializer', 'BalanceSerializer']
