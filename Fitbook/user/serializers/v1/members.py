"""
Member administration serializers V1
"""
from rest_framework import serializers

from user.models import User


class MemberListSerializer(serializers.ModelSerializer):
    joined = serializers.DateTimeField(source='date_joined', format='%Y-%m-%d', read_only=True)
    remaining_hours = serializers.FloatField(read_only=True)
    total_packages = serializers.IntegerField(source='paid_packages', read_only=True)
    blocked = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            'id', 'full_name', 'email', 'joined', 'remaining_minutes',
            'remaining_hours', 'total_packages', 'blocked'
        ]
        read_only_fields = fields

    def get_blocked(self, obj) -> bool:
        return not obj.is_active


class BlockMemberSerializer(serializers.Serializer):
    blocked = serializers.BooleanField(required=True)
