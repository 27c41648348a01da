"""
Booking Serializers V1
"""
from rest_framework import serializers
from drf_spectacular.utils import extend_schema_field

from booking.models import Booking
from classes.models import FitnessClass
from classes.scheduling import format_duration
from user.serializers.v1 import UserMinimalSerializer


class BookedClassSerializer(serializers.ModelSerializer):
    """Minimal class details embedded in a booking"""
    type = serializers.SerializerMethodField()
    trainer = serializers.CharField(source='trainer.full_name', read_only=True)

    class Meta:
        model = FitnessClass
        fields = [
            'id', 'title', 'date', 'start_time', 'end_time', 'location',
            'type', 'trainer', 'is_recurring_class', 'frequency', 'end_date'
        ]
        read_only_fields = fields

    @extend_schema_field(serializers.CharField())
    def get_type(self, obj):
        return (obj.class_type or '').lower()


class BookingSerializer(serializers.ModelSerializer):
    fitness_class = BookedClassSerializer(read_only=True)
    user_details = UserMinimalSerializer(source='user', read_only=True)
    status = serializers.SerializerMethodField()
    duration = serializers.SerializerMethodField()

    class Meta:
        model = Booking
        fields = [
            'id', 'fitness_class', 'user_details', 'minutes_spent',
            'duration', 'status', 'created_at'
        ]
        read_only_fields = fields

    @extend_schema_field(serializers.ChoiceField(choices=['upcoming', 'completed']))
    def get_status(self, obj):
        return obj.status_on()

    @extend_schema_field(serializers.CharField())
    def get_duration(self, obj):
        return format_duration(obj.minutes_spent)


class CreateBookingSerializer(serializers.Serializer):
    class_id = serializers.UUIDField()
