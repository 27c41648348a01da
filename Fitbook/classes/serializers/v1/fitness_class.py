"""
Fitness Class Serializers V1
"""
from rest_framework import serializers
from drf_spectacular.utils import extend_schema_field

from classes.models import FitnessClass, Frequency
from classes.scheduling import Recurrence, format_duration, parse_clock, single_class_minutes
from core.exceptions import ValidationError as ScheduleError
from user.serializers.v1 import UserMinimalSerializer


class FitnessClassCreateSerializer(serializers.ModelSerializer):
    """Validates a new class, including its recurrence rule"""
    frequency = serializers.ChoiceField(choices=Frequency.choices, required=False, allow_null=True)

    class Meta:
        model = FitnessClass
        fields = [
            'title', 'date', 'class_type', 'start_time', 'end_time', 'location',
            'max_capacity', 'description', 'requirements',
            'is_recurring_class', 'frequency', 'end_date'
        ]

    def validate_start_time(self, value):
        return self._clock(value)

    def validate_end_time(self, value):
        return self._clock(value)

    def _clock(self, value):
        try:
            parse_clock(value)
        except ScheduleError as exc:
            raise serializers.ValidationError(exc.message)
        return value.strip()

    def validate(self, attrs):
        try:
            single_class_minutes(attrs['start_time'], attrs['end_time'])
        except ScheduleError as exc:
            raise serializers.ValidationError(exc.errors or exc.message)

        if attrs.get('is_recurring_class'):
            errors = {}
            if not attrs.get('frequency'):
                errors['frequency'] = ['Frequency is required for recurring classes']
            if not attrs.get('end_date'):
                errors['end_date'] = ['End date is required for recurring classes']
            elif attrs['end_date'] < attrs['date']:
                errors['end_date'] = ['End date must not be before the class date']
            if errors:
                raise serializers.ValidationError(errors)

            if Recurrence.from_frequency(attrs['frequency']).occurrences(attrs['date'], attrs['end_date']) < 1:
                raise serializers.ValidationError({
                    'end_date': ['The series has no sessions before this end date']
                })
        return attrs


class FitnessClassListSerializer(serializers.ModelSerializer):
    """Catalogue entry with live booking figures"""
    type = serializers.SerializerMethodField()
    capacity = serializers.IntegerField(source='max_capacity', read_only=True)
    booked = serializers.SerializerMethodField()
    trainer = serializers.CharField(source='trainer.full_name', read_only=True)
    status = serializers.SerializerMethodField()

    class Meta:
        model = FitnessClass
        fields = [
            'id', 'title', 'date', 'start_time', 'end_time', 'location',
            'capacity', 'booked', 'type', 'trainer', 'status',
            'is_recurring_class', 'frequency', 'end_date'
        ]
        read_only_fields = fields

    @extend_schema_field(serializers.CharField())
    def get_type(self, obj):
        return (obj.class_type or '').lower()

    @extend_schema_field(serializers.IntegerField())
    def get_booked(self, obj):
        # Annotated by ClassService.catalogue when available
        booked = getattr(obj, 'booked', None)
        return booked if booked is not None else obj.booked_count

    @extend_schema_field(serializers.ChoiceField(choices=['upcoming', 'completed']))
    def get_status(self, obj):
        return obj.status_on()


class FitnessClassDetailSerializer(FitnessClassListSerializer):
    """Full class view including attendees and computed duration"""
    trainer_details = UserMinimalSerializer(source='trainer', read_only=True)
    attendees = UserMinimalSerializer(many=True, read_only=True)
    total_minutes = serializers.SerializerMethodField()
    duration = serializers.SerializerMethodField()

    class Meta(FitnessClassListSerializer.Meta):
        fields = FitnessClassListSerializer.Meta.fields + [
            'trainer_details', 'description', 'requirements', 'attendees',
            'total_minutes', 'duration', 'created_at', 'updated_at'
        ]
        read_only_fields = fields

    @extend_schema_field(serializers.IntegerField())
    def get_total_minutes(self, obj):
        return obj.total_minutes

    @extend_schema_field(serializers.CharField())
    def get_duration(self, obj):
        return format_duration(obj.total_minutes)
