"""
Booking Views V1
"""
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from drf_spectacular.utils import extend_schema, OpenApiResponse

from booking.serializers.v1 import BookingSerializer, CreateBookingSerializer
from booking.services import BookingService
from core.exceptions import FitbookError
from core.throttling import UserBurstThrottle
from core.views import BaseAPIView


class BookingViewSet(viewsets.ViewSetMixin, BaseAPIView):
    """Book classes and list the current user's bookings"""
    permission_classes = [IsAuthenticated]
    throttle_classes = [UserBurstThrottle]
    serializer_class = BookingSerializer

    @extend_schema(responses={200: BookingSerializer(many=True)}, tags=['Bookings'])
    def list(self, request):
        """All of the user's bookings, upcoming first"""
        bookings = BookingService.bookings_for_user(request.user)
        serializer = BookingSerializer(bookings, many=True)
        return self.success_response(
            message='Bookings retrieved successfully',
            data={'bookings': serializer.data, 'count': len(bookings)}
        )

    @extend_schema(
        request=CreateBookingSerializer,
        responses={
            201: BookingSerializer,
            400: OpenApiResponse(description='Already booked, class full or not enough minutes'),
            404: OpenApiResponse(description='Class not found'),
        },
        description='Book a class; its minutes are debited from the balance',
        tags=['Bookings']
    )
    def create(self, request):
        serializer = CreateBookingSerializer(data=request.data)
        if not serializer.is_valid():
            return self.error_response(
                message='Invalid booking data',
                errors=serializer.errors,
                status_code=400
            )

        try:
            booking = BookingService.create_booking(request.user, serializer.validated_data['class_id'])
        except FitbookError as exc:
            return self.service_error_response(exc)

        return self.success_response(
            message='Class booked successfully',
            data={
                'booking': BookingSerializer(booking).data,
                'remaining_minutes': request.user.remaining_minutes,
            },
            status_code=201
        )

    @extend_schema(responses={200: BookingSerializer(many=True)}, tags=['Bookings'])
    @action(detail=False, methods=['get'])
    def upcoming(self, request):
        """Upcoming bookings scoped by the caller's role"""
        bookings = BookingService.upcoming_bookings(request.user)
        serializer = BookingSerializer(bookings, many=True)
        return self.success_response(
            message='Upcoming bookings retrieved successfully',
            data={'bookings': serializer.data, 'count': len(bookings)}
        )
