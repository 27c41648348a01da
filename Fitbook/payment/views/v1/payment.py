"""
Payment Views V1
"""
import logging

from rest_framework.permissions import AllowAny, IsAuthenticated
from drf_spectacular.utils import extend_schema, OpenApiResponse

from core.exceptions import FitbookError
from core.pagination import StandardResultsSetPagination
from core.throttling import UserBurstThrottle
from core.views import BaseAPIView
from payment.serializers.v1 import (
    CreatePaymentIntentSerializer,
    ConfirmPaymentSerializer,
    PackageSerializer,
    PackageOfferSerializer,
)
from payment.services import PaymentService

logger = logging.getLogger(__name__)


class CreatePaymentIntentView(BaseAPIView):
    """Start checkout for an hour package"""
    permission_classes = [IsAuthenticated]
    throttle_classes = [UserBurstThrottle]
    serializer_class = CreatePaymentIntentSerializer

    @extend_schema(
        request=CreatePaymentIntentSerializer,
        responses={
            201: OpenApiResponse(description='Pending package and Stripe client secret'),
            400: OpenApiResponse(description='Unknown package type'),
            502: OpenApiResponse(description='Stripe unavailable'),
        },
        tags=['Payments']
    )
    def post(self, request):
        serializer = CreatePaymentIntentSerializer(data=request.data)
        if not serializer.is_valid():
            return self.error_response(
                message='Invalid package',
                errors=serializer.errors,
                status_code=400
            )

        try:
            package, client_secret = PaymentService.create_payment_intent(
                request.user, serializer.validated_data['package_type']
            )
        except FitbookError as exc:
            return self.service_error_response(exc)

        return self.success_response(
            message='Payment intent created',
            data={
                'client_secret': client_secret,
                'package': PackageSerializer(package).data,
            },
            status_code=201
        )


class ConfirmPaymentView(BaseAPIView):
    """Client confirmation after Stripe reports the payment complete"""
    permission_classes = [IsAuthenticated]
    serializer_class = ConfirmPaymentSerializer

    @extend_schema(
        request=ConfirmPaymentSerializer,
        responses={
            200: PackageSerializer,
            400: OpenApiResponse(description='Payment not succeeded'),
            404: OpenApiResponse(description='Package not found'),
        },
        tags=['Payments']
    )
    def post(self, request):
        serializer = ConfirmPaymentSerializer(data=request.data)
        if not serializer.is_valid():
            return self.error_response(
                message='Invalid data',
                errors=serializer.errors,
                status_code=400
            )

        try:
            package, credited = PaymentService.confirm_payment(
                request.user, serializer.validated_data['payment_intent_id']
            )
        except FitbookError as exc:
            return self.service_error_response(exc)

        request.user.refresh_from_db(fields=['remaining_minutes'])
        return self.success_response(
            message='Payment confirmed',
            data={
                'package': PackageSerializer(package).data,
                'credited': credited,
                'remaining_minutes': request.user.remaining_minutes,
            }
        )


class PackageHistoryView(BaseAPIView):
    """Packages bought (or attempted) by the current user"""
    permission_classes = [IsAuthenticated]
    serializer_class = PackageSerializer
    pagination_class = StandardResultsSetPagination

    @extend_schema(responses={200: PackageSerializer(many=True)}, tags=['Payments'])
    def get(self, request):
        queryset = PaymentService.history(request.user)
        page = self.paginate_queryset(queryset)
        if page is not None:
            serializer = self.get_serializer(page, many=True)
            return self.get_paginated_response(serializer.data)
        serializer = self.get_serializer(queryset, many=True)
        return self.success_response(message='Payment history retrieved', data=serializer.data)


class PackageCatalogueView(BaseAPIView):
    """Packages on sale"""
    permission_classes = [AllowAny]
    serializer_class = PackageOfferSerializer

    @extend_schema(responses={200: PackageOfferSerializer(many=True)}, tags=['Payments'])
    def get(self, request):
        offers = list(PaymentService.catalogue().values())
        return self.success_response(
            message='Packages retrieved',
            data={'packages': PackageOfferSerializer(offers, many=True).data}
        )
