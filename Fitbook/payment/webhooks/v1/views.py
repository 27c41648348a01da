"""
Payment Webhook Views V1
"""
import json
import logging
import time

from django.db import DatabaseError
from django.utils import timezone
from drf_spectacular.utils import extend_schema, OpenApiResponse
from rest_framework import status
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from core.exceptions import FitbookError
from core.services import EventBus, Event, EventTypes
from payment.models import PaymentWebhook
from payment.webhooks.v1.handlers import StripeWebhookHandler

logger = logging.getLogger(__name__)


@extend_schema(
    request=None,
    responses={
        200: OpenApiResponse(description='Event received'),
        400: OpenApiResponse(description='Invalid signature or payload'),
        500: OpenApiResponse(description='Event could not be stored; Stripe will retry'),
    },
    tags=['Payments']
)
@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def stripe_webhook(request):
    """
    Handle Stripe webhook events

    POST /api/v1/payments/webhook/
    """
    raw_body = request.body
    signature_header = request.headers.get('Stripe-Signature')

    handler = StripeWebhookHandler()

    # Unsigned or tampered events are dropped without touching any state
    if not handler.verify_signature(raw_body, signature_header):
        logger.error("Stripe signature verification failed")
        return Response(
            {'received': False, 'error': 'Invalid signature'},
            status=status.HTTP_400_BAD_REQUEST
        )

    try:
        payload = json.loads(raw_body.decode('utf-8'))
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.error("Invalid JSON in Stripe webhook")
        return Response(
            {'received': False, 'error': 'Invalid JSON'},
            status=status.HTTP_400_BAD_REQUEST
        )

    if not isinstance(payload, dict):
        logger.error("Stripe webhook payload is not a JSON object")
        return Response(
            {'received': False, 'error': 'Invalid payload'},
            status=status.HTTP_400_BAD_REQUEST
        )

    event_type = str(payload.get('type') or 'unknown')
    gateway_event_id = str(payload.get('id') or f"stripe_{event_type}_{int(time.time())}")

    try:
        webhook_log, created = PaymentWebhook.objects.get_or_create(
            gateway_event_id=gateway_event_id,
            defaults={'event_type': event_type, 'payload': payload, 'status': 'pending'}
        )
        if not created and webhook_log.status in ('processed', 'ignored'):
            logger.info(f"Stripe event {gateway_event_id} already handled")
            return Response({'received': True, 'duplicate': True}, status=status.HTTP_200_OK)

        result = handler.process_webhook(event_type, payload)

        if result.get('ignored'):
            webhook_log.status = 'ignored'
        else:
            webhook_log.status = 'processed' if result.get('success') else 'failed'
        webhook_log.error_message = None if result.get('success') else result.get('error')
        webhook_log.processed_at = timezone.now()
        webhook_log.save(update_fields=['status', 'error_message', 'processed_at'])
    except (DatabaseError, FitbookError) as e:
        logger.error(f"Stripe webhook {gateway_event_id} could not be processed: {str(e)}")
        return Response(
            {'received': False, 'error': 'Internal server error'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    EventBus.publish(Event(
        event_type=EventTypes.WEBHOOK_RECEIVED,
        data={
            'provider': 'stripe',
            'event_type': event_type,
            'success': result.get('success'),
            'webhook_id': str(webhook_log.id)
        },
        source_module='payment'
    ))

    return Response({'received': True}, status=status.HTTP_200_OK)
