from django.contrib import admin

from payment.models import Package, PaymentWebhook


@admin.register(Package)
class PackageAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'package_type', 'hours', 'amount', 'currency', 'status', 'created_at']
    list_filter = ['status', 'package_type', 'created_at']
    search_fields = ['user__email', 'stripe_payment_intent_id']
    # Status only moves through PaymentService so the ledger is credited once
    readonly_fields = [
        'id', 'user', 'package_type', 'amount', 'currency', 'hours', 'status',
        'stripe_payment_intent_id', 'paid_at', 'failed_at', 'created_at', 'updated_at'
    ]


@admin.register(PaymentWebhook)
class PaymentWebhookAdmin(admin.ModelAdmin):
    list_display = ['gateway_event_id', 'event_type', 'status', 'received_at', 'processed_at']
    list_filter = ['status', 'event_type']
    search_fields = ['gateway_event_id']
    readonly_fields = ['id', 'gateway_event_id', 'event_type', 'payload', 'status', 'processed_at', 'error_message', 'received_at']
