"""
Payment Serializers V1
"""
from django.conf import settings
from rest_framework import serializers

from payment.models import Package


class CreatePaymentIntentSerializer(serializers.Serializer):
    package_type = serializers.CharField(max_length=20)

    def validate_package_type(self, value):
        value = value.strip().lower()
        if value not in settings.FITBOOK_PACKAGES:
            raise serializers.ValidationError(
                f"Choose one of: {', '.join(sorted(settings.FITBOOK_PACKAGES))}"
            )
        return value


class ConfirmPaymentSerializer(serializers.Serializer):
    payment_intent_id = serializers.CharField(max_length=255)


class PackageSerializer(serializers.ModelSerializer):
    minutes = serializers.IntegerField(read_only=True)

    class Meta:
        model = Package
        fields = [
            'id', 'package_type', 'amount', 'currency', 'hours', 'minutes',
            'status', 'stripe_payment_intent_id', 'paid_at', 'failed_at', 'created_at'
        ]
        read_only_fields = fields


class PackageOfferSerializer(serializers.Serializer):
    package_type = serializers.CharField(read_only=True)
    name = serializers.CharField(read_only=True)
    amount = serializers.DecimalField(max_digits=10, decimal_places=2, read_only=True)
    currency = serializers.CharField(read_only=True)
    hours = serializers.IntegerField(read_only=True)
