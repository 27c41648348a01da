from .payment import (
    CreatePaymentIntentSerializer,
    ConfirmPaymentSerializer,
    PackageSerializer,
    PackageOfferSerializer,
)

__all__ = [
    'CreatePaymentIntentSerializer',
    'ConfirmPaymentSerializer',
    'PackageSerializer',
    'PackageOfferSerializer',
]
