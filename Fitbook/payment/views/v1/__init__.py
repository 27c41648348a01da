"""
Payment V1 Views
"""
from .payment import (
    CreatePaymentIntentView,
    ConfirmPaymentView,
    PackageHistoryView,
    PackageCatalogueView,
)

__all__ = [
    'CreatePaymentIntentView',
    'ConfirmPaymentView',
    'PackageHistoryView',
    'PackageCatalogueView',
]
