"""
Payment V1 URL Configuration
"""
from django.urls import path, include

from payment.views.v1 import (
    CreatePaymentIntentView,
    ConfirmPaymentView,
    PackageHistoryView,
    PackageCatalogueView,
)

app_name = 'payment_v1'

urlpatterns = [
    path('payments/create-payment-intent/', CreatePaymentIntentView.as_view(), name='create-payment-intent'),
    path('payments/payment-success/', ConfirmPaymentView.as_view(), name='payment-success'),
    path('payments/history/', PackageHistoryView.as_view(), name='history'),
    path('payments/packages/', PackageCatalogueView.as_view(), name='packages'),
    path('payments/', include('payment.webhooks.v1.urls')),
]
