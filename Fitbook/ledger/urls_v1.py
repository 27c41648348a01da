"""
Ledger V1 URL Configuration
"""
from django.urls import path

from ledger.views.v1 import BalanceView, MinuteTransactionListView

app_name = 'ledger_v1'

urlpatterns = [
    path('ledger/balance/', BalanceView.as_view(), name='balance'),
    path('ledger/transactions/', MinuteTransactionListView.as_view(), name='transactions'),
]
