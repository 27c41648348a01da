"""
Ledger V1 Views
"""
from .ledger import BalanceView, MinuteTransactionListView

__all__ = ['BalanceView', 'MinuteTransactionListView']
