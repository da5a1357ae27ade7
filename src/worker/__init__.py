"""Background workers for the ticket back office"""
from .balance_reconciler import BalanceReconcilerWorker

__all__ = ["BalanceReconcilerWorker"]
