"""Core components of the stock simulator."""

from .types import TransactionType
from .models import Transaction, HistoryEntry
from .exceptions import (
    StockSimError, TradingError, NoSuchStockError, InvalidQuantityError,
    InsufficientFundsError, InsufficientHoldingsError,
    PersistenceError, PersistenceReadError, PersistenceWriteError,
    MalformedSaveDataError
)

__all__ = [
    'TransactionType', 'Transaction', 'HistoryEntry',
    'StockSimError', 'TradingError', 'NoSuchStockError', 'InvalidQuantityError',
    'InsufficientFundsError', 'InsufficientHoldingsError',
    'PersistenceError', 'PersistenceReadError', 'PersistenceWriteError',
    'MalformedSaveDataError'
]
