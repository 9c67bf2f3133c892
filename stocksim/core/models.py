"""
Core data models for the stock simulator.
Records here are immutable once created.
"""

from dataclasses import dataclass
from datetime import datetime

from .types import TransactionType


@dataclass(frozen=True)
class Transaction:
    """Represents an executed buy or sell"""
    type: TransactionType
    symbol: str
    quantity: int
    price: float  # per share at execution
    timestamp: datetime

    @property
    def value(self) -> float:
        """Cash amount moved by this transaction"""
        return self.quantity * self.price


@dataclass(frozen=True)
class HistoryEntry:
    """Portfolio valuation snapshot"""
    timestamp: datetime
    total_value: float
