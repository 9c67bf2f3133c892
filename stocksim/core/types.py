"""
Core type definitions for the stock simulator.
"""

from enum import Enum


class TransactionType(Enum):
    """Side of an executed transaction"""
    BUY = "BUY"
    SELL = "SELL"
