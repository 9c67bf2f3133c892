"""
Stock Simulator - A single-user stock trading simulator.

This package provides:
- A simulated market whose prices follow a random walk
- An account with cash, holdings and a transaction log
- Market buy/sell validation and execution
- Portfolio valuation history
- Folder-based save and load
"""

__version__ = "1.0.0"
__author__ = "Stock Simulator Team"

from .core.types import TransactionType
from .core.models import Transaction, HistoryEntry
from .core.exceptions import (
    StockSimError, TradingError, NoSuchStockError, InvalidQuantityError,
    InsufficientFundsError, InsufficientHoldingsError,
    PersistenceError, PersistenceReadError, PersistenceWriteError,
    MalformedSaveDataError
)
from .market.stock import Stock
from .market.market import Market
from .portfolio.portfolio import Portfolio
from .portfolio.account import Account
from .trading.engine import TradeResult, buy, sell
from .trading.simulation import simulate, record_valuation
from .persistence.storage import PersistenceReport, save_account, load_account
from .config.settings import SimulatorConfig
from .cli.shell import TradingShell, create_session

__all__ = [
    # Core types and models
    'TransactionType', 'Transaction', 'HistoryEntry',
    # Errors
    'StockSimError', 'TradingError', 'NoSuchStockError', 'InvalidQuantityError',
    'InsufficientFundsError', 'InsufficientHoldingsError',
    'PersistenceError', 'PersistenceReadError', 'PersistenceWriteError',
    'MalformedSaveDataError',
    # Domain
    'Stock', 'Market', 'Portfolio', 'Account',
    # Operations
    'TradeResult', 'buy', 'sell', 'simulate', 'record_valuation',
    'PersistenceReport', 'save_account', 'load_account',
    # Session
    'SimulatorConfig', 'TradingShell', 'create_session'
]
