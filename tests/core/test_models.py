"""
Tests for core models and exceptions.
"""

import dataclasses
import pytest
from datetime import datetime
from stocksim.core.models import Transaction, HistoryEntry
from stocksim.core.types import TransactionType
from stocksim.core.exceptions import (
    StockSimError, TradingError, NoSuchStockError, InvalidQuantityError,
    InsufficientFundsError, InsufficientHoldingsError,
    PersistenceError, MalformedSaveDataError
)


class TestTransaction:
    def test_transaction_creation(self):
        """Test transaction creation"""
        ts = datetime(2024, 1, 2, 9, 30)
        t = Transaction(TransactionType.BUY, 'AAPL', 10, 170.0, ts)

        assert t.type == TransactionType.BUY
        assert t.symbol == 'AAPL'
        assert t.quantity == 10
        assert t.price == 170.0
        assert t.timestamp == ts
        assert t.value == 1700.0

    def test_transaction_is_immutable(self):
        """Test transactions cannot be edited"""
        t = Transaction(TransactionType.SELL, 'AAPL', 1, 1.0, datetime.now())
        with pytest.raises(dataclasses.FrozenInstanceError):
            t.quantity = 5

    def test_type_values_match_save_format(self):
        """Test type values are the literal strings written to disk"""
        assert TransactionType('BUY') is TransactionType.BUY
        assert TransactionType('SELL') is TransactionType.SELL


class TestHistoryEntry:
    def test_history_entry_is_immutable(self):
        entry = HistoryEntry(datetime(2024, 1, 1), 50.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.total_value = 0.0


class TestExceptions:
    def test_hierarchy(self):
        """Test every error derives from the package base error"""
        assert issubclass(NoSuchStockError, TradingError)
        assert issubclass(InsufficientFundsError, TradingError)
        assert issubclass(TradingError, StockSimError)
        assert issubclass(MalformedSaveDataError, PersistenceError)
        assert issubclass(PersistenceError, StockSimError)

    def test_messages(self):
        """Test error messages are descriptive"""
        assert str(NoSuchStockError('FOO')) == "No such stock: FOO"
        assert "need $1,700.00, have $100.00" in str(InsufficientFundsError(1700.0, 100.0))
        assert "need 5, have 2" in str(InsufficientHoldingsError('AAPL', 5, 2))
        assert "-3" in str(InvalidQuantityError(-3))

    def test_malformed_data_fields(self):
        error = MalformedSaveDataError('x/holdings.csv', 3, 'AAPL,abc', 'bad number')
        assert error.line_number == 3
        assert error.line == 'AAPL,abc'
        assert error.path == 'x/holdings.csv'
        assert 'line 3' in str(error)
