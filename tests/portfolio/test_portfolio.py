"""
Tests for portfolio and account management.
"""

import logging
import pytest
from datetime import datetime, timedelta
from stocksim.portfolio.portfolio import Portfolio
from stocksim.portfolio.account import Account
from stocksim.market.market import Market
from stocksim.market.stock import Stock
from stocksim.core.models import Transaction
from stocksim.core.types import TransactionType
from stocksim.core.exceptions import InvalidQuantityError


class TestPortfolio:
    def test_portfolio_creation(self):
        """Test portfolio creation"""
        portfolio = Portfolio()
        assert portfolio.holdings == {}
        assert portfolio.history == ()
        assert portfolio.get_holding_quantity('AAPL') == 0

    def test_add_holding(self):
        """Test adding shares creates and increments holdings"""
        portfolio = Portfolio()
        portfolio.add_holding('AAPL', 10)
        portfolio.add_holding('AAPL', 5)

        assert portfolio.get_holding_quantity('AAPL') == 15

    def test_add_holding_rejects_non_positive(self):
        portfolio = Portfolio()
        with pytest.raises(InvalidQuantityError):
            portfolio.add_holding('AAPL', 0)
        assert portfolio.holdings == {}

    def test_remove_holding_partial(self):
        """Test removing some shares"""
        portfolio = Portfolio()
        portfolio.add_holding('AAPL', 10)
        portfolio.remove_holding('AAPL', 4)

        assert portfolio.get_holding_quantity('AAPL') == 6

    def test_remove_holding_all_deletes_entry(self):
        """Test removing every share drops the entry"""
        portfolio = Portfolio()
        portfolio.add_holding('AAPL', 10)
        portfolio.remove_holding('AAPL', 10)

        assert 'AAPL' not in portfolio.holdings
        assert len(portfolio) == 0

    def test_remove_more_than_held_deletes_entry(self):
        portfolio = Portfolio()
        portfolio.add_holding('AAPL', 3)
        portfolio.remove_holding('AAPL', 5)

        assert portfolio.holdings == {}

    def test_holdings_returns_copy(self):
        """Test callers cannot mutate internal holdings"""
        portfolio = Portfolio()
        portfolio.add_holding('AAPL', 1)
        holdings = portfolio.holdings
        holdings['AAPL'] = 100

        assert portfolio.get_holding_quantity('AAPL') == 1

    def test_total_value(self):
        """Test valuation is quantity times current price"""
        market = Market(seed=1)
        market.add_stock(Stock('X', 'X Corp.', 10.0))
        market.add_stock(Stock('Y', 'Y Corp.', 20.0))
        portfolio = Portfolio()
        portfolio.add_holding('X', 5)

        assert portfolio.total_value(market) == 50.0
        assert portfolio.total_value(market) == 50.0

    def test_total_value_unlisted_symbol_counts_zero(self, caplog):
        """Test holdings missing from the market contribute nothing"""
        market = Market(seed=1)
        market.add_stock(Stock('X', 'X Corp.', 10.0))
        portfolio = Portfolio()
        portfolio.add_holding('X', 2)
        portfolio.add_holding('GONE', 100)

        with caplog.at_level(logging.WARNING):
            assert portfolio.total_value(market) == 20.0
        assert 'GONE' in caplog.text

    def test_record_history_appends(self):
        """Test history grows on every record, duplicates included"""
        portfolio = Portfolio()
        ts = datetime(2024, 1, 1)
        portfolio.record_history(ts, 100.0)
        portfolio.record_history(ts, 100.0)
        portfolio.record_history(ts + timedelta(seconds=1), 90.0)

        assert len(portfolio.history) == 3
        assert portfolio.history[-1].total_value == 90.0

    def test_history_frame(self):
        portfolio = Portfolio()
        portfolio.record_history(datetime(2024, 1, 1), 1.0)
        portfolio.record_history(datetime(2024, 1, 2), 2.0)

        frame = portfolio.history_frame()
        assert list(frame.columns) == ['timestamp', 'total_value']
        assert frame['total_value'].tolist() == [1.0, 2.0]

    def test_positions_summary(self, small_market):
        portfolio = Portfolio()
        portfolio.add_holding('XYZ', 3)
        summary = portfolio.positions_summary(small_market)

        assert summary == {'XYZ': {'quantity': 3, 'price': 10.0, 'market_value': 30.0}}


class TestAccount:
    def test_account_creation(self):
        """Test account creation"""
        account = Account('Alice', 10000.0)
        assert account.name == 'Alice'
        assert account.cash == 10000.0
        assert account.transactions == ()
        assert isinstance(account.portfolio, Portfolio)

    def test_debit_and_credit(self):
        account = Account('Alice', 100.0)
        account.debit(30.0)
        account.credit(5.0)
        assert account.cash == 75.0

    def test_debit_has_no_bounds_check(self):
        """Test the account itself allows negative cash"""
        account = Account('Alice', 10.0)
        account.debit(25.0)
        assert account.cash == -15.0

    def test_add_transaction_keeps_order(self):
        account = Account('Alice', 0.0)
        ts = datetime(2024, 1, 1)
        first = Transaction(TransactionType.BUY, 'AAPL', 1, 10.0, ts)
        second = Transaction(TransactionType.SELL, 'AAPL', 1, 11.0, ts)
        account.add_transaction(first)
        account.add_transaction(second)

        assert account.transactions == (first, second)
        frame = account.transactions_frame()
        assert frame['type'].tolist() == ['BUY', 'SELL']

    def test_net_worth(self, small_market):
        account = Account('Alice', 100.0)
        account.portfolio.add_holding('XYZ', 2)
        assert account.net_worth(small_market) == 120.0

    @pytest.mark.parametrize('name', ['Line\nBreak', 'Carriage\rReturn', 'Sep\u2028arator', 'Trailing\n'])
    def test_name_with_line_break_rejected(self, name):
        """Test names that would split the profile file are refused"""
        with pytest.raises(ValueError):
            Account(name, 100.0)

        account = Account('Alice', 100.0)
        with pytest.raises(ValueError):
            account.name = name
        assert account.name == 'Alice'
