"""
Trading engine: validates and executes immediate market buys and sells.

Every operation validates first and mutates second, so a rejected trade
leaves the account, portfolio and history untouched.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from ..portfolio.account import Account
from ..market.market import Market
from ..core.models import Transaction
from ..core.types import TransactionType
from ..core.exceptions import (
    InvalidQuantityError, InsufficientFundsError, InsufficientHoldingsError
)

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


@dataclass(frozen=True)
class TradeResult:
    """Outcome of a successful buy or sell"""
    transaction: Transaction
    amount: float  # cost of a buy, proceeds of a sell
    cash_after: float
    portfolio_value: float


def buy(account: Account, market: Market, symbol: str, quantity: int,
        clock: Clock = datetime.now) -> TradeResult:
    """Buy shares at the current market price"""
    stock = market.require_stock(symbol)
    if quantity <= 0:
        raise InvalidQuantityError(quantity)

    price = stock.price
    cost = price * quantity
    if cost > account.cash:
        raise InsufficientFundsError(cost, account.cash)

    now = clock()
    account.debit(cost)
    account.portfolio.add_holding(symbol, quantity)
    transaction = Transaction(TransactionType.BUY, symbol, quantity, price, now)
    account.add_transaction(transaction)
    value = account.portfolio.total_value(market)
    account.portfolio.record_history(now, value)

    logger.info(f"Bought {quantity} {symbol} @ ${price:.2f}, cost ${cost:,.2f}")
    return TradeResult(transaction, cost, account.cash, value)


def sell(account: Account, market: Market, symbol: str, quantity: int,
         clock: Clock = datetime.now) -> TradeResult:
    """Sell held shares at the current market price"""
    stock = market.require_stock(symbol)
    if quantity <= 0:
        raise InvalidQuantityError(quantity)

    held = account.portfolio.get_holding_quantity(symbol)
    if quantity > held:
        raise InsufficientHoldingsError(symbol, quantity, held)

    price = stock.price
    proceeds = price * quantity
    now = clock()
    account.credit(proceeds)
    account.portfolio.remove_holding(symbol, quantity)
    transaction = Transaction(TransactionType.SELL, symbol, quantity, price, now)
    account.add_transaction(transaction)
    value = account.portfolio.total_value(market)
    account.portfolio.record_history(now, value)

    logger.info(f"Sold {quantity} {symbol} @ ${price:.2f}, proceeds ${proceeds:,.2f}")
    return TradeResult(transaction, proceeds, account.cash, value)
