"""
User account: cash balance, portfolio and transaction log.
"""

from typing import List, Optional, Tuple

import pandas as pd

from .portfolio import Portfolio
from ..core.models import Transaction
from ..market.market import Market


class Account:
    """Cash balance plus the owned portfolio and transactions"""

    def __init__(self, name: str, cash: float, portfolio: Optional[Portfolio] = None):
        self.name = name
        self.cash = cash
        self.portfolio = portfolio if portfolio is not None else Portfolio()
        self._transactions: List[Transaction] = []

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        # Saved one per line in the profile file
        if value and value.splitlines() != [value]:
            raise ValueError("Account name cannot contain line breaks")
        self._name = value

    def debit(self, amount: float) -> None:
        """Subtract cash. No bounds check, the engine validates first."""
        self.cash -= amount

    def credit(self, amount: float) -> None:
        self.cash += amount

    def add_transaction(self, transaction: Transaction) -> None:
        self._transactions.append(transaction)

    @property
    def transactions(self) -> Tuple[Transaction, ...]:
        return tuple(self._transactions)

    def transactions_frame(self) -> pd.DataFrame:
        """Transaction log as a DataFrame in execution order"""
        return pd.DataFrame(
            [
                {
                    'type': t.type.value,
                    'symbol': t.symbol,
                    'qty': t.quantity,
                    'price': t.price,
                    'timestamp': t.timestamp,
                } for t in self._transactions
            ],
            columns=['type', 'symbol', 'qty', 'price', 'timestamp']
        )

    def net_worth(self, market: Market) -> float:
        """Cash plus portfolio valuation"""
        return self.cash + self.portfolio.total_value(market)

    def __str__(self) -> str:
        return f"Account({self.name}, Cash: ${self.cash:.2f}, Transactions: {len(self._transactions)})"

    def __repr__(self) -> str:
        return self.__str__()
