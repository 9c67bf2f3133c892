"""Portfolio and account management components."""

from .portfolio import Portfolio
from .account import Account

__all__ = ['Portfolio', 'Account']
