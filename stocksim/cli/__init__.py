"""Command-line interface."""

from .shell import TradingShell, create_session, main

__all__ = ['TradingShell', 'create_session', 'main']
