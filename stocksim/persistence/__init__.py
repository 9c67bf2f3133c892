"""Save and load of accounts."""

from .storage import PersistenceReport, save_account, load_account

__all__ = ['PersistenceReport', 'save_account', 'load_account']
