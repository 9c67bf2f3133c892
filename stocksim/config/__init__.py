"""Configuration and logging setup."""

from .settings import SimulatorConfig, DEFAULT_CONFIG
from .logging_config import setup_logging

__all__ = ['SimulatorConfig', 'DEFAULT_CONFIG', 'setup_logging']
