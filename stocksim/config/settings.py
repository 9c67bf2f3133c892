"""
Simulator configuration.
"""

from dataclasses import dataclass, asdict
from typing import Optional
import os
import json


@dataclass
class SimulatorConfig:
    """Settings for a simulator session"""
    # Account
    starting_cash: float = 10000.0
    default_name: str = "Trader"

    # Market random walk
    max_change_percent: float = 6.0
    price_floor: float = 0.01
    seed: Optional[int] = None

    # Shell
    default_simulate_steps: int = 1
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.starting_cash < 0:
            raise ValueError("Starting cash cannot be negative")
        if self.max_change_percent < 0:
            raise ValueError("Max change percent cannot be negative")
        if self.price_floor <= 0:
            raise ValueError("Price floor must be positive")

    @classmethod
    def from_file(cls, config_path: str) -> 'SimulatorConfig':
        """Load configuration from JSON file"""
        try:
            with open(config_path, 'r') as f:
                data = json.load(f)
            return cls(**data)
        except (FileNotFoundError, json.JSONDecodeError, TypeError) as e:
            raise ValueError(f"Failed to load simulator config from {config_path}: {e}")

    def save_to_file(self, config_path: str):
        """Save configuration to JSON file"""
        config_dict = {k: v for k, v in asdict(self).items() if v is not None}

        with open(config_path, 'w') as f:
            json.dump(config_dict, f, indent=2)

    @classmethod
    def from_env(cls) -> 'SimulatorConfig':
        """Create configuration from environment variables"""
        seed = os.getenv('STOCKSIM_SEED')
        return cls(
            starting_cash=float(os.getenv('STOCKSIM_STARTING_CASH', '10000.0')),
            default_name=os.getenv('STOCKSIM_DEFAULT_NAME', 'Trader'),
            max_change_percent=float(os.getenv('STOCKSIM_MAX_CHANGE_PERCENT', '6.0')),
            price_floor=float(os.getenv('STOCKSIM_PRICE_FLOOR', '0.01')),
            seed=int(seed) if seed else None,
            default_simulate_steps=int(os.getenv('STOCKSIM_SIMULATE_STEPS', '1')),
            log_level=os.getenv('STOCKSIM_LOG_LEVEL', 'WARNING')
        )


DEFAULT_CONFIG = SimulatorConfig()
