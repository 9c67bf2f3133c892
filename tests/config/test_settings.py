"""
Tests for configuration.
"""

import logging
import pytest
from stocksim.config.settings import SimulatorConfig
from stocksim.config.logging_config import setup_logging


class TestSimulatorConfig:
    def test_defaults(self):
        config = SimulatorConfig()
        assert config.starting_cash == 10000.0
        assert config.default_name == 'Trader'
        assert config.max_change_percent == 6.0
        assert config.price_floor == 0.01
        assert config.seed is None

    def test_file_round_trip(self, tmp_path):
        path = str(tmp_path / 'config.json')
        SimulatorConfig(starting_cash=2500.0, seed=9).save_to_file(path)
        config = SimulatorConfig.from_file(path)

        assert config.starting_cash == 2500.0
        assert config.seed == 9

    def test_from_file_errors(self, tmp_path):
        bad = tmp_path / 'bad.json'
        bad.write_text('{"unknown_field": 1}')
        with pytest.raises(ValueError):
            SimulatorConfig.from_file(str(bad))
        with pytest.raises(ValueError):
            SimulatorConfig.from_file(str(tmp_path / 'missing.json'))

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv('STOCKSIM_STARTING_CASH', '750')
        monkeypatch.setenv('STOCKSIM_SEED', '12')
        monkeypatch.setenv('STOCKSIM_MAX_CHANGE_PERCENT', '2.5')
        config = SimulatorConfig.from_env()

        assert config.starting_cash == 750.0
        assert config.seed == 12
        assert config.max_change_percent == 2.5

    def test_validation(self):
        with pytest.raises(ValueError):
            SimulatorConfig(starting_cash=-1.0)
        with pytest.raises(ValueError):
            SimulatorConfig(price_floor=0.0)


class TestLogging:
    def test_setup_logging(self):
        logger = setup_logging('debug')
        assert logger.name == 'stocksim'
        assert logging.getLogger().level == logging.DEBUG
        setup_logging('WARNING')

    def test_invalid_level(self):
        with pytest.raises(ValueError):
            setup_logging('chatty')
