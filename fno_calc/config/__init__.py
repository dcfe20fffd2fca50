"""Settings module"""
from .settings import ChargesConfig, TradeDefaultsConfig, LoggingConfig, validate_all_configs

__all__ = ['ChargesConfig', 'TradeDefaultsConfig', 'LoggingConfig', 'validate_all_configs']
