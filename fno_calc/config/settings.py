"""
Calculator settings
Environment variables take precedence; every value is validated
"""
import os
from decimal import Decimal, InvalidOperation
from typing import Optional

from dotenv import load_dotenv

from fno_calc.exceptions import ConfigurationError

load_dotenv()


def get_env_int(key: str, default: int, min_value: Optional[int] = None, max_value: Optional[int] = None) -> int:
    """Read an integer from the environment (with range checks)"""
    value = os.getenv(key)
    if value is None:
        return default

    try:
        int_value = int(value)
    except ValueError:
        raise ConfigurationError(key, f"cannot convert to integer: {value}")
    if min_value is not None and int_value < min_value:
        raise ConfigurationError(key, f"value is below minimum ({min_value}): {int_value}")
    if max_value is not None and int_value > max_value:
        raise ConfigurationError(key, f"value is above maximum ({max_value}): {int_value}")
    return int_value


def get_env_decimal(
    key: str,
    default: str,
    min_value: Optional[Decimal] = None,
    max_value: Optional[Decimal] = None,
) -> Decimal:
    """Read a decimal from the environment (with range checks)"""
    value = os.getenv(key, default)

    try:
        decimal_value = Decimal(value)
    except InvalidOperation:
        raise ConfigurationError(key, f"cannot convert to decimal: {value}")
    if not decimal_value.is_finite():
        raise ConfigurationError(key, f"value must be finite: {value}")
    if min_value is not None and decimal_value < min_value:
        raise ConfigurationError(key, f"value is below minimum ({min_value}): {decimal_value}")
    if max_value is not None and decimal_value > max_value:
        raise ConfigurationError(key, f"value is above maximum ({max_value}): {decimal_value}")
    return decimal_value


def get_env_str(key: str, default: str) -> str:
    """Read a string from the environment"""
    return os.getenv(key, default)


class ChargesConfig:
    """Flat brokerage and turnover-independent fee settings"""
    BROKERAGE_PER_ORDER = get_env_decimal("FNO_BROKERAGE_PER_ORDER", "20", min_value=Decimal("0"))
    GST_RATE = get_env_decimal("FNO_GST_RATE", "0.18", min_value=Decimal("0"), max_value=Decimal("1"))
    SEBI_TURNOVER_FEE = get_env_decimal(
        "FNO_SEBI_TURNOVER_FEE", "0.000001", min_value=Decimal("0"), max_value=Decimal("0.01")
    )

    @classmethod
    def validate(cls):
        """Validate charge settings"""
        if cls.BROKERAGE_PER_ORDER < 0:
            raise ConfigurationError("BROKERAGE_PER_ORDER", "brokerage cannot be negative")
        if cls.GST_RATE < 0 or cls.GST_RATE > 1:
            raise ConfigurationError("GST_RATE", "GST rate must be between 0 and 1")
        if cls.SEBI_TURNOVER_FEE < 0 or cls.SEBI_TURNOVER_FEE > Decimal("0.01"):
            raise ConfigurationError("SEBI_TURNOVER_FEE", "SEBI fee must be between 0 and 0.01")


class TradeDefaultsConfig:
    """Defaults used when an input form leaves a field blank"""
    INSTRUMENT_TYPE = get_env_str("FNO_DEFAULT_INSTRUMENT_TYPE", "options")
    TRADE_TYPE = get_env_str("FNO_DEFAULT_TRADE_TYPE", "long")
    SYMBOL = get_env_str("FNO_DEFAULT_SYMBOL", "NIFTY")
    EXPIRY = get_env_str("FNO_DEFAULT_EXPIRY", "26-Sep-2025")
    STRIKE_PRICE = get_env_int("FNO_DEFAULT_STRIKE_PRICE", 24900, min_value=0)
    QUANTITY = get_env_int("FNO_DEFAULT_QUANTITY", 1, min_value=1)
    LOT_SIZE = get_env_int("FNO_DEFAULT_LOT_SIZE", 50, min_value=1)
    # percentage points
    PROFIT_TAX_RATE = get_env_decimal("FNO_DEFAULT_PROFIT_TAX_RATE", "30", min_value=Decimal("0"), max_value=Decimal("100"))
    INITIAL_MARGIN_RATE = get_env_decimal("FNO_DEFAULT_INITIAL_MARGIN_RATE", "10", min_value=Decimal("0"), max_value=Decimal("100"))
    EXPOSURE_MARGIN_RATE = get_env_decimal("FNO_DEFAULT_EXPOSURE_MARGIN_RATE", "5", min_value=Decimal("0"), max_value=Decimal("100"))

    @classmethod
    def validate(cls):
        """Validate form defaults"""
        if cls.INSTRUMENT_TYPE.lower() not in ("options", "futures"):
            raise ConfigurationError("INSTRUMENT_TYPE", f"unsupported instrument type: {cls.INSTRUMENT_TYPE}")
        if cls.TRADE_TYPE.lower() not in ("long", "short"):
            raise ConfigurationError("TRADE_TYPE", f"unsupported trade type: {cls.TRADE_TYPE}")
        if not cls.SYMBOL:
            raise ConfigurationError("SYMBOL", "symbol cannot be empty")


class LoggingConfig:
    """Logging settings"""
    LEVEL = get_env_str("FNO_LOG_LEVEL", "WARNING").upper()

    @classmethod
    def validate(cls):
        """Validate logging settings"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if cls.LEVEL not in valid_levels:
            raise ConfigurationError("LEVEL", f"unsupported log level: {cls.LEVEL}. Supported: {', '.join(valid_levels)}")


def validate_all_configs():
    """Validate every settings class"""
    ChargesConfig.validate()
    TradeDefaultsConfig.validate()
    LoggingConfig.validate()
