"""
Exact monetary values with pluggable currencies.

Example:
    >>> from exact_money import Value
    >>> Value.from_string("-11.11 ISO4217-EUR").split(3)
    [Value('-3.71 ISO4217-EUR'), Value('-3.70 ISO4217-EUR'), Value('-3.70 ISO4217-EUR')]
"""

from exact_money.currency import Currency, ISO4217Currency, validate_currency
from exact_money.error import (
    BaseError,
    CurrencyCollisionError,
    CurrencyNotFoundError,
    DifferentCurrenciesError,
    InvalidCurrencyError,
    MalformedValueError,
    MoneyError,
    SplitError,
)
from exact_money.money import Value, parse
from exact_money.registry import CURRENCIES, ISO4217_CURRENCIES, CurrencyRegistry
from exact_money.codec import (
    decode_binary,
    decode_json,
    decode_text,
    encode_binary,
    encode_json,
    encode_text,
    from_db_value,
    register_sqlite3,
    to_db_value,
)

__version__ = "0.1.0"

__all__ = [
    "BaseError",
    "CURRENCIES",
    "Currency",
    "CurrencyCollisionError",
    "CurrencyNotFoundError",
    "CurrencyRegistry",
    "DifferentCurrenciesError",
    "ISO4217Currency",
    "ISO4217_CURRENCIES",
    "InvalidCurrencyError",
    "MalformedValueError",
    "MoneyError",
    "SplitError",
    "Value",
    "decode_binary",
    "decode_json",
    "decode_text",
    "encode_binary",
    "encode_json",
    "encode_text",
    "from_db_value",
    "parse",
    "register_sqlite3",
    "to_db_value",
    "validate_currency",
]
