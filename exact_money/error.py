"""
A module for holding error classes.
"""

from typing import Any, Optional


class BaseError(Exception):
    def __init__(self, message: str, error_key: str):
        self.message = message
        self.error_key = error_key
        super().__init__(self.message)


class MoneyError(BaseError):
    CURRENCY_SQUARED = "CURRENCY_SQUARED"
    INEXACT_RESULT = "INEXACT_RESULT"
    EXPONENT_OUT_OF_RANGE = "EXPONENT_OUT_OF_RANGE"


class InvalidCurrencyError(MoneyError):
    """A currency definition violates one of the structural invariants."""

    INVALID_CURRENCY = "INVALID_CURRENCY"

    def __init__(self, message: str, error_key: str = INVALID_CURRENCY):
        super().__init__(message, error_key)


class CurrencyCollisionError(MoneyError):
    """A currency can't be added to a registry."""

    STANDARD_NOT_ALLOWED = "STANDARD_NOT_ALLOWED"
    UNIQUE_ID_COLLISION = "UNIQUE_ID_COLLISION"
    UNIQUE_CODE_COLLISION = "UNIQUE_CODE_COLLISION"
    CODE_COLLISION = "CODE_COLLISION"
    NUMERIC_CODE_COLLISION = "NUMERIC_CODE_COLLISION"

    def __init__(self, message: str, error_key: str, existing: Optional[Any] = None):
        self.existing = existing
        super().__init__(message, error_key)


def currency_label(currency: Optional[Any]) -> str:
    """Unique code of a currency, or a "no currency" label."""
    if currency is None:
        return "no currency"
    return repr(currency.unique_code)


class DifferentCurrenciesError(MoneyError):
    """Two monetary values don't share the same currency."""

    CURRENCY_MISMATCH = "CURRENCY_MISMATCH"

    def __init__(self, c1: Optional[Any], c2: Optional[Any]):
        self.c1 = c1
        self.c2 = c2
        super().__init__(
            "the monetary values have two different currencies: "
            f"{currency_label(c1)} and {currency_label(c2)}",
            self.CURRENCY_MISMATCH,
        )


class CurrencyNotFoundError(MoneyError):
    UNIQUE_CODE_NOT_FOUND = "UNIQUE_CODE_NOT_FOUND"
    UNIQUE_ID_NOT_FOUND = "UNIQUE_ID_NOT_FOUND"

    def __init__(
        self,
        message: str,
        error_key: str,
        unique_code: Optional[str] = None,
        unique_id: Optional[int] = None,
    ):
        self.unique_code = unique_code
        self.unique_id = unique_id
        super().__init__(message, error_key)

    @classmethod
    def for_unique_code(cls, unique_code: str) -> "CurrencyNotFoundError":
        return cls(
            f"can't find currency with unique code {unique_code!r}",
            cls.UNIQUE_CODE_NOT_FOUND,
            unique_code=unique_code,
        )

    @classmethod
    def for_unique_id(cls, unique_id: int) -> "CurrencyNotFoundError":
        return cls(
            f"can't find currency with unique ID {unique_id}",
            cls.UNIQUE_ID_NOT_FOUND,
            unique_id=unique_id,
        )


class MalformedValueError(MoneyError):
    MALFORMED_VALUE = "MALFORMED_VALUE"
    TOO_MANY_SEPARATORS = "TOO_MANY_SEPARATORS"
    TRUNCATED_BINARY = "TRUNCATED_BINARY"

    def __init__(self, message: str, error_key: str = MALFORMED_VALUE):
        super().__init__(message, error_key)


class SplitError(MoneyError):
    INVALID_PART_COUNT = "INVALID_PART_COUNT"
    INVALID_SMALLEST_UNIT = "INVALID_SMALLEST_UNIT"
    NOT_A_MULTIPLE = "NOT_A_MULTIPLE"
    DECIMAL_PLACES_OUT_OF_RANGE = "DECIMAL_PLACES_OUT_OF_RANGE"
