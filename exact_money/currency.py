"""
A module for holding currency-related information.
"""

from __future__ import annotations

import abc
import re
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Optional

from exact_money.error import InvalidCurrencyError

if TYPE_CHECKING:
    from exact_money.money import Value

# Unique ID reserved for "no currency", it is never assigned to a real currency
NO_CURRENCY_UNIQUE_ID = 0

# Separator between the standard and the code of a unique code ("ISO4217-EUR")
UNIQUE_CODE_SEPARATOR = "-"

# Unique IDs and exponents are stored as big-endian int32 in the binary layout
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

ISO4217_STANDARD = "ISO4217"

# Offset added to the ISO 4217 numeric code to build the unique ID (978 -> 42170978)
ISO4217_UNIQUE_ID_OFFSET = 42170000

_NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9]")


class Currency(abc.ABC):
    """
    The capability set every currency implementation has to provide.

    Registries and values only ever talk to this interface, so custom currencies
    can be added by subclassing it. All positive unique IDs are reserved for the
    currencies that ship with this library, custom currencies should use negative
    IDs to stay clear of future built-ins.

    Example:
        class FooBar(Currency):
            name = "Bar"
            standard = "FOO"
            code = "BAR"
            unique_id = -1
            symbol = narrow_symbol = "B"
            decimal_places = 2

        FooBar().unique_code  # "FOO-BAR"

    Two currencies are equal when their unique codes are equal.
    """

    __slots__ = ()

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """English or native name of the currency."""

    @property
    @abc.abstractmethod
    def standard(self) -> str:
        """Alphanumeric name of the standard the currency is defined in."""

    @property
    @abc.abstractmethod
    def code(self) -> str:
        """Code of the currency, only unique inside its standard. E.g. "USD"."""

    @property
    @abc.abstractmethod
    def unique_id(self) -> int:
        """Library specific numeric ID, unique across all standards."""

    @property
    @abc.abstractmethod
    def symbol(self) -> str:
        """Display symbol, e.g. "US$". Not standardized and possibly ambiguous."""

    @property
    @abc.abstractmethod
    def narrow_symbol(self) -> str:
        """Narrow display symbol, e.g. "$". Needs context to be unambiguous."""

    @property
    @abc.abstractmethod
    def decimal_places(self) -> Optional[int]:
        """Digits of the minor unit, or None if there is no smallest unit."""

    @property
    def numeric_code(self) -> Optional[int]:
        """Numeric code inside the standard (978 for EUR), or None if there is none."""
        return None

    @property
    def unique_code(self) -> str:
        """Code that is unique across standards. E.g. "ISO4217-USD"."""
        return f"{self.standard}{UNIQUE_CODE_SEPARATOR}{self.code}"

    @property
    def smallest_unit(self) -> Value:
        """
        The minimum increment of the currency as a Value of this currency.

        Returns the zero value without currency when the currency can be divided
        infinitely.
        """
        from exact_money.money import Value

        decimal_places = self.decimal_places
        if decimal_places is None:
            return Value(Decimal(0))
        return Value(Decimal((0, (1,), -decimal_places)), self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Currency):
            return NotImplemented
        return self.unique_code == other.unique_code

    def __hash__(self) -> int:
        return hash(self.unique_code)

    def __str__(self) -> str:
        return self.unique_code

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.unique_code}>"


def _check_alphanumeric(field: str, value: Any) -> None:
    if not isinstance(value, str) or not value:
        raise InvalidCurrencyError(f"{field} must be a non empty string, got {value!r}")
    match = _NON_ALPHANUMERIC.search(value)
    if match:
        raise InvalidCurrencyError(
            f"{field} {value!r} contains illegal character(s) {match.group()!r}"
        )


def validate_currency(currency: Currency) -> None:
    """
    Check a currency against the invariants registries and codecs rely on.

    Raises:
        InvalidCurrencyError: On the first violated invariant.
    """
    if not isinstance(currency, Currency):
        raise InvalidCurrencyError(f"{currency!r} is not a Currency")

    standard, code, unique_code = currency.standard, currency.code, currency.unique_code
    _check_alphanumeric("standard", standard)
    _check_alphanumeric("code", code)

    expected = f"{standard}{UNIQUE_CODE_SEPARATOR}{code}"
    if unique_code != expected:
        raise InvalidCurrencyError(
            f"unique code {unique_code!r} is not of the form "
            f'"Standard{UNIQUE_CODE_SEPARATOR}Code". Expected {expected!r}'
        )

    unique_id = currency.unique_id
    if not isinstance(unique_id, int) or isinstance(unique_id, bool):
        raise InvalidCurrencyError(f"unique ID of {unique_code} must be an int, got {unique_id!r}")
    if unique_id == NO_CURRENCY_UNIQUE_ID:
        raise InvalidCurrencyError(
            f"unique ID of {unique_code} is {NO_CURRENCY_UNIQUE_ID}, which is reserved for no currency"
        )
    if not INT32_MIN <= unique_id <= INT32_MAX:
        raise InvalidCurrencyError(f"unique ID {unique_id} of {unique_code} doesn't fit into 32 bits")

    decimal_places = currency.decimal_places
    if decimal_places is not None and decimal_places < 0:
        raise InvalidCurrencyError(
            f"currency {unique_code} has a smallest unit, but {decimal_places} decimal places"
        )

    symbol, narrow_symbol = currency.symbol, currency.narrow_symbol
    if not symbol or not narrow_symbol:
        raise InvalidCurrencyError(
            f"symbol is {symbol!r} and narrow symbol is {narrow_symbol!r}. "
            "Both need to be non empty strings"
        )

    smallest_unit = currency.smallest_unit
    if smallest_unit.currency is None:
        if not smallest_unit.is_zero:
            raise InvalidCurrencyError(
                f"smallest unit {smallest_unit} of {unique_code} has no currency, but isn't zero"
            )
    elif smallest_unit.currency != currency:
        raise InvalidCurrencyError(
            f"smallest unit {smallest_unit} of {unique_code} references another currency"
        )
    if smallest_unit.is_negative:
        raise InvalidCurrencyError(f"smallest unit {smallest_unit} of {unique_code} is negative")


class ISO4217Currency(Currency):
    """A currency as defined by ISO 4217."""

    __slots__ = (
        "_alphabetic_code",
        "_numeric_code",
        "_name",
        "_decimal_places",
        "_symbol",
        "_narrow_symbol",
    )

    def __init__(
        self,
        alphabetic_code: str,
        numeric_code: int,
        name: str,
        decimal_places: Optional[int],
        symbol: str = "",
        narrow_symbol: str = "",
    ):
        self._alphabetic_code = alphabetic_code
        self._numeric_code = numeric_code
        self._name = name
        self._decimal_places = decimal_places
        self._symbol = symbol
        self._narrow_symbol = narrow_symbol

    @property
    def name(self) -> str:
        return self._name

    @property
    def standard(self) -> str:
        return ISO4217_STANDARD

    @property
    def code(self) -> str:
        return self._alphabetic_code

    @property
    def numeric_code(self) -> Optional[int]:
        return self._numeric_code

    @property
    def unique_id(self) -> int:
        return ISO4217_UNIQUE_ID_OFFSET + self._numeric_code

    @property
    def symbol(self) -> str:
        # Not every currency has a symbol, use the code instead
        return self._symbol or self._alphabetic_code

    @property
    def narrow_symbol(self) -> str:
        return self._narrow_symbol or self.symbol

    @property
    def decimal_places(self) -> Optional[int]:
        return self._decimal_places
