"""
Currency registries.

A registry is the uniqueness enforcing container every decode path uses to turn
a unique code or unique ID back into a live Currency instance.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from exact_money.currency import ISO4217_STANDARD, Currency, validate_currency
from exact_money.error import CurrencyCollisionError
from exact_money.iso4217 import ISO4217_TABLE
from exact_money.rwlock import RWLock

logger = logging.getLogger(__name__)

DEFAULT_REGISTRY_NAME = "exact-money-currencies"


class CurrencyRegistry:
    """
    A thread-safe collection of currencies with lookup by unique ID, unique code
    and, for registries limited to a single standard, by plain code and numeric
    code.

    Adding the same instance twice is a no-op. Adding a different instance that
    shares the unique ID, the unique code or (single standard only) the code or
    numeric code with a registered currency fails and leaves the registry as it
    was.

    Args:
        name (str): Name of the registry, only used for messages.
        standard (str): If not empty, only currencies of this standard can be added
            and lookup by plain code and numeric code is enabled.
        *currency_lists (Iterable[Currency]): Currencies to add right away.

    Raises:
        InvalidCurrencyError: If one of the initial currencies is invalid.
        CurrencyCollisionError: If the initial currencies collide.

    Example:
        >>> registry = CurrencyRegistry("mine", "ISO4217", ISO4217_TABLE)
        >>> registry.by_code("EUR").unique_code
        'ISO4217-EUR'
        >>> registry.by_numeric_code(978).unique_code
        'ISO4217-EUR'
    """

    def __init__(self, name: str, standard: str = "", *currency_lists: Iterable[Currency]):
        self._name = name
        self._standard = standard
        self._lock = RWLock()

        self._all: List[Currency] = []
        self._by_unique_id: Dict[int, Currency] = {}
        self._by_unique_code: Dict[str, Currency] = {}
        # Codes and numeric codes are only unique inside a single standard
        self._by_code: Optional[Dict[str, Currency]] = {} if standard else None
        self._by_numeric_code: Optional[Dict[int, Currency]] = {} if standard else None

        for currencies in currency_lists:
            self.add(*currencies)

        logger.info("Created currency registry %r with %d currencies", name, len(self._all))

    @property
    def name(self) -> str:
        return self._name

    @property
    def standard(self) -> str:
        """The standard this registry is limited to, or "" for any standard."""
        return self._standard

    def all(self) -> List[Currency]:
        """All currencies in the order they were added."""
        with self._lock.read():
            return list(self._all)

    def by_unique_id(self, unique_id: int) -> Optional[Currency]:
        with self._lock.read():
            return self._by_unique_id.get(unique_id)

    def by_unique_code(self, unique_code: str) -> Optional[Currency]:
        with self._lock.read():
            return self._by_unique_code.get(unique_code)

    def by_code(self, code: str) -> Optional[Currency]:
        """
        Find a currency by its plain code (e.g. "EUR").

        Always returns None for registries that allow multiple standards, as
        codes can't be told apart there.
        """
        if self._by_code is None:
            return None
        with self._lock.read():
            return self._by_code.get(code)

    def by_numeric_code(self, numeric_code: int) -> Optional[Currency]:
        """
        Find a currency by its numeric code (e.g. 978).

        Like by_code, this always returns None for registries that allow
        multiple standards.
        """
        if self._by_numeric_code is None:
            return None
        with self._lock.read():
            return self._by_numeric_code.get(numeric_code)

    def add(self, *currencies: Currency) -> None:
        """
        Add one or more currencies.

        Every currency is added on its own: when one fails, the ones before it
        in the same call stay registered, and the failing one leaves no trace.

        Raises:
            InvalidCurrencyError: If a currency breaks the currency invariants.
            CurrencyCollisionError: If a currency has the wrong standard or
                collides with a different, already registered currency.
        """
        with self._lock.write():
            for currency in currencies:
                self._add(currency)

    def _add(self, currency: Currency) -> None:
        # Everything is checked before the first index is touched
        validate_currency(currency)
        standard, unique_id = currency.standard, currency.unique_id
        unique_code, code = currency.unique_code, currency.code
        numeric_code = currency.numeric_code

        if self._standard and standard != self._standard:
            raise CurrencyCollisionError(
                f"currency standard {standard!r} of {unique_code} is not allowed in registry "
                f"{self._name!r}, only {self._standard!r}",
                CurrencyCollisionError.STANDARD_NOT_ALLOWED,
            )

        existing = self._by_unique_id.get(unique_id)
        if existing is not None and existing is not currency:
            raise CurrencyCollisionError(
                f"currency {unique_code} has the same unique ID {unique_id} as the "
                f"already existing currency {existing.unique_code}",
                CurrencyCollisionError.UNIQUE_ID_COLLISION,
                existing,
            )

        existing = self._by_unique_code.get(unique_code)
        if existing is not None and existing is not currency:
            raise CurrencyCollisionError(
                f"currency with unique ID {unique_id} has the same unique code {unique_code!r} "
                f"as the already existing currency with unique ID {existing.unique_id}",
                CurrencyCollisionError.UNIQUE_CODE_COLLISION,
                existing,
            )

        if self._by_numeric_code is not None and numeric_code is not None:
            existing = self._by_numeric_code.get(numeric_code)
            if existing is not None and existing is not currency:
                raise CurrencyCollisionError(
                    f"currency {unique_code} has the same numeric code {numeric_code} as the "
                    f"already existing currency {existing.unique_code}",
                    CurrencyCollisionError.NUMERIC_CODE_COLLISION,
                    existing,
                )

        if self._by_code is not None:
            existing = self._by_code.get(code)
            if existing is not None and existing is not currency:
                raise CurrencyCollisionError(
                    f"currency {unique_code} has the same code {code!r} as the "
                    f"already existing currency {existing.unique_code}",
                    CurrencyCollisionError.CODE_COLLISION,
                    existing,
                )

        if self._by_unique_id.get(unique_id) is currency:
            # Already registered
            return

        self._all.append(currency)
        self._by_unique_id[unique_id] = currency
        self._by_unique_code[unique_code] = currency
        if self._by_numeric_code is not None and numeric_code is not None:
            self._by_numeric_code[numeric_code] = currency
        if self._by_code is not None:
            self._by_code[code] = currency
        logger.debug("Added currency %s to registry %r", unique_code, self._name)

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._all)

    def __contains__(self, currency: object) -> bool:
        if not isinstance(currency, Currency):
            return False
        with self._lock.read():
            return self._by_unique_id.get(currency.unique_id) is currency

    def __repr__(self) -> str:
        return f"<CurrencyRegistry {self._name!r} standard={self._standard!r}>"


# All ISO 4217 currencies, searchable by their code and numeric code
ISO4217_CURRENCIES = CurrencyRegistry(ISO4217_STANDARD, ISO4217_STANDARD, ISO4217_TABLE)

# The process wide registry used when parsing or decoding values.
# Add custom currencies with CURRENCIES.add(...).
CURRENCIES = CurrencyRegistry(DEFAULT_REGISTRY_NAME, "", ISO4217_TABLE)
