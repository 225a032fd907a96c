from __future__ import annotations

# Standard library imports
import functools
import re
import warnings
from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, Decimal, Inexact, localcontext
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    List,
    Optional,
    Tuple,
    TypeVar,
    Union,
    cast,
)

# Library we need to support custom serializations
from pydantic_core import core_schema

# Local application imports
from exact_money.currency import INT32_MAX, INT32_MIN, Currency
from exact_money.error import (
    CurrencyNotFoundError,
    DifferentCurrenciesError,
    MalformedValueError,
    MoneyError,
    SplitError,
)

if TYPE_CHECKING:
    from exact_money.registry import CurrencyRegistry

# Separator between amount and unique code in the text representation
TEXT_SEPARATOR = " "

# Accepted as separator when parsing, some formatters emit it
NON_BREAKING_SPACE = "\u00a0"

# Field names of the JSON representation
JSON_AMOUNT_FIELD = "Amount"
JSON_CURRENCY_FIELD = "Currency"

# Plain decimal numbers with an optional exponent. No whitespace, underscores,
# NaN or infinity.
AMOUNT_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

AmountLike = Union[Decimal, int, str]

T = TypeVar("T", bound=Callable)


def decimal_context(fn: T) -> T:
    """
    A decorator that runs the decorated function in an exact decimal context.

    The local context has unbounded precision and exponent range, and traps
    Inexact. Additions, subtractions, multiplications and integer divisions
    never round, so the results are exact. Any operation that would have to round
    raises a MoneyError instead of silently losing digits.

    Example:
        @decimal_context
        def total(a: Decimal, b: Decimal) -> Decimal:
            return a + b

    Notes:
        - Only the decimal context of the decorated call is changed, calculations
          outside of it keep using the thread's current context.
        - The original function's metadata is preserved using functools.wraps.
    """

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        with localcontext() as ctx:
            ctx.prec = MAX_PREC
            ctx.Emax = MAX_EMAX
            ctx.Emin = MIN_EMIN
            ctx.traps[Inexact] = True
            try:
                return fn(*args, **kwargs)
            except Inexact as e:
                raise MoneyError(
                    f"Operation {fn.__name__} can't be represented exactly",
                    MoneyError.INEXACT_RESULT,
                ) from e

    return cast(T, wrapper)


def _default_registry() -> CurrencyRegistry:
    # Imported here, the registry validates its currencies with this module
    from exact_money.registry import CURRENCIES

    return CURRENCIES


def parse_amount(text: str) -> Decimal:
    """
    Parse a locale independent decimal string like "-10000.123" or "1e-3".

    Raises:
        MalformedValueError: If the string isn't a plain finite decimal number.
    """
    if not AMOUNT_PATTERN.fullmatch(text):
        raise MalformedValueError(f"Unable to parse {text!r} as a valid monetary amount")
    return Decimal(text)


def format_amount(amount: Decimal) -> str:
    """
    Render an amount in positional notation, without exponent.

    The output grows with the exponent: 1E+1000000 renders as a million digits.
    Use the binary codec or the Decimal itself where such amounts can occur.
    """
    return format(amount, "f")


def parse(
    text: str,
    registry: Optional[CurrencyRegistry] = None,
    expected_currency: Optional[Currency] = None,
) -> Tuple[Decimal, Optional[Currency]]:
    """
    Parse "Amount" or "Amount UniqueCode" into its amount and currency.

    The unique code is matched against expected_currency first, then looked up
    in the registry (the default registry if None). This parses the output of
    str(Value) without loss of information.

    Raises:
        MalformedValueError: On too many separators or a malformed amount.
        CurrencyNotFoundError: If the unique code can't be resolved.
    """
    text = text.replace(NON_BREAKING_SPACE, TEXT_SEPARATOR)

    parts = text.split(TEXT_SEPARATOR)
    if len(parts) == 1:
        return parse_amount(parts[0]), None
    if len(parts) != 2:
        raise MalformedValueError(
            f"input string {text!r} contains too many spaces",
            MalformedValueError.TOO_MANY_SEPARATORS,
        )

    amount_text, unique_code = parts
    amount = parse_amount(amount_text)

    currency: Optional[Currency] = None
    if expected_currency is not None and unique_code == expected_currency.unique_code:
        currency = expected_currency
    if currency is None:
        if registry is None:
            registry = _default_registry()
        currency = registry.by_unique_code(unique_code)
    if currency is None:
        raise CurrencyNotFoundError.for_unique_code(unique_code)

    return amount, currency


def same_currency(c1: Optional[Currency], c2: Optional[Currency]) -> bool:
    """Both None, or both currencies with the same unique code."""
    if c1 is None or c2 is None:
        return c1 is c2
    return c1 is c2 or c1.unique_code == c2.unique_code


class Value:
    """
    An immutable monetary value: an exact decimal amount and an optional currency.

    Values never round. Arithmetic between values checks that their currencies
    match, and every operation returns a new Value.

    The preferred ways to create values are `from_string` and `from_decimal`:

    Example:
        eur = ISO4217_CURRENCIES.by_code("EUR")
        a = Value.from_string("12.34 ISO4217-EUR")
        b = Value.from_decimal(Decimal("12.34"), eur)
        assert str(a + b) == "24.68 ISO4217-EUR"

    A value without currency is a plain number. It can be added to other values
    without currency, and used as a factor for values with currency.

    Currencies are compared by their unique codes, so values decoded through a
    different registry than the one that created them still compare equal.
    """

    __slots__ = ("_amount", "_currency")

    def __init__(self, amount: AmountLike = Decimal(0), currency: Optional[Currency] = None):
        if isinstance(amount, str):
            amount = parse_amount(amount)
        elif isinstance(amount, int) and not isinstance(amount, bool):
            amount = Decimal(amount)
        elif not isinstance(amount, Decimal):
            raise TypeError(f"Unsupported type for monetary amount: {type(amount)}")
        if not amount.is_finite():
            raise MalformedValueError(f"Monetary amount must be finite, got {amount}")
        if currency is not None and not isinstance(currency, Currency):
            raise TypeError(f"currency must be a Currency or None, got {type(currency)}")

        self._amount = amount
        self._currency = currency

    @property
    def amount(self) -> Decimal:
        return self._amount

    @property
    def currency(self) -> Optional[Currency]:
        return self._currency

    @classmethod
    def from_string(cls, text: str, registry: Optional[CurrencyRegistry] = None) -> Value:
        """
        Create a Value from its text representation.

        This doesn't use any locale specific formatting, and is not suited for
        input from humans without preprocessing.

        Examples:
            >>> Value.from_string("-10000.123")              # without currency
            >>> Value.from_string("-10000.123 ISO4217-EUR")  # with EUR
            >>> Value.from_string("-10000.123 EUR")          # CurrencyNotFoundError
            >>> Value.from_string("-10000.123 FOO-BAR")      # depends on the registry

        Raises:
            MalformedValueError: If the text doesn't follow "Amount[ UniqueCode]".
            CurrencyNotFoundError: If the unique code isn't in the registry.
        """
        amount, currency = parse(text, registry)
        return cls(amount, currency)

    @classmethod
    def from_string_and_currency(
        cls,
        text: str,
        currency: Optional[Currency],
        registry: Optional[CurrencyRegistry] = None,
    ) -> Value:
        """
        Create a Value from its text representation and an expected currency.

        A text without unique code gets the given currency. A text with unique code
        must name the given currency.

        Examples:
            >>> eur = ISO4217_CURRENCIES.by_code("EUR")
            >>> Value.from_string_and_currency("-10000.123", eur)              # EUR
            >>> Value.from_string_and_currency("-10000.123 ISO4217-EUR", eur)  # EUR
            >>> Value.from_string_and_currency("-10000.123 ISO4217-USD", eur)  # DifferentCurrenciesError
            >>> Value.from_string_and_currency("-10000.123 ISO4217-EUR", None) # DifferentCurrenciesError

        Raises:
            MalformedValueError: If the text doesn't follow "Amount[ UniqueCode]".
            CurrencyNotFoundError: If the unique code can't be resolved.
            DifferentCurrenciesError: If the text names another currency.
        """
        amount, parsed_currency = parse(text, registry, currency)
        if parsed_currency is None:
            parsed_currency = currency
        if not same_currency(parsed_currency, currency):
            raise DifferentCurrenciesError(parsed_currency, currency)
        return cls(amount, parsed_currency)

    @classmethod
    def from_decimal(cls, amount: Decimal, currency: Optional[Currency] = None) -> Value:
        return cls(amount, currency)

    @classmethod
    def from_int(cls, amount: int, currency: Optional[Currency] = None) -> Value:
        return cls(Decimal(amount), currency)

    @classmethod
    def from_float(cls, amount: float, currency: Optional[Currency] = None) -> Value:
        """
        Create a Value from a float, using its shortest round-trip representation.

        Example:
            >>> Value.from_float(0.1).amount
            Decimal('0.1')
        """
        return cls(Decimal(repr(float(amount))), currency)

    @classmethod
    def zero(cls, currency: Optional[Currency] = None) -> Value:
        return cls(Decimal(0), currency)

    def _check_same_currency(self, other: Value) -> None:
        if not same_currency(self._currency, other._currency):
            raise DifferentCurrenciesError(self._currency, other._currency)

    @staticmethod
    def _check_value(other: Any) -> None:
        if not isinstance(other, Value):
            raise TypeError(f"Expected a Value, got {type(other)}")

    @decimal_context
    def add(self, other: Value) -> Value:
        """
        Add two values of the same currency.

        Raises:
            DifferentCurrenciesError: If the currencies differ. A value without
                currency can only be added to another value without currency.
        """
        self._check_value(other)
        self._check_same_currency(other)
        return self.__class__(self._amount + other._amount, self._currency)

    @decimal_context
    def sub(self, other: Value) -> Value:
        """
        Subtract a value of the same currency.

        Raises:
            DifferentCurrenciesError: If the currencies differ.
        """
        self._check_value(other)
        self._check_same_currency(other)
        return self.__class__(self._amount - other._amount, self._currency)

    @decimal_context
    def mul(self, other: Value) -> Value:
        """
        Multiply two values, at most one of them may have a currency.

        The result has the currency of whichever side has one.

        Example:
            >>> Value.from_string("2 ISO4217-EUR").mul(Value.from_string("1.5"))
            Value('3.0 ISO4217-EUR')

        Raises:
            MoneyError: If both values have the same currency.
            DifferentCurrenciesError: If both values have different currencies.
        """
        self._check_value(other)
        if self._currency is not None and other._currency is not None:
            if same_currency(self._currency, other._currency):
                raise MoneyError(
                    f"Can't multiply two values of currency {self._currency.unique_code}",
                    MoneyError.CURRENCY_SQUARED,
                )
            raise DifferentCurrenciesError(self._currency, other._currency)

        currency = self._currency if self._currency is not None else other._currency
        return self.__class__(self._amount * other._amount, currency)

    @classmethod
    @decimal_context
    def sum(cls, first: Value, *values: Value) -> Value:
        """
        Sum up values of the same currency.

        Examples:
            >>> Value.sum(Value.from_string("12.34 ISO4217-EUR"), Value.from_string("12.34 ISO4217-EUR"))
            Value('24.68 ISO4217-EUR')
            >>> Value.sum(Value.from_string("12.34 ISO4217-EUR"), Value.from_string("12.34"))
            DifferentCurrenciesError

        Raises:
            DifferentCurrenciesError: If any currency differs from the first one.
        """
        cls._check_value(first)
        total = first._amount
        for value in values:
            cls._check_value(value)
            first._check_same_currency(value)
            total += value._amount
        return cls(total, first._currency)

    @property
    def is_negative(self) -> bool:
        return self._amount < 0

    @property
    def is_positive(self) -> bool:
        return self._amount > 0

    @property
    def is_zero(self) -> bool:
        return self._amount == 0

    def sign(self) -> int:
        """-1, 0 or 1 depending on the sign of the amount."""
        return int(self._amount > 0) - int(self._amount < 0)

    @decimal_context
    def __abs__(self) -> Value:
        return self.__class__(abs(self._amount), self._currency)

    @decimal_context
    def __neg__(self) -> Value:
        return self.__class__(-self._amount, self._currency)

    def __pos__(self) -> Value:
        return self

    def __add__(self, other: object) -> Value:
        if not isinstance(other, Value):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Value:
        if not isinstance(other, Value):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: object) -> Value:
        if isinstance(other, Value):
            return self.mul(other)
        if isinstance(other, Decimal) or (isinstance(other, int) and not isinstance(other, bool)):
            return self.mul(Value(other))
        return NotImplemented

    def __rmul__(self, other: object) -> Value:
        return self.__mul__(other)

    def equal(self, other: Value) -> bool:
        """
        Check if two values are equal.

        Raises:
            DifferentCurrenciesError: If the currencies differ, use == to get
                False instead.
        """
        self._check_value(other)
        self._check_same_currency(other)
        return self._amount == other._amount

    def greater_than(self, other: Value) -> bool:
        """
        Raises:
            DifferentCurrenciesError: If the currencies differ.
        """
        self._check_value(other)
        self._check_same_currency(other)
        return self._amount > other._amount

    def greater_than_or_equal(self, other: Value) -> bool:
        self._check_value(other)
        self._check_same_currency(other)
        return self._amount >= other._amount

    def less_than(self, other: Value) -> bool:
        """
        Raises:
            DifferentCurrenciesError: If the currencies differ.
        """
        self._check_value(other)
        self._check_same_currency(other)
        return self._amount < other._amount

    def less_than_or_equal(self, other: Value) -> bool:
        self._check_value(other)
        self._check_same_currency(other)
        return self._amount <= other._amount

    def __eq__(self, other: object) -> bool:
        """
        Check if two values are equal.

        Returns False for values of different currencies.
        """
        if not isinstance(other, Value):
            return NotImplemented
        return same_currency(self._currency, other._currency) and self._amount == other._amount

    def __hash__(self) -> int:
        unique_code = self._currency.unique_code if self._currency is not None else None
        return hash((self._amount, unique_code))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self.less_than(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self.less_than_or_equal(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self.greater_than(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self.greater_than_or_equal(other)

    @decimal_context
    def split_with_smallest_unit(self, n: int, smallest_unit: Value) -> List[Value]:
        """
        Split the value into n parts that are multiples of smallest_unit.

        The parts differ by at most one smallest unit, and the larger parts come
        first. The sum of all parts is exactly the original value.

        Args:
            n (int): Number of parts, must be positive.
            smallest_unit (Value): Granularity of the parts. Must be positive and
                have the same currency as this value.

        Returns:
            List[Value]: Exactly n values.

        Raises:
            SplitError: If n or smallest_unit are not positive, or if the value
                isn't a multiple of smallest_unit.
            DifferentCurrenciesError: If smallest_unit has another currency.

        Example:
            >>> Value.from_string("-11.11 ISO4217-EUR").split_with_smallest_unit(
            ...     3, Value.from_string("0.01 ISO4217-EUR"))
            [Value('-3.71 ISO4217-EUR'), Value('-3.70 ISO4217-EUR'), Value('-3.70 ISO4217-EUR')]
        """
        if not isinstance(n, int) or isinstance(n, bool) or n <= 0:
            raise SplitError(f"Can't split into {n!r} parts", SplitError.INVALID_PART_COUNT)
        self._check_value(smallest_unit)
        # Messages show the raw Decimal, the positional form can be millions of digits long
        if not smallest_unit.is_positive:
            raise SplitError(
                f"Smallest unit must be positive, got {smallest_unit._amount}",
                SplitError.INVALID_SMALLEST_UNIT,
            )
        self._check_same_currency(smallest_unit)

        step = smallest_unit._amount
        units, remainder = divmod(self._amount, step)
        if remainder != 0:
            raise SplitError(
                f"{self._amount} is not a multiple of the smallest unit {step}",
                SplitError.NOT_A_MULTIPLE,
            )

        # units = n * k + r with 0 <= r < n, the first r parts get one more unit.
        # The unit count stays a Decimal, it can have millions of digits.
        k, r = divmod(abs(units), Decimal(n))
        r = int(r)

        larger_amount = (k + 1) * step
        smaller_amount = k * step
        if units < 0:
            larger_amount = -larger_amount
            # Parts without units stay positive zero
            if smaller_amount:
                smaller_amount = -smaller_amount

        larger = self.__class__(larger_amount, self._currency)
        smaller = self.__class__(smaller_amount, self._currency)
        return [larger] * r + [smaller] * (n - r)

    def split_with_decimals(self, n: int, decimal_places: int) -> List[Value]:
        """
        Split the value into n parts with the given number of decimal places.

        Example:
            >>> Value.from_string("1").split_with_decimals(3, 2)
            [Value('0.34'), Value('0.33'), Value('0.33')]

        Raises:
            SplitError: If decimal_places is out of range, or see
                split_with_smallest_unit.
        """
        if not isinstance(decimal_places, int) or isinstance(decimal_places, bool):
            raise TypeError(f"decimal_places must be an int, got {type(decimal_places)}")
        if not INT32_MIN <= -decimal_places <= INT32_MAX:
            raise SplitError(
                f"decimal_places {decimal_places} is out of range",
                SplitError.DECIMAL_PLACES_OUT_OF_RANGE,
            )
        smallest_unit = self.__class__(Decimal((0, (1,), -decimal_places)), self._currency)
        return self.split_with_smallest_unit(n, smallest_unit)

    def split(self, n: int) -> List[Value]:
        """
        Split the value into n parts of the smallest unit of its currency.

        Values without currency, or with a currency that has no smallest unit,
        can't be split this way. Use split_with_decimals for them.

        Example:
            >>> Value.from_string("-11.11 ISO4217-EUR").split(3)
            [Value('-3.71 ISO4217-EUR'), Value('-3.70 ISO4217-EUR'), Value('-3.70 ISO4217-EUR')]
        """
        if self._currency is None:
            smallest_unit = Value.zero()
        else:
            smallest_unit = self._currency.smallest_unit
        return self.split_with_smallest_unit(n, smallest_unit)

    def as_exact_float(self) -> Tuple[float, bool]:
        """
        Return the nearest float, and whether it represents the amount exactly.
        """
        value = float(self._amount)
        return value, Decimal(value) == self._amount

    def as_float(self) -> float:
        """
        Convert to float, with a warning for potential precision loss.
        """
        value, exact = self.as_exact_float()
        if not exact:
            warnings.warn(
                "Converting to float may result in loss of precision", RuntimeWarning
            )
        return value

    def __str__(self) -> str:
        """
        The locale independent "Amount UniqueCode" form, or "Amount" without currency.
        """
        if self._currency is not None:
            return f"{format_amount(self._amount)}{TEXT_SEPARATOR}{self._currency.unique_code}"
        return format_amount(self._amount)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str(self)!r})"

    def __copy__(self) -> Value:
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> Value:
        return self

    def __reduce__(self) -> Tuple[Callable[..., Value], Tuple[bytes]]:
        # Pickles through the binary representation, the currency is resolved
        # through the default registry when loading.
        from exact_money.codec import decode_binary, encode_binary

        return decode_binary, (encode_binary(self),)

    def serialize(self) -> Dict[str, str]:
        """
        Convert the Value to its JSON object representation.

        Example:
            >>> Value.from_string("-12345.6789 ISO4217-EUR").serialize()
            {'Amount': '-12345.6789', 'Currency': 'ISO4217-EUR'}
        """
        data = {JSON_AMOUNT_FIELD: format_amount(self._amount)}
        if self._currency is not None:
            data[JSON_CURRENCY_FIELD] = self._currency.unique_code
        return data

    @classmethod
    def deserialize(
        cls, data: Dict[str, Any], registry: Optional[CurrencyRegistry] = None
    ) -> Value:
        """
        Create a Value from its JSON object representation.

        A missing or empty currency field means no currency. The amount may be a
        decimal string or an integer.

        Raises:
            MalformedValueError: If the data doesn't have the expected shape.
            CurrencyNotFoundError: If the currency isn't in the registry.
        """
        if not isinstance(data, dict):
            raise MalformedValueError(f"Expected a JSON object, got {type(data)}")

        amount = data.get(JSON_AMOUNT_FIELD)
        if isinstance(amount, str):
            amount = parse_amount(amount)
        elif isinstance(amount, int) and not isinstance(amount, bool):
            amount = Decimal(amount)
        else:
            raise MalformedValueError(
                f"Field {JSON_AMOUNT_FIELD!r} must be a decimal string or an integer, got {amount!r}"
            )

        unique_code = data.get(JSON_CURRENCY_FIELD)
        currency: Optional[Currency] = None
        if unique_code is not None and unique_code != "":
            if not isinstance(unique_code, str):
                raise MalformedValueError(
                    f"Field {JSON_CURRENCY_FIELD!r} must be a string, got {unique_code!r}"
                )
            if registry is None:
                registry = _default_registry()
            currency = registry.by_unique_code(unique_code)
            if currency is None:
                raise CurrencyNotFoundError.for_unique_code(unique_code)

        return cls(amount, currency)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: Any
    ) -> core_schema.CoreSchema:
        """
        Support Value as a field type of pydantic models.
        https://docs.pydantic.dev/latest/concepts/types/#customizing-validation-with-__get_pydantic_core_schema__
        """
        return core_schema.with_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls.serialize
            ),
        )

    @classmethod
    def _validate(cls, value: Any, context: Any) -> Value:
        """
        Validator for pydantic models.

        Accepts Value instances, the text representation and the JSON object
        representation. Money errors are re-raised as ValueError, so pydantic
        reports them as validation errors.
        """
        if isinstance(value, Value):
            return value
        try:
            if isinstance(value, str):
                return cls.from_string(value)
            if isinstance(value, dict):
                return cls.deserialize(value)
        except MoneyError as e:
            raise ValueError(e.message) from e

        raise ValueError(f"Invalid value type: {type(value)}")
