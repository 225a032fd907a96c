"""
Encoding and decoding of monetary values.

Every codec preserves the amount exactly and the currency by its unique code
or unique ID. Decoding resolves the currency through a registry, the default
registry if none is given.

    JSON      {"Amount": "-12345.6789", "Currency": "ISO4217-EUR"}
    binary    >i unique ID, >i exponent, sign byte, big-endian coefficient
    text      "-12345.6789 ISO4217-EUR"
    database  the text form, in a variable-length string column
"""

from __future__ import annotations

import logging
import sqlite3
import struct
from decimal import Decimal
from typing import TYPE_CHECKING, Optional, Union

from pydantic_core import from_json, to_json

from exact_money.currency import INT32_MAX, INT32_MIN, NO_CURRENCY_UNIQUE_ID, Currency
from exact_money.error import CurrencyNotFoundError, MalformedValueError, MoneyError
from exact_money.money import Value

if TYPE_CHECKING:
    from exact_money.registry import CurrencyRegistry

logger = logging.getLogger(__name__)

# Unique ID of the currency, 0 for no currency
_ID_HEADER = struct.Struct(">i")
# Exponent and sign of the amount, followed by the coefficient bytes
_AMOUNT_HEADER = struct.Struct(">iB")

BytesLike = Union[bytes, bytearray, memoryview]


def _resolve_registry(registry: Optional[CurrencyRegistry]) -> CurrencyRegistry:
    if registry is None:
        from exact_money.registry import CURRENCIES

        return CURRENCIES
    return registry


def encode_json(value: Value) -> bytes:
    """
    Encode a value as JSON object.

    Example:
        >>> encode_json(Value.from_string("-12345.6789 ISO4217-EUR"))
        b'{"Amount":"-12345.6789","Currency":"ISO4217-EUR"}'
    """
    return to_json(value.serialize())


def decode_json(data: Union[str, BytesLike], registry: Optional[CurrencyRegistry] = None) -> Value:
    """
    Decode a value from its JSON object.

    Raises:
        MalformedValueError: If data isn't valid JSON of the expected shape.
        CurrencyNotFoundError: If the currency isn't in the registry.
    """
    if isinstance(data, memoryview):
        data = bytes(data)
    try:
        obj = from_json(data)
    except ValueError as e:
        raise MalformedValueError(f"Invalid JSON for a monetary value: {e}") from e
    return Value.deserialize(obj, registry)


def encode_binary(value: Value) -> bytes:
    """
    Encode a value into its binary layout.

    Raises:
        MoneyError: If the exponent of the amount doesn't fit into 32 bits.
    """
    currency = value.currency
    unique_id = currency.unique_id if currency is not None else NO_CURRENCY_UNIQUE_ID

    sign, digits, exponent = value.amount.as_tuple()
    if not INT32_MIN <= exponent <= INT32_MAX:
        raise MoneyError(
            f"Exponent {exponent} of the amount doesn't fit into the binary layout",
            MoneyError.EXPONENT_OUT_OF_RANGE,
        )
    coefficient = int(Decimal((0, digits, 0)))
    coefficient_bytes = coefficient.to_bytes((coefficient.bit_length() + 7) // 8, "big")

    return _ID_HEADER.pack(unique_id) + _AMOUNT_HEADER.pack(exponent, sign) + coefficient_bytes


def decode_binary(data: BytesLike, registry: Optional[CurrencyRegistry] = None) -> Value:
    """
    Decode a value from its binary layout.

    Raises:
        MalformedValueError: If data is truncated or has an invalid sign byte.
        CurrencyNotFoundError: If the unique ID isn't in the registry.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"Expected bytes, got {type(data)}")
    data = bytes(data)

    if len(data) < _ID_HEADER.size:
        raise MalformedValueError(
            f"binary data is too short: got {len(data)} bytes, need at least {_ID_HEADER.size}",
            MalformedValueError.TRUNCATED_BINARY,
        )
    (unique_id,) = _ID_HEADER.unpack_from(data, 0)

    currency: Optional[Currency] = None
    if unique_id != NO_CURRENCY_UNIQUE_ID:
        currency = _resolve_registry(registry).by_unique_id(unique_id)
        if currency is None:
            raise CurrencyNotFoundError.for_unique_id(unique_id)

    offset = _ID_HEADER.size
    if len(data) < offset + _AMOUNT_HEADER.size:
        raise MalformedValueError(
            f"binary data is too short: missing the amount after {offset} bytes",
            MalformedValueError.TRUNCATED_BINARY,
        )
    exponent, sign = _AMOUNT_HEADER.unpack_from(data, offset)
    if sign not in (0, 1):
        raise MalformedValueError(f"invalid sign byte {sign} in binary data")

    coefficient = int.from_bytes(data[offset + _AMOUNT_HEADER.size :], "big")
    digits = Decimal(coefficient).as_tuple().digits
    return Value(Decimal((sign, digits, exponent)), currency)


def encode_text(value: Value) -> str:
    return str(value)


def decode_text(text: Union[str, BytesLike], registry: Optional[CurrencyRegistry] = None) -> Value:
    """
    Decode a value from its text form, see Value.from_string.
    """
    if isinstance(text, (bytes, bytearray, memoryview)):
        try:
            text = bytes(text).decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedValueError(f"text of monetary value is not valid UTF-8: {e}") from e
    return Value.from_string(text, registry)


def to_db_value(value: Value) -> str:
    """Database column value, the text form of the value."""
    return encode_text(value)


def from_db_value(raw: object, registry: Optional[CurrencyRegistry] = None) -> Value:
    """
    Decode a value read from a database column.

    Args:
        raw: The column value as str or UTF-8 encoded bytes.
        registry: Registry used to look up the currency.

    Raises:
        MalformedValueError: If raw has another type or isn't in the text form.
        CurrencyNotFoundError: If the currency isn't in the registry.
    """
    if not isinstance(raw, (str, bytes, bytearray, memoryview)):
        raise MalformedValueError(f"Unsupported database type for monetary value: {type(raw)}")
    return decode_text(raw, registry)


def register_sqlite3(type_name: str = "MONEY", registry: Optional[CurrencyRegistry] = None) -> None:
    """
    Register adapter and converter, so Value can be stored in sqlite3 columns.

    Columns are only converted when the connection is opened with
    detect_types=sqlite3.PARSE_DECLTYPES and their declared type starts with
    type_name. Declare them as "MONEY TEXT": a bare "MONEY" column has numeric
    affinity, and SQLite would store amounts without currency as REAL.

    Example:
        register_sqlite3()
        conn = sqlite3.connect(":memory:", detect_types=sqlite3.PARSE_DECLTYPES)
        conn.execute("CREATE TABLE payments (amount MONEY TEXT)")
    """
    sqlite3.register_adapter(Value, to_db_value)
    sqlite3.register_converter(type_name, lambda raw: from_db_value(raw, registry))
    logger.debug("Registered sqlite3 adapter and converter for column type %r", type_name)
