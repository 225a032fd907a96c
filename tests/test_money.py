# Standard library imports
import copy
import unittest
from decimal import Decimal

# Local application imports
from exact_money.currency import Currency
from exact_money.error import (
    CurrencyNotFoundError,
    DifferentCurrenciesError,
    MalformedValueError,
    MoneyError,
)
from exact_money.iso4217 import ISO4217_TABLE
from exact_money.money import Value, parse
from exact_money.registry import CURRENCIES, CurrencyRegistry

EUR = CURRENCIES.by_unique_code("ISO4217-EUR")
USD = CURRENCIES.by_unique_code("ISO4217-USD")


class FooBar(Currency):
    name = "Bar"
    standard = "FOO"
    code = "BAR"
    unique_id = -1
    symbol = "FB"
    narrow_symbol = "B"
    decimal_places = 2


def v(text):
    return Value.from_string(text)


class TestCreation(unittest.TestCase):
    def test_creation(self):
        m = Value(Decimal("10.00"), USD)
        self.assertEqual(str(m), "10.00 ISO4217-USD")
        self.assertEqual(m.amount, Decimal("10.00"))
        self.assertIs(m.currency, USD)

    def test_creation_with_different_types(self):
        self.assertEqual(str(Value(10, EUR)), "10 ISO4217-EUR")
        self.assertEqual(str(Value("10.50", EUR)), "10.50 ISO4217-EUR")
        self.assertEqual(str(Value.from_int(-3)), "-3")
        self.assertEqual(str(Value.from_decimal(Decimal("1.5"), EUR)), "1.5 ISO4217-EUR")
        self.assertEqual(str(Value()), "0")

    def test_creation_with_invalid_types(self):
        with self.assertRaises(TypeError):
            Value(1.5)
        with self.assertRaises(TypeError):
            Value(True)
        with self.assertRaises(TypeError):
            Value(1, "ISO4217-EUR")

    def test_non_finite_amounts(self):
        for amount in (Decimal("NaN"), Decimal("Infinity"), Decimal("-Infinity")):
            with self.subTest(amount=amount):
                with self.assertRaises(MalformedValueError):
                    Value(amount)
        for text in ("NaN", "inf", "-Infinity"):
            with self.subTest(text=text):
                with self.assertRaises(MalformedValueError):
                    Value(text)

    def test_from_float(self):
        self.assertEqual(Value.from_float(0.1).amount, Decimal("0.1"))
        self.assertEqual(Value.from_float(-2.5, EUR), v("-2.5 ISO4217-EUR"))
        with self.assertRaises(MalformedValueError):
            Value.from_float(float("nan"))

    def test_zero_creation(self):
        zero = Value.zero()
        self.assertEqual(str(zero), "0")
        self.assertTrue(zero.is_zero)
        zero = Value.zero(EUR)
        self.assertEqual(str(zero), "0 ISO4217-EUR")
        self.assertTrue(zero.is_zero)

    def test_instance_creation_with_child_class(self):
        class CustomValue(Value):
            pass

        m = CustomValue.from_string("1.00 ISO4217-USD")
        self.assertIsInstance(m, CustomValue)
        # Results of arithmetic keep the class of the left operand
        m3 = m + CustomValue.from_string("2.00 ISO4217-USD")
        self.assertIsInstance(m3, CustomValue)
        self.assertEqual(str(m3), "3.00 ISO4217-USD")
        self.assertIsInstance(-m, CustomValue)

    def test_immutable_copies(self):
        m = v("1.23 ISO4217-EUR")
        self.assertIs(copy.copy(m), m)
        self.assertIs(copy.deepcopy(m), m)


class TestParse(unittest.TestCase):
    def test_amount_only(self):
        self.assertEqual(parse("-10000.123"), (Decimal("-10000.123"), None))
        self.assertEqual(v("+1.5").amount, Decimal("1.5"))
        self.assertEqual(v(".5").amount, Decimal("0.5"))
        self.assertEqual(v("5.").amount, Decimal("5"))
        self.assertEqual(v("1e-3").amount, Decimal("0.001"))

    def test_with_currency(self):
        m = v("-10000.123 ISO4217-EUR")
        self.assertEqual(m.amount, Decimal("-10000.123"))
        self.assertIs(m.currency, EUR)

    def test_non_breaking_space(self):
        self.assertEqual(v("12.34\u00a0ISO4217-EUR"), v("12.34 ISO4217-EUR"))

    def test_plain_code_is_not_found(self):
        with self.assertRaises(CurrencyNotFoundError) as ctx:
            v("-10000.123 EUR")
        self.assertEqual(ctx.exception.unique_code, "EUR")

    def test_unknown_currency_in_registry(self):
        registry = CurrencyRegistry("test", "", ISO4217_TABLE)
        with self.assertRaises(CurrencyNotFoundError) as ctx:
            Value.from_string("-10000.123 FOO-BAR", registry)
        self.assertEqual(ctx.exception.error_key, CurrencyNotFoundError.UNIQUE_CODE_NOT_FOUND)

        foo_bar = FooBar()
        registry.add(foo_bar)
        m = Value.from_string("-10000.123 FOO-BAR", registry)
        self.assertIs(m.currency, foo_bar)
        self.assertEqual(str(m), "-10000.123 FOO-BAR")

    def test_too_many_separators(self):
        with self.assertRaises(MalformedValueError) as ctx:
            v("1 2 ISO4217-EUR")
        self.assertEqual(ctx.exception.error_key, MalformedValueError.TOO_MANY_SEPARATORS)
        with self.assertRaises(MalformedValueError):
            v("1  ISO4217-EUR")

    def test_malformed_amounts(self):
        for text in ("", "abc", "1,000.00", "1_000", " 1", "1\n", "\u0661", "1.2.3", "--1", "1e", "$10"):
            with self.subTest(text=text):
                with self.assertRaises(MalformedValueError):
                    v(text)

    def test_from_string_and_currency(self):
        self.assertEqual(
            Value.from_string_and_currency("-10000.123", EUR), Value(Decimal("-10000.123"), EUR)
        )
        self.assertIs(Value.from_string_and_currency("1 ISO4217-EUR", EUR).currency, EUR)
        self.assertIsNone(Value.from_string_and_currency("1", None).currency)

    def test_from_string_and_currency_mismatch(self):
        with self.assertRaises(DifferentCurrenciesError):
            Value.from_string_and_currency("-10000.123 ISO4217-EUR", None)
        with self.assertRaises(DifferentCurrenciesError):
            Value.from_string_and_currency("-10000.123 ISO4217-USD", EUR)
        with self.assertRaises(DifferentCurrenciesError):
            Value.from_string_and_currency("-10000.123 ISO4217-EUR", FooBar())
        with self.assertRaises(CurrencyNotFoundError):
            Value.from_string_and_currency("-10000.123 FOO-BAR", None)

    def test_from_string_and_unregistered_currency(self):
        foo_bar = FooBar()
        m = Value.from_string_and_currency("-10000.123 FOO-BAR", foo_bar)
        self.assertIs(m.currency, foo_bar)

    def test_string_round_trip(self):
        for text in ("0", "-0.00", "12.34 ISO4217-EUR", "-10000.123 ISO4217-USD", "1000000000000000000000.000000000000000001"):
            with self.subTest(text=text):
                self.assertEqual(str(v(text)), text)

    def test_exponent_is_rendered_positionally(self):
        self.assertEqual(str(v("1e3")), "1000")
        self.assertEqual(str(v("1.5E-3 ISO4217-EUR")), "0.0015 ISO4217-EUR")

    def test_repr(self):
        self.assertEqual(repr(v("1.00 ISO4217-EUR")), "Value('1.00 ISO4217-EUR')")


class TestArithmetic(unittest.TestCase):
    def test_add(self):
        self.assertEqual(v("12.34 ISO4217-EUR") + v("12.34 ISO4217-EUR"), v("24.68 ISO4217-EUR"))
        self.assertEqual(v("0.1") + v("0.2"), v("0.3"))
        self.assertEqual(str(v("1.10").add(v("2.205"))), "3.305")

    def test_add_is_exact(self):
        big = v("1e50 ISO4217-EUR")
        tiny = v("1e-50 ISO4217-EUR")
        expected = "1" + "0" * 50 + "." + "0" * 49 + "1" + " ISO4217-EUR"
        self.assertEqual(str(big + tiny), expected)
        self.assertEqual((big + tiny) - big, tiny)

    def test_sub(self):
        self.assertEqual(str(v("10.00 ISO4217-USD") - v("0.01 ISO4217-USD")), "9.99 ISO4217-USD")
        self.assertEqual(str(v("1").sub(v("3"))), "-2")

    def test_currency_mismatch_is_symmetric(self):
        eur, usd, none = v("1 ISO4217-EUR"), v("1 ISO4217-USD"), v("1")
        for a, b in ((eur, usd), (usd, eur), (eur, none), (none, eur)):
            with self.subTest(a=a, b=b):
                with self.assertRaises(DifferentCurrenciesError):
                    a + b
                with self.assertRaises(DifferentCurrenciesError):
                    a - b
                with self.assertRaises(DifferentCurrenciesError):
                    a < b
                with self.assertRaises(DifferentCurrenciesError):
                    a >= b
                with self.assertRaises(DifferentCurrenciesError):
                    a.equal(b)
                self.assertFalse(a == b)
                self.assertTrue(a != b)

    def test_mismatch_error_details(self):
        with self.assertRaises(DifferentCurrenciesError) as ctx:
            v("1 ISO4217-EUR") + v("1")
        self.assertIs(ctx.exception.c1, EUR)
        self.assertIsNone(ctx.exception.c2)
        self.assertEqual(ctx.exception.error_key, DifferentCurrenciesError.CURRENCY_MISMATCH)

    def test_add_non_value(self):
        with self.assertRaises(TypeError):
            v("1") + 1
        with self.assertRaises(TypeError):
            v("1").add(Decimal(1))

    def test_mul(self):
        self.assertEqual(str(v("2 ISO4217-EUR") * v("1.5")), "3.0 ISO4217-EUR")
        self.assertEqual(str(v("1.5") * v("2 ISO4217-EUR")), "3.0 ISO4217-EUR")
        self.assertEqual(str(v("1.5").mul(v("-2"))), "-3.0")

    def test_mul_by_number(self):
        self.assertEqual(str(v("2.50 ISO4217-EUR") * 3), "7.50 ISO4217-EUR")
        self.assertEqual(str(3 * v("2.50 ISO4217-EUR")), "7.50 ISO4217-EUR")
        self.assertEqual(str(v("2.50 ISO4217-EUR") * Decimal("0.5")), "1.250 ISO4217-EUR")
        with self.assertRaises(TypeError):
            v("2.50 ISO4217-EUR") * 1.5

    def test_mul_same_currency(self):
        with self.assertRaises(MoneyError) as ctx:
            v("0 ISO4217-EUR") * v("0 ISO4217-EUR")
        self.assertEqual(ctx.exception.error_key, MoneyError.CURRENCY_SQUARED)

    def test_mul_different_currencies(self):
        with self.assertRaises(DifferentCurrenciesError):
            v("2 ISO4217-EUR") * v("2 ISO4217-USD")

    def test_sum(self):
        self.assertEqual(
            Value.sum(v("12.34 ISO4217-EUR"), v("12.34 ISO4217-EUR")), v("24.68 ISO4217-EUR")
        )
        self.assertEqual(Value.sum(v("1")), v("1"))
        self.assertEqual(Value.sum(v("1"), v("2"), v("3.5")), v("6.5"))
        with self.assertRaises(DifferentCurrenciesError):
            Value.sum(v("12.34 ISO4217-EUR"), v("12.34"))
        with self.assertRaises(DifferentCurrenciesError):
            Value.sum(v("1 ISO4217-EUR"), v("1 ISO4217-EUR"), v("1 ISO4217-USD"))

    def test_abs_and_neg(self):
        m = v("-10.00 ISO4217-USD")
        self.assertEqual(str(abs(m)), "10.00 ISO4217-USD")
        self.assertTrue(abs(m).is_positive)
        self.assertTrue(m.is_negative)
        self.assertEqual(str(-m), "10.00 ISO4217-USD")
        self.assertIs(+m, m)

    def test_sign(self):
        self.assertEqual(v("-0.01").sign(), -1)
        self.assertEqual(v("0.00").sign(), 0)
        self.assertEqual(v("0.01 ISO4217-EUR").sign(), 1)
        self.assertTrue(v("-0").is_zero)
        self.assertFalse(v("-0").is_negative)


class TestComparison(unittest.TestCase):
    def test_ordering(self):
        a, b = v("1.00 ISO4217-EUR"), v("1.01 ISO4217-EUR")
        self.assertTrue(a < b)
        self.assertTrue(a <= b)
        self.assertTrue(b > a)
        self.assertTrue(b >= a)
        self.assertTrue(a.less_than(b))
        self.assertTrue(a.less_than_or_equal(a))
        self.assertTrue(b.greater_than(a))
        self.assertTrue(b.greater_than_or_equal(b))
        self.assertEqual(sorted([b, a]), [a, b])

    def test_equality(self):
        self.assertEqual(v("1.0 ISO4217-EUR"), v("1.00 ISO4217-EUR"))
        self.assertTrue(v("1.0").equal(v("1")))
        self.assertNotEqual(v("1 ISO4217-EUR"), v("2 ISO4217-EUR"))
        self.assertNotEqual(v("1"), "1")

    def test_equality_across_registries(self):
        registry = CurrencyRegistry("other", "", [type(EUR)("EUR", 978, "Euro", 2)])
        other = Value.from_string("1 ISO4217-EUR", registry)
        self.assertIsNot(other.currency, EUR)
        self.assertEqual(other, v("1 ISO4217-EUR"))
        self.assertEqual(other + v("1 ISO4217-EUR"), v("2 ISO4217-EUR"))

    def test_hash(self):
        self.assertEqual(len({v("1.0 ISO4217-EUR"), v("1 ISO4217-EUR"), v("1")}), 2)


class TestFloat(unittest.TestCase):
    def test_as_exact_float(self):
        self.assertEqual(v("0.01171875").as_exact_float(), (0.01171875, True))
        self.assertEqual(v("-123 ISO4217-EUR").as_exact_float(), (-123.0, True))
        value, exact = v("1.0000000000000002").as_exact_float()
        self.assertEqual(value, 1.0000000000000002)
        self.assertFalse(exact)

    def test_as_float(self):
        self.assertEqual(v("2.5").as_float(), 2.5)
        with self.assertWarns(RuntimeWarning):
            self.assertEqual(v("0.1").as_float(), 0.1)


if __name__ == "__main__":
    unittest.main()
