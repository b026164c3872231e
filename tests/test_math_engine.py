import math

import pytest

from Modules import MathEngine
from Modules import error as E


# --- Parsing ---

@pytest.mark.parametrize("text, value", [
    ("12", 12.0),
    ("-0.5", -0.5),
    ("3.", 3.0),
    (".25", 0.25),
    ("1e+20", 1e20),
    (" 7 ", 7.0),
])
def test_parse_number(text, value):
    result = MathEngine.parse_number(text)
    assert result.ok
    assert result.value == value


@pytest.mark.parametrize("text", ["", "-", "abc", "1.2.3", "inf", "nan", "1,5", "Error"])
def test_parse_number_rejects_malformed_text(text):
    result = MathEngine.parse_number(text)
    assert not result.ok
    assert isinstance(result.error, E.ParseFailureError)
    assert result.error.code == "3012"


# --- Formatting ---

@pytest.mark.parametrize("value, text", [
    (5.0, "5"),
    (-3.0, "-3"),
    (-0.0, "0"),
    (0.5, "0.5"),
    (0.1 + 0.2, "0.30000000000000004"),
    (1e20, "1e+20"),
    (1e-7, "1e-07"),
])
def test_format_number(value, text):
    assert MathEngine.format_number(value) == text


# --- Binary evaluation ---

@pytest.mark.parametrize("left, operator, right, expected", [
    (2.0, "+", 3.0, 5.0),
    (2.0, "-", 3.0, -1.0),
    (2.0, "*", 3.0, 6.0),
    (3.0, "/", 2.0, 1.5),
    (2.0, "^", 10.0, 1024.0),
])
def test_evaluate_binary(left, operator, right, expected):
    result = MathEngine.evaluate_binary(left, operator, right)
    assert result.ok
    assert result.value == expected


def test_divide_by_zero():
    result = MathEngine.evaluate_binary(1.0, "/", 0.0)
    assert isinstance(result.error, E.DivideByZeroError)
    assert result.error.message == "Division by zero"
    assert result.error.equation == "1 / 0"


def test_unknown_operator():
    result = MathEngine.evaluate_binary(1.0, "%", 2.0)
    assert isinstance(result.error, E.InvalidArgumentError)
    assert result.error.code == "3004"


def test_multiplication_overflow():
    result = MathEngine.evaluate_binary(1e308, "*", 10.0)
    assert isinstance(result.error, E.NumberTooBigError)


@pytest.mark.parametrize("base, exponent, kind", [
    (0.0, -1.0, E.InvalidArgumentError),
    (-8.0, 1 / 3, E.InvalidArgumentError),
    (10.0, 400.0, E.NumberTooBigError),
])
def test_power_failures(base, exponent, kind):
    result = MathEngine.power(base, exponent)
    assert isinstance(result.error, kind)


# --- Factorial ---

@pytest.mark.parametrize("n, expected", [(0, 1.0), (1, 1.0), (5, 120.0), (10, 3628800.0)])
def test_factorial(n, expected):
    assert MathEngine.factorial(n).value == expected


def test_factorial_limits():
    assert MathEngine.factorial(170).value == pytest.approx(float(math.factorial(170)))
    assert MathEngine.factorial(-1).error.code == "3027"
    assert MathEngine.factorial(171).error.code == "3028"


def test_result_repr():
    assert repr(MathEngine.Result.success(2.0)) == "Result(2.0)"
    assert "3003" in repr(MathEngine.evaluate_binary(1.0, "/", 0.0))
