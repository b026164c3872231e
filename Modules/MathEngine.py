# MathEngine.py
"""""
Stateless arithmetic helpers used by the calculator engine.

Contents
--------
1) Result: value-or-error container returned by every evaluation helper.
2) Parsing / formatting: display text <-> float.
3) Binary evaluation: + - * / ^ on the accumulator and the current operand.
4) Factorial.

None of these helpers raise for calculation failures (division by zero,
invalid arguments, overflow, malformed numerals). The failure is returned
inside the Result and the caller decides what to do with it.
"""""

import math
import re

from . import error as E

# Supported binary operators (kept as a simple list for quick membership checks)
Operations = ["+", "-", "*", "/", "^"]

# Factorials above this overflow the float range
MAX_FACTORIAL = 170

# Invariant numeral: optional sign, digits with at most one '.', optional exponent
_NUMERAL = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


# -----------------------------
# Result container
# -----------------------------

class Result:
    """Outcome of an evaluation: either a float value or a MathError."""
    def __init__(self, value=None, error=None):
        self.value = value
        self.error = error

    @classmethod
    def success(cls, value):
        return cls(value=value)

    @classmethod
    def failure(cls, error):
        return cls(error=error)

    @property
    def ok(self):
        return self.error is None

    def __repr__(self):
        if self.ok:
            return f"Result({self.value!r})"
        return f"Result(error={self.error.code}: {self.error.message})"


def checked(value, equation=None):
    """Wrap a computed float, turning an infinite result into an overflow error."""
    if math.isinf(value):
        return Result.failure(E.build(E.NumberTooBigError, "3026", equation=equation))
    return Result.success(value)


# -----------------------------
# Parsing / formatting
# -----------------------------

def isOp(zahl):
    """Return index of a known binary operator or -1 if unknown."""
    try:
        return Operations.index(zahl)
    except ValueError:
        return -1


def parse_number(text):
    """Parse display text as a float.

    Only plain decimal numerals are accepted ('12', '-0.5', '3.', '1e+20');
    'inf', 'nan', empty strings and anything else fail with ParseFailure.
    """
    cleaned = str(text).strip()
    if not _NUMERAL.match(cleaned):
        return Result.failure(E.build(E.ParseFailureError, "3012", f"'{text}'", equation=text))
    return checked(float(cleaned), equation=text)


def format_number(value):
    """Render a float the way the display shows it.

    Integral values drop the fractional part ('5' instead of '5.0'),
    everything else uses the shortest round-trip representation.
    """
    if math.isfinite(value) and value == int(value) and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


# -----------------------------
# Evaluation
# -----------------------------

def evaluate_binary(left, operator, right):
    """Apply a pending binary operator: left <operator> right."""
    equation = f"{format_number(left)} {operator} {format_number(right)}"

    if operator == '+':
        return checked(left + right, equation)
    elif operator == '-':
        return checked(left - right, equation)
    elif operator == '*':
        return checked(left * right, equation)
    elif operator == '/':
        if right == 0:
            return Result.failure(E.build(E.DivideByZeroError, "3003", equation=equation))
        return checked(left / right, equation)
    elif operator == '^':
        return power(left, right)
    else:
        return Result.failure(E.build(E.InvalidArgumentError, "3004", operator, equation=equation))


def power(base, exponent):
    """General power function shared by the '^' operator and the x^y mode."""
    equation = f"{format_number(base)}^{format_number(exponent)}"
    try:
        return checked(math.pow(base, exponent), equation)
    except OverflowError:
        return Result.failure(E.build(E.NumberTooBigError, "3026", equation=equation))
    except ValueError:
        # 0 ^ negative, negative ^ fraction
        return Result.failure(E.build(E.InvalidArgumentError, "3030", equation, equation=equation))


def factorial(n):
    """Iterative factorial as float, valid for 0 <= n <= 170."""
    if n < 0:
        return Result.failure(E.build(E.InvalidArgumentError, "3027", equation=f"{n}!"))
    if n > MAX_FACTORIAL:
        return Result.failure(E.build(E.InvalidArgumentError, "3028", equation=f"{n}!"))

    ergebnis = 1.0
    for i in range(2, n + 1):
        ergebnis *= i
    return Result.success(ergebnis)
