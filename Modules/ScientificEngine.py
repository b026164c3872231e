# ScientificEngine
import math

from . import error as E
from .MathEngine import Result, checked, format_number


# Button labels the shell may send instead of the canonical names
ALIASES = {
    "tan": "tg",
    "√": "2√x",
    "pi": "π",
}


def canonical_name(name):
    return ALIASES.get(name, name)


def degrees_function(function, value):
    """Trigonometric functions take their argument in degrees."""
    return function(math.radians(value))


def reciprocal(value):
    if value == 0:
        return Result.failure(E.build(E.DivideByZeroError, "3003", equation=f"1/{format_number(value)}"))
    return checked(1 / value)


FUNCTIONS = {
    "sin": lambda x: degrees_function(math.sin, x),
    "cos": lambda x: degrees_function(math.cos, x),
    "tg": lambda x: degrees_function(math.tan, x),
    "x^2": lambda x: math.pow(x, 2),
    "1/x": reciprocal,
    "|x|": abs,
    "2√x": math.sqrt,
    "π": lambda x: math.pi,
    "e": lambda x: math.e,
    "10^x": lambda x: math.pow(10, x),
    "log": math.log10,
    "ln": math.log,
}


def evaluate_function(name, value):
    """Evaluate a unary function of the display value.

    Unknown names return the value unchanged. Domain errors (ln(0), 2√x of a
    negative number, ...) come back as InvalidArgument, results outside the
    float range as NumberTooBig.
    """
    name = canonical_name(name)
    function = FUNCTIONS.get(name)
    if function is None:
        return Result.success(value)

    equation = f"{name}({format_number(value)})"
    try:
        ergebnis = function(value)
    except OverflowError:
        return Result.failure(E.build(E.NumberTooBigError, "3026", equation=equation))
    except ValueError:
        return Result.failure(E.build(E.InvalidArgumentError, "2001", name, equation=equation))

    if isinstance(ergebnis, Result):
        return ergebnis
    return checked(ergebnis, equation)
