# CalculatorEngine.py
"""""
Input / state / evaluation engine of the scientific calculator.

The engine is driven by one command at a time (digit, operator, function,
equals, clear, ...) and exposes two strings after every command:

- display: the current operand, or the error marker
- trail:   the expression entered so far, or the error message

It knows nothing about Qt. UI.py forwards button presses through press()
and re-renders from the on_change callback, which makes the engine fully
usable headless (tests, scripting).

State
-----
- last_result:        float accumulator of the running binary computation
- mode:               Idle | AwaitingBinaryOp | PowerPending | BracketOpen
- new_input_expected: next digit starts a fresh operand
- error:              set after a failed command, cleared by the next one

Error Handling
--------------
Each public command is one failure boundary. The evaluation helpers in
MathEngine / ScientificEngine return a Result; _unwrap() stops the running
command on a failed Result, the boundary then shows the error and the next
command starts with a full reset.
"""""

import functools
from dataclasses import dataclass

from . import error as E
from . import config_manager as config_manager
from . import MathEngine as MathEngine
from . import ScientificEngine as ScientificEngine

# Debug toggle for command traces (config.json -> "debug")
debug = config_manager.load_setting_value("debug") == True

INITIAL_DISPLAY = "0"
ERROR_DISPLAY = "Error"
DIGITS = "0123456789"
BRACKETS = ("(", ")")
SIGN_LABELS = ("±", "+/-")


# -----------------------------
# Modes
# -----------------------------

@dataclass(frozen=True)
class Idle:
    """Nothing pending."""


@dataclass(frozen=True)
class AwaitingBinaryOp:
    """A binary operator waits for its right operand."""
    operator: str


@dataclass(frozen=True)
class BracketOpen:
    """A '(' was opened; resume is the mode underneath the bracket."""
    resume: object = Idle()


@dataclass(frozen=True)
class PowerPending:
    """x^y was pressed; the next '=' raises base to the display value."""
    base: float
    resume: object = Idle()


def pending_operator(mode):
    """Operator of the nearest AwaitingBinaryOp in the mode chain, or None."""
    if isinstance(mode, AwaitingBinaryOp):
        return mode.operator
    if isinstance(mode, (BracketOpen, PowerPending)):
        return pending_operator(mode.resume)
    return None


def with_operator(mode, operator):
    """Replace the pending operator, keeping bracket and power layers intact."""
    if isinstance(mode, PowerPending):
        return PowerPending(mode.base, with_operator(mode.resume, operator))
    if isinstance(mode, BracketOpen):
        return BracketOpen(with_operator(mode.resume, operator))
    return AwaitingBinaryOp(operator)


def is_bracket_open(mode):
    if isinstance(mode, BracketOpen):
        return True
    if isinstance(mode, PowerPending):
        return is_bracket_open(mode.resume)
    return False


def open_bracket(mode):
    # Power mode always stays the outermost layer
    if isinstance(mode, PowerPending):
        return PowerPending(mode.base, open_bracket(mode.resume))
    if isinstance(mode, BracketOpen):
        return mode
    return BracketOpen(mode)


def close_bracket(mode):
    if isinstance(mode, PowerPending):
        return PowerPending(mode.base, close_bracket(mode.resume))
    if isinstance(mode, BracketOpen):
        return mode.resume
    return mode


# -----------------------------
# Engine
# -----------------------------

def command(handler):
    """Failure boundary shared by every public command."""
    @functools.wraps(handler)
    def wrapper(self, *args):
        if self.error:
            self._reset()
        try:
            handler(self, *args)
        except E.MathError as e:
            self._show_error(e)
        self._trace(handler.__name__, args)
        self._notify()
    return wrapper


class Calculator:

    def __init__(self, on_change=None):
        self.on_change = on_change  # called with (display, trail) after every command
        self._reset()

    # --- State helpers ---
    def _reset(self):
        self.display = INITIAL_DISPLAY
        self.trail = ""
        self.last_result = 0.0
        self.mode = Idle()
        self.new_input_expected = False
        self.error = False

    def _show_error(self, error):
        self.display = ERROR_DISPLAY
        self.trail = error.message
        self.error = True
        if debug == True:
            print(f"Error {error.code}: {error.message} ({error.equation})")

    def _append_trail(self, text):
        self.trail += text

    def _trail_finished(self):
        return self.trail.endswith("=")

    def _current_value(self):
        return self._unwrap(MathEngine.parse_number(self.display))

    def _unwrap(self, result):
        if not result.ok:
            raise result.error
        return result.value

    def _show_value(self, value):
        self.display = MathEngine.format_number(value)

    def _notify(self):
        if self.on_change is not None:
            self.on_change(self.display, self.trail)

    def _trace(self, name, args):
        if debug == True:
            print(f"[{name}{args}] display={self.display!r} trail={self.trail!r} mode={self.mode}")

    # --- Queries ---
    @property
    def pending_operator(self):
        return pending_operator(self.mode)

    @property
    def bracket_open(self):
        return is_bracket_open(self.mode)

    @property
    def power_pending(self):
        return isinstance(self.mode, PowerPending)

    def snapshot(self):
        return self.display, self.trail

    # --- Input commands ---
    @command
    def digit(self, digit):
        digit = str(digit)
        if len(digit) != 1 or digit not in DIGITS:
            raise E.build(E.InvalidArgumentError, "3029", digit)

        if self.new_input_expected:
            if self._trail_finished():
                self.trail = ""
            self.display = digit
            self.new_input_expected = False
        elif self.display == INITIAL_DISPLAY:
            self.display = digit
        else:
            self.display += digit

    @command
    def decimal_point(self):
        if self.new_input_expected:
            if self._trail_finished():
                self.trail = ""
            self.display = "0."
            self.new_input_expected = False
        elif "." not in self.display:
            self.display += "."

    @command
    def sign_change(self):
        if self.display != INITIAL_DISPLAY:
            if self.display.startswith("-"):
                self.display = self.display[1:]
            else:
                self.display = "-" + self.display

    @command
    def enter_text(self, text):
        # Direct entry (paste) is not validated here; parsing fails later
        self.display = str(text).strip()
        self.new_input_expected = False

    # --- Operators ---
    @command
    def operator(self, operator):
        if operator in BRACKETS:
            self._bracket(operator)
            return
        if MathEngine.isOp(operator) == -1:
            raise E.build(E.InvalidArgumentError, "3004", operator)

        current_value = self._current_value()

        if self._trail_finished():
            self.trail = ""

        pending = self.pending_operator
        if pending is not None:
            self.last_result = self._unwrap(MathEngine.evaluate_binary(self.last_result, pending, current_value))
            self._show_value(self.last_result)
        else:
            self.last_result = current_value

        self.mode = with_operator(self.mode, operator)
        self._append_trail(f"{MathEngine.format_number(self.last_result)} {operator} ")
        self.new_input_expected = True

    def _bracket(self, bracket):
        # Brackets only decorate the trail, evaluation stays left to right
        if bracket == "(":
            self.mode = open_bracket(self.mode)
            self._append_trail("(")
        elif self.bracket_open:
            self._append_trail(self.display + ")")
            self.mode = close_bracket(self.mode)
        self.new_input_expected = True

    # --- Functions ---
    @command
    def function(self, name):
        if name == "x^y":
            self._start_power()
        elif name == "n!":
            self._factorial()
        else:
            self._math_function(ScientificEngine.canonical_name(name))

    def _math_function(self, name):
        value = self._current_value()
        self._show_value(self._unwrap(ScientificEngine.evaluate_function(name, value)))
        self._append_trail(f"{name}({MathEngine.format_number(value)})")
        self.new_input_expected = True

    def _start_power(self):
        base = self._current_value()
        resume = self.mode.resume if isinstance(self.mode, PowerPending) else self.mode
        self.mode = PowerPending(base, resume)
        self._append_trail(f"{MathEngine.format_number(base)}^")
        self.new_input_expected = True

    def _factorial(self):
        n = int(self._current_value())
        self._show_value(self._unwrap(MathEngine.factorial(n)))
        self._append_trail(f"{n}!")
        self.new_input_expected = True

    # --- Equals ---
    @command
    def equals(self):
        if isinstance(self.mode, PowerPending):
            self._complete_power()
        elif self.pending_operator is not None:
            self._complete_standard()
        elif self.bracket_open:
            self._append_trail(self.display + ")")
            self.mode = close_bracket(self.mode)
            self.new_input_expected = True

    def _complete_power(self):
        base = self.mode.base
        exponent = self._current_value()
        result = self._unwrap(MathEngine.power(base, exponent))
        base_text = f"{MathEngine.format_number(base)}^"
        # The "{base}^" prefix written at power start is replaced by the full "{base}^{exponent} ="
        if self.trail.endswith(base_text):
            self.trail = self.trail[:-len(base_text)]
        self._append_trail(f"{base_text}{MathEngine.format_number(exponent)} =")
        self._show_value(result)
        self.last_result = result
        self.mode = self.mode.resume
        self.new_input_expected = True

    def _complete_standard(self):
        # A closed bracket or function call already wrote the operand, unless a new one was typed since
        if self.new_input_expected and self.trail.endswith(")"):
            expression = self.trail
        else:
            expression = self.trail + self.display
        current_value = self._current_value()
        self.last_result = self._unwrap(MathEngine.evaluate_binary(self.last_result, self.pending_operator, current_value))
        self._show_value(self.last_result)
        self.trail = f"{expression} ="
        self.mode = Idle()
        self.new_input_expected = True

    # --- Clearing ---
    @command
    def clear_entry(self):
        self.display = INITIAL_DISPLAY
        self.new_input_expected = False

    @command
    def clear_all(self):
        self._reset()

    # --- Dispatch ---
    def press(self, label):
        """Route a button label from the UI shell to its command."""
        if label in DIGITS and len(label) == 1:
            self.digit(label)
        elif label == ".":
            self.decimal_point()
        elif label in SIGN_LABELS:
            self.sign_change()
        elif label in BRACKETS or MathEngine.isOp(label) != -1:
            self.operator(label)
        elif label == "=":
            self.equals()
        elif label == "CE":
            self.clear_entry()
        elif label == "C":
            self.clear_all()
        else:
            self.function(label)
