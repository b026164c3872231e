# error.py
"""""
Error kinds raised (or returned) by the calculator engine.

Every error carries a four digit code that indexes ERROR_MESSAGES.
The engine writes the message into the expression trail when a command fails.
"""""


class MathError(Exception):
    def __init__(self, message, code="9999", equation=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.equation = equation


class DivideByZeroError(MathError):
    pass

class InvalidArgumentError(MathError):
    pass

class ParseFailureError(MathError):
    pass

class NumberTooBigError(MathError):
    pass



#Error Messages are structured in:
# 1. Digit: Main Error
# 2. Digit: Specification
# 3. and 4. Digit: Error Number



ERROR_MESSAGES = {
    "2001" : "Math domain error in ",  # + function name

    "3003" : "Division by zero",
    "3004" : "Invalid operator: ",  # + operator
    "3012" : "Invalid number: ",  # + display text
    "3026" : "Number too big.",
    "3027" : "Factorial of negative number is undefined",
    "3028" : "Value too large for factorial calculation",
    "3029" : "Invalid digit: ",  # + digit
    "3030" : "Invalid input for power: ",  # + base^exponent

    "9999" : "Unexpected Error: "  # + error
}


def build(kind, code, detail="", equation=None):
    """Create an error of the given kind with its message taken from ERROR_MESSAGES."""
    message = ERROR_MESSAGES.get(code, ERROR_MESSAGES["9999"]) + str(detail)
    return kind(message, code=code, equation=equation)
