"""Arithmetic for calculation intents."""

import math
import operator
from collections.abc import Callable
from dataclasses import dataclass

DIVISION_BY_ZERO = "undefined (division by zero)"


def _divide(a: float, b: float) -> float | str:
    if b == 0:
        return DIVISION_BY_ZERO
    return a / b


@dataclass(frozen=True)
class Operation:
    name: str
    symbol: str
    apply: Callable[[float, float], float | str]


OPERATIONS: dict[str, Operation] = {
    "addition": Operation("addition", "+", operator.add),
    "subtraction": Operation("subtraction", "-", operator.sub),
    "multiplication": Operation("multiplication", "*", operator.mul),
    "division": Operation("division", "/", _divide),
}


def format_number(value: float | str) -> str:
    """Render a number the way the chat client displays it.

    Integral values drop the trailing ".0", non-finite values read
    "Infinity"/"NaN", and exponents carry no zero padding.
    """
    if isinstance(value, str):
        return value
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if float(value).is_integer() and abs(value) < 1e21:
        return str(int(value))

    text = repr(float(value))
    mantissa, sep, exponent = text.partition("e")
    if not sep:
        return text
    power = int(exponent)
    if -7 < power < 0:
        # Small magnitudes down to 1e-6 stay positional
        fraction = mantissa.partition(".")[2]
        return f"{value:.{len(fraction) - power}f}"
    return f"{mantissa}e{power:+d}"
