# tools/calculator.py

import math
import operator as op
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Annotated, Callable

from pydantic import Field

from greeting_mcp.tools.base import tool_boundary
from greeting_mcp.tools.types import ToolFailure, ToolOutcome

DESCRIPTION = "두 개의 숫자를 입력받아 연산자에 따라 사칙연산 결과를 반환합니다"

DIVISION_BY_ZERO_MESSAGE = "오류: 0으로 나눌 수 없습니다."


class Operator(str, Enum):
    """Supported arithmetic operators."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


@dataclass(frozen=True)
class Operation:
    """Localized name and implementation of an operator."""

    label: str
    apply: Callable[[float, float], float]


OPERATIONS = MappingProxyType({
    Operator.ADD: Operation("덧셈", op.add),
    Operator.SUBTRACT: Operation("뺄셈", op.sub),
    Operator.MULTIPLY: Operation("곱셈", op.mul),
    Operator.DIVIDE: Operation("나눗셈", op.truediv),
})

SUPPORTED_OPERATORS = [operator.value for operator in Operator]


def format_number(value: float) -> str:
    """
    Render a number the way JavaScript's Number#toString does.

    Uses the shortest round-trip digits. Magnitudes in [1e-6, 1e21) are
    written positionally ("0.00001", "100"); others in exponent form with
    an unpadded signed exponent ("1e-7", "1.5e+21"). Non-finite values
    are Infinity/-Infinity/NaN and both zeros are "0".
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(float(value)))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    # value == 0.<digits> * 10**point
    point = exponent + len(digits)

    if len(digits) <= point <= 21:
        body = digits + "0" * (point - len(digits))
    elif 0 < point <= 21:
        body = f"{digits[:point]}.{digits[point:]}"
    elif -6 < point <= 0:
        body = "0." + "0" * -point + digits
    else:
        mantissa = digits if len(digits) == 1 else f"{digits[0]}.{digits[1:]}"
        power = point - 1
        body = f"{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"
    return sign + body


@tool_boundary()
async def calculator(
    num1: Annotated[float, Field(description="첫 번째 숫자")],
    num2: Annotated[float, Field(description="두 번째 숫자")],
    operator: Annotated[
        Operator,
        Field(description="연산자 (+: 덧셈, -: 뺄셈, *: 곱셈, /: 나눗셈)"),
    ],
) -> ToolOutcome:
    """Apply a basic arithmetic operator to two numbers."""
    operator = Operator(operator)
    if operator is Operator.DIVIDE and num2 == 0:
        raise ToolFailure(DIVISION_BY_ZERO_MESSAGE)

    operation = OPERATIONS[operator]
    result = operation.apply(num1, num2)

    return ToolOutcome.ok(
        f"{operation.label} 결과: {format_number(num1)} {operator.value} "
        f"{format_number(num2)} = {format_number(result)}"
    )
