"""Registry of arithmetic operations exposed by the service."""
from collections.abc import Callable as ABCCallable
from enum import Enum
import math
import operator
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Union

from calculator_service.common.errors import DivisionByZero, NegativeRadicand, OperationNotFound


# Type aliases for operation functions (one or two floats in, one float out)
UnaryFn: ABCCallable[[float], float] = Callable[[float], float]
BinaryFn: ABCCallable[[float, float], float] = Callable[[float, float], float]


class Operation(str, Enum):
    """Closed set of operation names accepted in the request path."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    EXPONENT = "exponent"
    SQRT = "sqrt"
    MODULO = "modulo"
    ABS = "abs"
    REMAINDER = "remainder"


def divide(a: float, b: float) -> float:
    """
    Divide ``a`` by ``b``.

    :raises DivisionByZero: If ``b`` is zero
    """
    if b == 0:
        raise DivisionByZero()
    return a / b


def sqrt(a: float) -> float:
    """
    Non-negative square root of ``a``.

    :raises NegativeRadicand: If ``a`` is negative
    """
    if a < 0:
        raise NegativeRadicand()
    return math.sqrt(a)


def exponent(a: float, b: float) -> float:
    """
    Raise ``a`` to the power ``b``.

    Cases where ``math.pow`` raises follow IEEE 754 instead: overflow and
    zero to a negative power give an infinity, other domain failures
    (a negative base with a fractional exponent) give NaN.
    """
    odd_integer_power = b.is_integer() and b % 2 == 1
    try:
        return math.pow(a, b)
    except OverflowError:
        return -math.inf if a < 0 and odd_integer_power else math.inf
    except ValueError:
        if a == 0 and b < 0:
            # -0.0 keeps its sign for odd powers
            return math.copysign(math.inf, a) if odd_integer_power else math.inf
        return math.nan


def truncating_remainder(a: float, b: float) -> float:
    """
    IEEE 754 truncating remainder: the result takes the sign of ``a``.

    Python's ``%`` floors instead, so ``math.fmod`` is used. A zero divisor or
    an infinite dividend gives NaN.
    """
    try:
        return math.fmod(a, b)
    except ValueError:
        return math.nan


UNARY_OPERATIONS: frozenset = frozenset({Operation.SQRT, Operation.ABS})

# Read-only mapping of every operation to its implementation
OPERATIONS: Mapping[Operation, Union[UnaryFn, BinaryFn]] = MappingProxyType({
    Operation.ADD: operator.add,
    Operation.SUBTRACT: operator.sub,
    Operation.MULTIPLY: operator.mul,
    Operation.DIVIDE: divide,
    Operation.EXPONENT: exponent,
    Operation.SQRT: sqrt,
    Operation.MODULO: truncating_remainder,
    Operation.ABS: abs,
    Operation.REMAINDER: truncating_remainder,
})


def is_unary(name: str) -> bool:
    """
    Tell whether an operation name takes a single operand.

    Unknown names count as binary.

    :param str name: Raw operation name

    :return: True for ``sqrt`` and ``abs``
    :rtype: bool
    """
    return name in {op.value for op in UNARY_OPERATIONS}


def lookup(name: str) -> Operation:
    """
    Resolve a raw operation name to its registry key.

    :param str name: Operation name taken from the request path

    :return: Matching operation
    :rtype: Operation
    :raises OperationNotFound: If the name is not registered
    """
    try:
        return Operation(name)
    except ValueError as exc:
        raise OperationNotFound() from exc


def calculate(operation: Operation, num1: float, num2: Optional[float] = None) -> float:
    """
    Apply a registered operation to its operands.

    :param Operation operation: Operation to run
    :param float num1: First operand
    :param float num2: Second operand, ignored for unary operations

    :return: Result of the operation
    :rtype: float
    :raises DomainError: If the operands are outside the operation's domain
    """
    fn = OPERATIONS[operation]
    if operation in UNARY_OPERATIONS:
        return float(fn(num1))
    if num2 is None:
        raise TypeError(f"Operation {operation.value!r} requires two operands")
    return float(fn(num1, num2))
