"""Exceptions raised while serving arithmetic requests."""
from typing import Optional


INVALID_INPUT_MSG = (
    "Invalid input: Both num1 and num2 must be valid numbers, "
    "except for sqrt and abs operations which require only num1."
)
OPERATION_NOT_FOUND_MSG = (
    "Operation not found. Use add, subtract, multiply, divide, exponent, "
    "sqrt, modulo, abs, or remainder."
)
DIVISION_BY_ZERO_MSG = "Cannot divide by zero."
NEGATIVE_RADICAND_MSG = "Cannot find the square root of a negative number."
UNEXPECTED_ERROR_MSG = "An unexpected error occurred."


class CalculatorError(Exception):
    """
    Base class of every error the service reports to its callers.

    Each subclass fixes the HTTP status it maps to and a default message
    that is safe to send back to the client.
    """

    status_code: int = 500
    default_message: str = UNEXPECTED_ERROR_MSG

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(CalculatorError, ValueError):
    """Query parameters could not be coerced to numbers."""

    status_code = 400
    default_message = INVALID_INPUT_MSG


class OperationNotFound(CalculatorError, LookupError):
    """Requested operation is not in the registry."""

    status_code = 404
    default_message = OPERATION_NOT_FOUND_MSG


class DomainError(CalculatorError, ArithmeticError):
    """Operands fall outside the domain of the requested operation."""

    status_code = 400


class DivisionByZero(DomainError):
    default_message = DIVISION_BY_ZERO_MSG


class NegativeRadicand(DomainError):
    default_message = NEGATIVE_RADICAND_MSG


class UnexpectedError(CalculatorError):
    """Wraps any failure that is not part of the error taxonomy."""

    status_code = 500
    default_message = UNEXPECTED_ERROR_MSG
