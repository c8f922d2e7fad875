"""Test class InputValidator."""
import logging

import pytest

from calculator_service.common.errors import InvalidInput
from calculator_service.server.validator import InputValidator


@pytest.fixture
def validator() -> InputValidator:
    """Validator logging to a dedicated test logger."""
    return InputValidator(logger=logging.getLogger("calculator_service.tests.validator"))


def test_valid_binary_params(validator: InputValidator) -> None:
    """Both operands are converted for binary operations."""
    req = validator.validate_params("add", {"num1": "1.5", "num2": "-2"})
    assert req.operation == "add"
    assert (req.num1, req.num2) == (1.5, -2.0)


def test_valid_unary_params(validator: InputValidator) -> None:
    """Only num1 is needed for unary operations."""
    req = validator.validate_params("sqrt", {"num1": "16"})
    assert req.num1 == 16.0
    assert req.num2 is None


@pytest.mark.parametrize("operation,params", [
    ("add", {"num1": "abc", "num2": "2"}),
    ("add", {"num1": "1", "num2": "xyz"}),
    ("add", {"num1": "1"}),
    ("add", {}),
    ("divide", {"num1": "", "num2": "2"}),
    ("abs", {"num2": "2"}),
    ("sqrt", {"num1": "NaN"}),
    ("unknown", {"num1": "1"}),
])
def test_invalid_params(validator: InputValidator, operation: str, params: dict) -> None:
    """Missing or non-numeric operands raise InvalidInput."""
    with pytest.raises(InvalidInput) as exc_info:
        validator.validate_params(operation, params)
    assert exc_info.value.status_code == 400
    assert exc_info.value.message.startswith("Invalid input")


def test_invalid_params_are_logged(validator: InputValidator, caplog) -> None:
    """Failures log the raw inputs and the attempted operation."""
    with caplog.at_level(logging.ERROR), pytest.raises(InvalidInput):
        validator.validate_params("multiply", {"num1": "abc", "num2": "2"})

    assert caplog.records[-1].levelno == logging.ERROR
    assert caplog.records[-1].getMessage() == "Invalid input: num1=abc, num2=2, operation=multiply"
