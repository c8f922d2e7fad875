"""Validation of raw query parameters."""
import logging
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from calculator_service.common.errors import InvalidInput
from calculator_service.common.logger import logger as service_logger
from calculator_service.common.models import OperationRequest


class InputValidator(BaseModel):
    """
    Turn raw query parameters into an ``OperationRequest``.

    ``num1`` must always be a number (NaN excluded). ``num2`` must be one too, unless
    the operation is unary (``sqrt``, ``abs``), in which case it is ignored.
    Validation runs before the operation is looked up, so unknown operations
    are checked as binary ones.
    """

    # Allow arbitrary types like logging.Logger
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    logger: logging.Logger = Field(default_factory=lambda: service_logger, description="Sink for validation failures")

    def validate_params(self, operation: str, params: Mapping[str, str]) -> OperationRequest:
        """
        Validate the operands of a request.

        :param str operation: Operation name from the request path
        :param Mapping params: Query parameters of the request

        :return: Validated request
        :rtype: OperationRequest
        :raises InvalidInput: If an operand is missing or not a number
        """
        raw_num1: Optional[str] = params.get("num1")
        raw_num2: Optional[str] = params.get("num2")

        try:
            return OperationRequest(operation=operation, num1=raw_num1, num2=raw_num2)
        except ValidationError as exc:
            self.logger.error(
                f"Invalid input: num1={raw_num1}, num2={raw_num2}, operation={operation}"
            )
            raise InvalidInput() from exc
