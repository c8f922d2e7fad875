"""Dispatch validated requests to the operation registry."""
import logging
from typing import Mapping, Union

from pydantic import BaseModel, ConfigDict, Field

from calculator_service.common.errors import (
    DomainError,
    InvalidInput,
    OperationNotFound,
    UnexpectedError,
)
from calculator_service.common.logger import logger as service_logger
from calculator_service.common.models import ErrorResponse, SuccessResponse
from calculator_service.common.operations import calculate, lookup
from calculator_service.server.validator import InputValidator


Response = Union[SuccessResponse, ErrorResponse]


class Dispatcher(BaseModel):
    """
    Run one arithmetic request from raw parameters to response body.

    Every request ends in exactly one of three outcomes:
        - success (200) with the numeric result
        - client error (400 or 404) with the error's message
        - server error (500) with a generic message

    Errors never propagate past ``dispatch``.
    """

    # Allow arbitrary types like logging.Logger
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    logger: logging.Logger = Field(default_factory=lambda: service_logger, description="Sink for request outcomes")
    # Built once per dispatcher, sharing its logger
    validator: InputValidator = Field(
        default_factory=lambda data: InputValidator(logger=data["logger"]),
        description="Operand validator",
    )

    def dispatch(self, operation: str, params: Mapping[str, str]) -> Response:
        """
        Validate, look up and run an operation.

        :param str operation: Operation name from the request path
        :param Mapping params: Query parameters of the request

        :return: Response body, its ``statuscode`` is the HTTP status to send
        :rtype: SuccessResponse | ErrorResponse
        """
        try:
            request = self.validator.validate_params(operation, params)
            op = lookup(request.operation)
            result = calculate(op, request.num1, request.num2)
        except InvalidInput as exc:
            # Already logged by the validator
            return ErrorResponse(statuscode=exc.status_code, msg=exc.message)
        except OperationNotFound as exc:
            self.logger.error(f"Operation not found: {operation}")
            return ErrorResponse(statuscode=exc.status_code, msg=exc.message)
        except DomainError as exc:
            self.logger.error(f"Error occurred: {exc.message}")
            return ErrorResponse(statuscode=exc.status_code, msg=exc.message)
        except Exception as exc:
            # Full detail goes to the log only
            self.logger.exception(f"Error occurred: {exc}")
            return ErrorResponse(statuscode=UnexpectedError.status_code, msg=UnexpectedError.default_message)

        self.logger.info(
            f"Operation {op.value} successful on num1={request.num1}, num2={request.num2}, Result={result}"
        )
        return SuccessResponse(data=result)
