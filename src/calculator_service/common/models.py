"""Pydantic models for arithmetic operation requests and responses."""
import math
from typing import Annotated, Any, Optional

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field, model_validator

from calculator_service.common.operations import is_unary


def parse_number(value: Any) -> Any:
    """Parse query strings the way ``float()`` does, including ``Infinity``."""
    if isinstance(value, str):
        return float(value)
    return value


def reject_nan(value: float) -> float:
    """NaN is the only float that is not a number."""
    if math.isnan(value):
        raise ValueError("Operand is not a number")
    return value


# Infinities are valid operands, NaN is not
Operand = Annotated[float, BeforeValidator(parse_number), AfterValidator(reject_nan)]


class OperationRequest(BaseModel):
    """Validated operands of a single arithmetic request."""

    model_config = ConfigDict(frozen=True)

    operation: str = Field(..., description="Operation name taken from the request path")
    num1: Operand = Field(..., description="First operand, required by every operation")
    num2: Optional[Operand] = Field(default=None, description="Second operand, None for unary operations")

    @model_validator(mode="before")
    @classmethod
    def check_arity(cls, data: Any) -> Any:
        """Drop num2 for unary operations and require it for all others."""
        if isinstance(data, dict):
            if is_unary(data.get("operation")):
                data = {**data, "num2": None}
            elif data.get("num2") is None:
                raise ValueError("num2 is required for binary operations")
        return data


class SuccessResponse(BaseModel):
    """Body returned when an operation completes."""

    statuscode: int = Field(default=200, description="Mirror of the HTTP status")
    # Infinite and NaN results are serialized as JSON null
    data: Optional[float] = Field(..., description="Numeric result of the operation")


class ErrorResponse(BaseModel):
    """Body returned for any failed request."""

    statuscode: int = Field(..., ge=400, le=599, description="Mirror of the HTTP status")
    msg: str = Field(..., description="Client-facing error message")
