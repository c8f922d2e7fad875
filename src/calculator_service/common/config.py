"""Service configuration loaded from the environment."""
import os
from pathlib import Path
from typing import Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, IPvAnyAddress


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Environment variable read for each configuration field
ENV_VARS: dict[str, str] = {
    "host": "HOST",
    "port": "PORT",
    "log_dir": "LOG_DIR",
    "log_level": "LOG_LEVEL",
}


class ServiceConfig(BaseModel):
    """
    Runtime settings of the calculator service.

    Values come from the environment (``HOST``, ``PORT``, ``LOG_DIR``,
    ``LOG_LEVEL``) and may be overridden from the command line.
    """

    # Configuration must not change while the server is running
    model_config = ConfigDict(frozen=True)

    host: IPvAnyAddress = Field(default="0.0.0.0", description="Address the HTTP server binds to")
    port: int = Field(default=3000, ge=1, le=65535, description="HTTP listening port")
    log_dir: Path = Field(default=Path("logs"), description="Directory holding error.log and combined.log")
    log_level: LogLevel = Field(default="INFO", description="Minimum level written to the combined stream")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "ServiceConfig":
        """
        Build a configuration from environment variables.

        Empty variables are ignored. Keyword overrides that are not None take
        precedence over the environment.

        :param Mapping environ: Environment to read, defaults to ``os.environ``
        :param overrides: Field values taking precedence over the environment

        :return: Validated configuration
        :rtype: ServiceConfig
        :raises pydantic.ValidationError: If a value is invalid
        """
        environ = os.environ if environ is None else environ
        values = {field: environ[var] for field, var in ENV_VARS.items() if environ.get(var)}
        if "log_level" in values:
            values["log_level"] = values["log_level"].upper()
        values.update({field: value for field, value in overrides.items() if value is not None})
        return cls(**values)
