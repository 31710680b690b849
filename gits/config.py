"""gits configuration using Pydantic, read from the environment."""

import os
from collections.abc import Mapping

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from gits.constants import (
    DEFAULT_GIT_EXECUTABLE,
    DEFAULT_LOG_LEVEL,
    GITS_GIT_ENV,
    GITS_LOG_DIR_ENV,
    GITS_LOG_ENV,
)
from gits.exceptions import ConfigurationError


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default=DEFAULT_LOG_LEVEL, pattern="^(debug|info|warn|error)$")
    directory: str | None = None


class GitsConfig(BaseModel):
    """Complete gits configuration."""

    git_executable: str = Field(default=DEFAULT_GIT_EXECUTABLE, min_length=1)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "GitsConfig":
        """Build configuration from environment variables.

        Args:
            environ: Environment mapping. Defaults to os.environ

        Returns:
            GitsConfig instance

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ

        data: dict = {"logging": {}}
        if env.get(GITS_GIT_ENV):
            data["git_executable"] = env[GITS_GIT_ENV]
        if env.get(GITS_LOG_ENV):
            data["logging"]["level"] = env[GITS_LOG_ENV].strip().lower()
        if env.get(GITS_LOG_DIR_ENV):
            data["logging"]["directory"] = env[GITS_LOG_DIR_ENV]

        try:
            return cls(**data)
        except PydanticValidationError as e:
            raise ConfigurationError(
                "Invalid gits configuration in environment",
                details={"errors": [err["msg"] for err in e.errors()]},
            ) from e
