"""Domain port for configuration access."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cognito_client.config.schemas.app_schema import AWSConfig, LoggingConfig


class ConfigurationPort(ABC):
    """Configuration interface consumed by the provider and infrastructure layers."""

    @abstractmethod
    def get_aws_config(self) -> "AWSConfig":
        """Get AWS connection configuration."""

    @abstractmethod
    def get_logging_config(self) -> "LoggingConfig":
        """Get logging configuration."""
