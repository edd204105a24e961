"""Plugin configuration."""

from cognito_client.config.manager import ConfigurationManager
from cognito_client.config.schemas import AppConfig, AWSConfig, LoggingConfig

__all__: list[str] = ["AppConfig", "AWSConfig", "ConfigurationManager", "LoggingConfig"]
