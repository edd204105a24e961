"""Configuration schemas."""

from cognito_client.config.schemas.app_schema import AppConfig, AWSConfig, LoggingConfig

__all__: list[str] = ["AppConfig", "AWSConfig", "LoggingConfig"]
