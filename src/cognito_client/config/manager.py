"""Configuration manager loading file and environment settings."""

import json
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from cognito_client.config.schemas.app_schema import AppConfig, AWSConfig, LoggingConfig
from cognito_client.domain.base.exceptions import ConfigurationError
from cognito_client.domain.base.ports import ConfigurationPort

CONFIG_PATH_ENV = "COGNITO_CLIENT_CONFIG"

# Environment variable -> (section, key); first match wins per key.
ENV_OVERRIDES: list[tuple[str, str, str]] = [
    ("AWS_REGION", "aws", "region"),
    ("AWS_DEFAULT_REGION", "aws", "region"),
    ("AWS_PROFILE", "aws", "profile"),
    ("AWS_ENDPOINT_URL", "aws", "endpoint_url"),
    ("LOG_LEVEL", "logging", "level"),
]


class ConfigurationManager(ConfigurationPort):
    """
    Loads plugin configuration.

    Sources, lowest precedence first: model defaults, a JSON or YAML file
    (explicit path or ``COGNITO_CLIENT_CONFIG``), environment variables,
    then ``overrides`` (section -> key -> value, ``None`` values ignored).
    """

    def __init__(
        self,
        config_path: Optional[str] = None,
        overrides: Optional[dict[str, Any]] = None,
    ) -> None:
        self.config_path = config_path or os.environ.get(CONFIG_PATH_ENV)
        self._overrides = overrides or {}
        self._config: Optional[AppConfig] = None

    @property
    def app_config(self) -> AppConfig:
        """Loaded configuration, built on first access."""
        if self._config is None:
            self._config = self._load()
        return self._config

    def get_aws_config(self) -> AWSConfig:
        """Get AWS connection configuration."""
        return self.app_config.aws

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration."""
        return self.app_config.logging

    def _load(self) -> AppConfig:
        data: dict[str, Any] = {}
        if self.config_path:
            data = self._read_file(Path(self.config_path))

        self._apply_env_overrides(data)

        for section, values in self._overrides.items():
            data.setdefault(section, {}).update(
                {k: v for k, v in values.items() if v is not None}
            )

        try:
            return AppConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration: {e}",
                details={"errors": e.errors(include_url=False)},
            ) from e

    @staticmethod
    def _read_file(path: Path) -> dict[str, Any]:
        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            with open(path, encoding="utf-8") as f:
                if path.suffix in (".yaml", ".yml"):
                    content = yaml.safe_load(f)
                else:
                    content = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Invalid configuration file {path}: {e}") from e

        if content is None:
            return {}
        if not isinstance(content, dict):
            raise ConfigurationError(
                f"Configuration file {path} must contain a mapping, got {type(content).__name__}"
            )
        return content

    @staticmethod
    def _apply_env_overrides(data: dict[str, Any]) -> None:
        applied: set[tuple[str, str]] = set()
        for env_name, section, key in ENV_OVERRIDES:
            value = os.environ.get(env_name)
            if not value or (section, key) in applied:
                continue
            data.setdefault(section, {})[key] = value
            applied.add((section, key))

    def __repr__(self) -> str:
        return f"ConfigurationManager(config_path={self.config_path!r})"
