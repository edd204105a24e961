"""Domain ports."""

from cognito_client.domain.base.ports.configuration_port import ConfigurationPort
from cognito_client.domain.base.ports.logging_port import LoggingPort

__all__: list[str] = ["ConfigurationPort", "LoggingPort"]
