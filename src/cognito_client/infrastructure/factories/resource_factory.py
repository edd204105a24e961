"""Factory wiring resources to their AWS handlers."""

from typing import Optional

from cognito_client.domain.base.ports import ConfigurationPort
from cognito_client.infrastructure.adapters.logging_adapter import LoggingAdapter
from cognito_client.providers.aws.infrastructure.aws_client import AWSClient
from cognito_client.providers.aws.infrastructure.handlers.user_pool_client_handler import (
    UserPoolClientHandler,
)
from cognito_client.resource.user_pool_client import UserPoolClientResource


class ResourceFactory:
    """Builds resource adapters sharing one AWS client."""

    def __init__(self, config_manager: ConfigurationPort) -> None:
        """Initialize factory with a configuration source."""
        self.config_manager = config_manager
        self._aws_client: Optional[AWSClient] = None

    @property
    def aws_client(self) -> AWSClient:
        """Lazy load the AWS client."""
        if self._aws_client is None:
            self._aws_client = AWSClient(self.config_manager, LoggingAdapter("aws_client"))
        return self._aws_client

    def create_user_pool_client_resource(self) -> UserPoolClientResource:
        """Create the user pool client resource adapter."""
        handler = UserPoolClientHandler(self.aws_client, LoggingAdapter("handlers.user_pool_client"))
        return UserPoolClientResource(handler, LoggingAdapter("resource.user_pool_client"))
