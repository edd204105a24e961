"""AWS API handlers."""

from cognito_client.providers.aws.infrastructure.handlers.base_handler import AWSHandler
from cognito_client.providers.aws.infrastructure.handlers.user_pool_client_handler import (
    UserPoolClientHandler,
)

__all__: list[str] = ["AWSHandler", "UserPoolClientHandler"]
