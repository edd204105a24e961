"""AWS provider exceptions."""

from cognito_client.providers.aws.exceptions.aws_exceptions import (
    AuthorizationError,
    AWSConfigurationError,
    AWSEntityNotFoundError,
    AWSError,
    AWSValidationError,
    NetworkError,
    QuotaExceededError,
    RateLimitError,
    ResourceInUseError,
)

__all__: list[str] = [
    "AWSConfigurationError",
    "AWSEntityNotFoundError",
    "AWSError",
    "AWSValidationError",
    "AuthorizationError",
    "NetworkError",
    "QuotaExceededError",
    "RateLimitError",
    "ResourceInUseError",
]
