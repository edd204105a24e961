"""AWS provider exceptions."""

from cognito_client.domain.base.exceptions import InfrastructureError


class AWSError(InfrastructureError):
    """Base class for AWS API failures."""


class AWSValidationError(AWSError):
    """The request was rejected as invalid by the AWS API."""


class AWSEntityNotFoundError(AWSError):
    """The addressed AWS resource does not exist."""


class AuthorizationError(AWSError):
    """Credentials are missing, invalid, or lack permission."""


class RateLimitError(AWSError):
    """The AWS API throttled the request."""


class QuotaExceededError(AWSError):
    """An AWS service limit was reached."""


class ResourceInUseError(AWSError):
    """The resource is being modified concurrently."""


class NetworkError(AWSError):
    """The AWS endpoint could not be reached or timed out."""


class AWSConfigurationError(AWSError):
    """The AWS client could not be configured."""
