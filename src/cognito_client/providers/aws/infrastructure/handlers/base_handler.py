"""
Base class for AWS API handlers.

Handlers own the boto3 calls for one AWS resource type. The base class
provides payload/response debug logging and translation of botocore
``ClientError`` into the provider exception hierarchy, so callers never
see raw botocore errors.
"""

import json
from abc import ABC
from typing import Any, Callable, TypeVar

from botocore.exceptions import BotoCoreError, ClientError, NoCredentialsError

from cognito_client.domain.base.exceptions import InfrastructureError
from cognito_client.domain.base.ports import LoggingPort
from cognito_client.providers.aws.exceptions.aws_exceptions import (
    AuthorizationError,
    AWSEntityNotFoundError,
    AWSValidationError,
    NetworkError,
    QuotaExceededError,
    RateLimitError,
    ResourceInUseError,
)
from cognito_client.providers.aws.infrastructure.aws_client import AWSClient

T = TypeVar("T")

REDACTED = "***"

# Response and request keys never written to logs
SENSITIVE_KEYS = frozenset({"ClientSecret"})

ERROR_CODE_MAP: dict[str, type[InfrastructureError]] = {
    "ResourceNotFoundException": AWSEntityNotFoundError,
    "InvalidParameterException": AWSValidationError,
    "ScopeDoesNotExistException": AWSValidationError,
    "InvalidOAuthFlowException": AWSValidationError,
    "ValidationException": AWSValidationError,
    "NotAuthorizedException": AuthorizationError,
    "AccessDeniedException": AuthorizationError,
    "UnrecognizedClientException": AuthorizationError,
    "TooManyRequestsException": RateLimitError,
    "ThrottlingException": RateLimitError,
    "LimitExceededException": QuotaExceededError,
    "ConcurrentModificationException": ResourceInUseError,
    "InternalErrorException": NetworkError,
    "ServiceUnavailable": NetworkError,
    "RequestTimeout": NetworkError,
}


def redact(data: Any) -> Any:
    """Return a copy of ``data`` with sensitive values masked."""
    if isinstance(data, dict):
        return {
            key: REDACTED if key in SENSITIVE_KEYS and value else redact(value)
            for key, value in data.items()
        }
    if isinstance(data, list):
        return [redact(item) for item in data]
    return data


class AWSHandler(ABC):
    """Base class for AWS resource handlers."""

    def __init__(self, aws_client: AWSClient, logger: LoggingPort) -> None:
        """
        Initialize AWS handler.

        Args:
            aws_client: AWS client for API operations
            logger: Logging port for operation logging
        """
        self.aws_client = aws_client
        self._logger = logger

    def _call(self, func: Callable[..., T], **kwargs: Any) -> T:
        """
        Invoke an AWS API operation with logging and error translation.

        Args:
            func: Bound boto3 client method
            **kwargs: API request parameters

        Returns:
            The raw API response

        Raises:
            InfrastructureError: Subclass matching the AWS error code
        """
        operation_name = getattr(func, "__name__", repr(func))

        self._logger.debug(
            "Calling AWS operation %s with payload:\n%s",
            operation_name,
            _format_debug_data(kwargs),
        )

        try:
            result = func(**kwargs)
        except ClientError as e:
            error = self._convert_client_error(e)
            self._logger.error("AWS operation %s failed: %s", operation_name, error)
            raise error from e
        except NoCredentialsError as e:
            self._logger.error("AWS operation %s failed: %s", operation_name, e)
            raise AuthorizationError(f"AWS credentials not found: {e}") from e
        except BotoCoreError as e:
            self._logger.error("AWS operation %s failed: %s", operation_name, e)
            raise NetworkError(f"AWS request failed: {e}") from e

        self._logger.debug(
            "AWS operation %s response:\n%s",
            operation_name,
            _format_debug_data(result),
        )
        return result

    def _convert_client_error(self, error: ClientError) -> InfrastructureError:
        """Convert AWS ClientError to domain exception."""
        error_info = error.response.get("Error", {})
        error_code = error_info.get("Code", "Unknown")
        error_message = error_info.get("Message", str(error))

        exception_class = ERROR_CODE_MAP.get(error_code)
        if exception_class is None:
            return InfrastructureError(
                f"AWS Error: {error_code} - {error_message}", error_code=error_code
            )
        return exception_class(error_message, error_code=error_code)


def _format_debug_data(data: Any) -> str:
    try:
        return json.dumps(redact(data), default=str, indent=2, sort_keys=True)
    except (TypeError, ValueError):
        return str(redact(data))
