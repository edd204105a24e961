"""Infrastructure adapters for domain ports."""

from cognito_client.infrastructure.adapters.logging_adapter import LoggingAdapter

__all__: list[str] = ["LoggingAdapter"]
