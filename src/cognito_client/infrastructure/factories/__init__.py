"""Infrastructure factories."""

from cognito_client.infrastructure.factories.resource_factory import ResourceFactory

__all__: list[str] = ["ResourceFactory"]
