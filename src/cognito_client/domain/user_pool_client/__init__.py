"""User pool client domain."""

from cognito_client.domain.user_pool_client.value_objects import ExplicitAuthFlow, OAuthFlow

__all__: list[str] = ["ExplicitAuthFlow", "OAuthFlow"]
