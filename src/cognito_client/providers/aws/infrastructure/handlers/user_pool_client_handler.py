"""Cognito user pool client API handler."""

from typing import Any

from cognito_client.providers.aws.infrastructure.handlers.base_handler import AWSHandler


class UserPoolClientHandler(AWSHandler):
    """
    Handler for the cognito-idp user pool client operations.

    Every method takes and returns raw API shapes; mapping to and from the
    declared resource fields happens in the resource layer.
    """

    @property
    def _client(self):
        return self.aws_client.cognito_idp_client

    def create_client(self, params: dict[str, Any]) -> dict[str, Any]:
        """
        Create a user pool client.

        Args:
            params: CreateUserPoolClient request parameters

        Returns:
            The ``UserPoolClient`` description of the new client

        Raises:
            AWSValidationError: If the request is rejected as invalid
            AWSEntityNotFoundError: If the user pool does not exist
            InfrastructureError: For other AWS API errors
        """
        response = self._call(self._client.create_user_pool_client, **params)
        return response["UserPoolClient"]

    def describe_client(self, user_pool_id: str, client_id: str) -> dict[str, Any]:
        """
        Describe a user pool client.

        Raises:
            AWSEntityNotFoundError: If the client or its pool does not exist
            InfrastructureError: For other AWS API errors
        """
        response = self._call(
            self._client.describe_user_pool_client,
            UserPoolId=user_pool_id,
            ClientId=client_id,
        )
        return response["UserPoolClient"]

    def update_client(self, params: dict[str, Any]) -> dict[str, Any]:
        """Update a user pool client; ``params`` must carry UserPoolId and ClientId."""
        response = self._call(self._client.update_user_pool_client, **params)
        return response.get("UserPoolClient", {})

    def delete_client(self, user_pool_id: str, client_id: str) -> None:
        """Delete a user pool client."""
        self._call(
            self._client.delete_user_pool_client,
            UserPoolId=user_pool_id,
            ClientId=client_id,
        )
