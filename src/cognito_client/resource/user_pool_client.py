"""Cognito user pool client resource."""

from typing import Any

from cognito_client.domain.base.exceptions import (
    InfrastructureError,
    ResourceOperationError,
    ResourceValidationError,
)
from cognito_client.domain.base.ports import LoggingPort
from cognito_client.domain.user_pool_client.value_objects import (
    DEFAULT_REFRESH_TOKEN_VALIDITY_DAYS,
    MAX_ATTRIBUTE_LENGTH,
    MAX_CLIENT_NAME_LENGTH,
    MAX_OAUTH_FLOWS,
    MAX_OAUTH_SCOPE_LENGTH,
    MAX_OAUTH_SCOPES,
    MAX_REFRESH_TOKEN_VALIDITY_DAYS,
    MAX_URL_LENGTH,
    MAX_URLS,
    MAX_USER_POOL_ID_LENGTH,
    ExplicitAuthFlow,
    OAuthFlow,
)
from cognito_client.providers.aws.exceptions.aws_exceptions import AWSEntityNotFoundError
from cognito_client.providers.aws.infrastructure.handlers.user_pool_client_handler import (
    UserPoolClientHandler,
)
from cognito_client.resource.resource_data import ResourceData
from cognito_client.resource.schema import (
    FieldSchema,
    FieldType,
    Schema,
    int_between,
    one_of,
    string_length,
    string_matching,
)

RESOURCE_TYPE = "Cognito User Pool Client"

USER_POOL_CLIENT_SCHEMA: Schema = {
    "name": FieldSchema(
        FieldType.STRING,
        "ClientName",
        required=True,
        force_new=True,
        validator=string_matching(
            r"[\w\s+=,.@-]+",
            max_length=MAX_CLIENT_NAME_LENGTH,
            description="may only contain letters, digits, whitespace and +=,.@-",
        ),
    ),
    "user_pool_id": FieldSchema(
        FieldType.STRING,
        "UserPoolId",
        required=True,
        force_new=True,
        validator=string_matching(
            r"[\w-]+_[0-9a-zA-Z]+",
            max_length=MAX_USER_POOL_ID_LENGTH,
            description="must look like <region>_<id>",
        ),
    ),
    "generate_secret": FieldSchema(FieldType.BOOL, "GenerateSecret", force_new=True),
    "explicit_auth_flows": FieldSchema(
        FieldType.SET,
        "ExplicitAuthFlows",
        validator=one_of(ExplicitAuthFlow.values()),
    ),
    "read_attributes": FieldSchema(
        FieldType.SET, "ReadAttributes", validator=string_length(1, MAX_ATTRIBUTE_LENGTH)
    ),
    "write_attributes": FieldSchema(
        FieldType.SET, "WriteAttributes", validator=string_length(1, MAX_ATTRIBUTE_LENGTH)
    ),
    "refresh_token_validity": FieldSchema(
        FieldType.INT,
        "RefreshTokenValidity",
        default=DEFAULT_REFRESH_TOKEN_VALIDITY_DAYS,
        validator=int_between(0, MAX_REFRESH_TOKEN_VALIDITY_DAYS),
    ),
    "allowed_oauth_flows": FieldSchema(
        FieldType.SET,
        "AllowedOAuthFlows",
        max_items=MAX_OAUTH_FLOWS,
        validator=one_of(OAuthFlow.values()),
    ),
    "allowed_oauth_flows_user_pool_client": FieldSchema(
        FieldType.BOOL, "AllowedOAuthFlowsUserPoolClient"
    ),
    "allowed_oauth_scopes": FieldSchema(
        FieldType.SET,
        "AllowedOAuthScopes",
        max_items=MAX_OAUTH_SCOPES,
        validator=string_matching(
            r"[\x21\x23-\x2E\x30-\x5B\x5D-\x7E]+",
            max_length=MAX_OAUTH_SCOPE_LENGTH,
            description="contains characters not allowed in a scope",
        ),
    ),
    "callback_urls": FieldSchema(
        FieldType.SET,
        "CallbackURLs",
        max_items=MAX_URLS,
        validator=string_length(1, MAX_URL_LENGTH),
    ),
    "default_redirect_uri": FieldSchema(
        FieldType.STRING, "DefaultRedirectURI", validator=string_length(1, MAX_URL_LENGTH)
    ),
    "logout_urls": FieldSchema(
        FieldType.SET,
        "LogoutURLs",
        max_items=MAX_URLS,
        validator=string_length(1, MAX_URL_LENGTH),
    ),
    "supported_identity_providers": FieldSchema(
        FieldType.SET, "SupportedIdentityProviders"
    ),
    "client_secret": FieldSchema(
        FieldType.STRING, "ClientSecret", computed=True, sensitive=True
    ),
}

# Sent on every request rather than copied from the declared configuration
_IDENTITY_FIELDS = ("name", "user_pool_id")


class UserPoolClientResource:
    """
    Lifecycle adapter for a Cognito user pool client.

    Translates declared fields into cognito-idp requests and copies the
    described client back into state. The resource id is the ``ClientId``.
    """

    schema = USER_POOL_CLIENT_SCHEMA

    def __init__(self, handler: UserPoolClientHandler, logger: LoggingPort) -> None:
        self.handler = handler
        self._logger = logger

    def new_data(self, **kwargs: Any) -> ResourceData:
        """Create a ResourceData bound to this resource's schema."""
        return ResourceData(self.schema, **kwargs)

    def create(self, data: ResourceData) -> None:
        """
        Create the client from declared configuration and populate state.

        Raises:
            ResourceOperationError: If the API rejects the request
        """
        params: dict[str, Any] = {
            "ClientName": data.get("name"),
            "UserPoolId": data.get("user_pool_id"),
        }
        for key, field_schema in self.schema.items():
            if field_schema.computed or key in _IDENTITY_FIELDS:
                continue
            value = data.get(key)
            if value:
                params[field_schema.api_name] = value

        self._logger.debug("Creating %s: %s", RESOURCE_TYPE, params["ClientName"])

        try:
            client = self.handler.create_client(params)
        except InfrastructureError as e:
            raise ResourceOperationError("creating", RESOURCE_TYPE, e) from e

        data.set_id(client["ClientId"])
        self._logger.info(
            "Created %s %s in pool %s", RESOURCE_TYPE, data.id, params["UserPoolId"]
        )

        self.read(data)

    def read(self, data: ResourceData) -> None:
        """
        Refresh state from the remote client.

        A client that no longer exists clears the resource id instead of
        failing, so the host can treat it as deleted.

        Raises:
            ResourceValidationError: If state lacks the owning pool id
            ResourceOperationError: For any API failure other than not found
        """
        user_pool_id = data.get("user_pool_id")
        if not user_pool_id:
            raise ResourceValidationError(
                f"Cannot read {RESOURCE_TYPE} {data.id}: user_pool_id is not known",
                {"user_pool_id": "required field is missing"},
            )

        self._logger.debug("Reading %s %s", RESOURCE_TYPE, data.id)

        try:
            client = self.handler.describe_client(user_pool_id, data.id)
        except AWSEntityNotFoundError:
            self._logger.warning("%s %s is already gone", RESOURCE_TYPE, data.id)
            data.set_id("")
            return
        except InfrastructureError as e:
            raise ResourceOperationError("reading", RESOURCE_TYPE, e) from e

        for key, field_schema in self.schema.items():
            data.set(key, client.get(field_schema.api_name))
        # Not part of the description; a secret is only present when one was generated
        data.set("generate_secret", bool(client.get("ClientSecret")))

    def update(self, data: ResourceData) -> None:
        """
        Send the desired in-place configuration to the API, then refresh state.

        UpdateUserPoolClient resets every field missing from the request, so
        all updatable fields are sent, not just the changed ones. A cleared
        scalar such as ``default_redirect_uri`` is left out of the request,
        which is how the API clears it.

        Raises:
            ResourceOperationError: If the API rejects the request
        """
        params: dict[str, Any] = {
            "UserPoolId": data.get("user_pool_id"),
            "ClientId": data.id,
        }
        for key, field_schema in self.schema.items():
            if field_schema.computed or field_schema.force_new:
                continue
            value = data.get(key)
            if value is not None:
                params[field_schema.api_name] = value

        self._logger.debug(
            "Updating %s %s, changed: %s",
            RESOURCE_TYPE,
            data.id,
            data.changed_fields(),
        )

        try:
            self.handler.update_client(params)
        except InfrastructureError as e:
            raise ResourceOperationError("updating", RESOURCE_TYPE, e) from e

        self._logger.info("Updated %s %s", RESOURCE_TYPE, data.id)

        self.read(data)

    def delete(self, data: ResourceData) -> None:
        """
        Delete the remote client.

        Raises:
            ResourceOperationError: For any API failure, including not found
        """
        self._logger.debug("Deleting %s %s", RESOURCE_TYPE, data.id)

        try:
            self.handler.delete_client(data.get("user_pool_id"), data.id)
        except InfrastructureError as e:
            raise ResourceOperationError("deleting", RESOURCE_TYPE, e) from e

        self._logger.info("Deleted %s %s", RESOURCE_TYPE, data.id)
        data.set_id("")

    def import_state(self, import_id: str) -> ResourceData:
        """
        Adopt an existing client addressed as ``<user_pool_id>/<client_id>``.

        Raises:
            ResourceValidationError: If the import id is malformed
            ResourceOperationError: If the client does not exist or cannot be read
        """
        parts = import_id.split("/")
        if len(parts) != 2 or not all(parts):
            raise ResourceValidationError(
                f"Invalid import id {import_id!r}, expected <user_pool_id>/<client_id>",
                {"id": "expected <user_pool_id>/<client_id>"},
            )

        user_pool_id, client_id = parts
        data = self.new_data(resource_id=client_id, state={"user_pool_id": user_pool_id})
        self.read(data)

        if not data.id:
            raise ResourceOperationError(
                "importing",
                RESOURCE_TYPE,
                AWSEntityNotFoundError(f"Client {client_id} not found in pool {user_pool_id}"),
            )

        self._logger.info("Imported %s %s", RESOURCE_TYPE, data.id)
        return data
