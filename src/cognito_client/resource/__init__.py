"""Resource schema, data and lifecycle adapters."""

from cognito_client.resource.resource_data import ResourceData
from cognito_client.resource.schema import FieldSchema, FieldType, Schema, validate_config
from cognito_client.resource.user_pool_client import (
    USER_POOL_CLIENT_SCHEMA,
    UserPoolClientResource,
)

__all__: list[str] = [
    "FieldSchema",
    "FieldType",
    "ResourceData",
    "Schema",
    "USER_POOL_CLIENT_SCHEMA",
    "UserPoolClientResource",
    "validate_config",
]
