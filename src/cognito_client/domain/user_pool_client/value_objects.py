"""Value objects for Cognito user pool clients."""

from enum import Enum


class BaseEnumModel(str, Enum):
    """String enum with helpers for schema validation."""

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]

    def __str__(self):
        return self.value

    def __repr__(self):
        return f"{self.__class__.__name__}.{self.name}"


class ExplicitAuthFlow(BaseEnumModel):
    """Authentication flows a client may be enabled for."""

    ADMIN_NO_SRP_AUTH = "ADMIN_NO_SRP_AUTH"
    CUSTOM_AUTH_FLOW_ONLY = "CUSTOM_AUTH_FLOW_ONLY"
    USER_PASSWORD_AUTH = "USER_PASSWORD_AUTH"
    ALLOW_ADMIN_USER_PASSWORD_AUTH = "ALLOW_ADMIN_USER_PASSWORD_AUTH"
    ALLOW_CUSTOM_AUTH = "ALLOW_CUSTOM_AUTH"
    ALLOW_USER_PASSWORD_AUTH = "ALLOW_USER_PASSWORD_AUTH"
    ALLOW_USER_SRP_AUTH = "ALLOW_USER_SRP_AUTH"
    ALLOW_REFRESH_TOKEN_AUTH = "ALLOW_REFRESH_TOKEN_AUTH"


class OAuthFlow(BaseEnumModel):
    """OAuth 2.0 grant types."""

    CODE = "code"
    IMPLICIT = "implicit"
    CLIENT_CREDENTIALS = "client_credentials"


# Limits enforced by the control plane
MAX_CLIENT_NAME_LENGTH = 128
MAX_USER_POOL_ID_LENGTH = 55
MAX_REFRESH_TOKEN_VALIDITY_DAYS = 3650
DEFAULT_REFRESH_TOKEN_VALIDITY_DAYS = 30
MAX_OAUTH_FLOWS = 3
MAX_OAUTH_SCOPES = 25
MAX_OAUTH_SCOPE_LENGTH = 256
MAX_URLS = 100
MAX_URL_LENGTH = 1024
MAX_ATTRIBUTE_LENGTH = 2048
