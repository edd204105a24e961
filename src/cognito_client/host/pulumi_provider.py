"""Pulumi dynamic provider for Cognito user pool clients."""

from typing import Any, Optional

import pulumi
from pulumi.dynamic import (
    CheckFailure,
    CheckResult,
    ConfigureRequest,
    CreateResult,
    DiffResult,
    ReadResult,
    Resource,
    ResourceProvider,
    UpdateResult,
)

from cognito_client.config.manager import ConfigurationManager
from cognito_client.domain.base.exceptions import ResourceValidationError
from cognito_client.infrastructure.factories.resource_factory import ResourceFactory
from cognito_client.infrastructure.logging.logger import setup_logging
from cognito_client.resource.resource_data import ID_KEY, ResourceData
from cognito_client.resource.schema import validate_config
from cognito_client.resource.user_pool_client import (
    USER_POOL_CLIENT_SCHEMA,
    UserPoolClientResource,
)


def _declared(props: Optional[dict[str, Any]]) -> dict[str, Any]:
    """Strip engine bookkeeping keys such as ``__provider`` from properties."""
    return {k: v for k, v in (props or {}).items() if not k.startswith("__")}


def _outputs(data: ResourceData) -> dict[str, Any]:
    outs = data.state()
    outs.pop(ID_KEY)
    return outs


class UserPoolClientProvider(ResourceProvider):
    """
    Dynamic provider driving UserPoolClientResource.

    The provider is serialized into the Pulumi program, so it only keeps
    plain configuration values; the boto3 client is built on first use in
    the provider process.
    """

    region: Optional[str]
    profile: Optional[str]
    endpoint_url: Optional[str]
    config_path: Optional[str]

    def __init__(
        self,
        region: Optional[str] = None,
        profile: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        config_path: Optional[str] = None,
    ) -> None:
        self.region = region
        self.profile = profile
        self.endpoint_url = endpoint_url
        self.config_path = config_path
        self._resource: Optional[UserPoolClientResource] = None

    def configure(self, req: ConfigureRequest) -> None:
        self.region = self.region or req.config.get("aws:region")
        self.profile = self.profile or req.config.get("aws:profile")

    def __getstate__(self) -> dict[str, Any]:
        state = self.__dict__.copy()
        state["_resource"] = None
        return state

    @property
    def resource(self) -> UserPoolClientResource:
        if self._resource is None:
            config_manager = ConfigurationManager(
                self.config_path,
                overrides={
                    "aws": {
                        "region": self.region,
                        "profile": self.profile,
                        "endpoint_url": self.endpoint_url,
                    }
                },
            )
            setup_logging(config_manager.get_logging_config())
            self._resource = ResourceFactory(config_manager).create_user_pool_client_resource()
        return self._resource

    def check(self, _olds: dict[str, Any], news: dict[str, Any]) -> CheckResult:
        inputs = _declared(news)
        failures: list[CheckFailure] = []
        try:
            validate_config(USER_POOL_CLIENT_SCHEMA, inputs)
        except ResourceValidationError as e:
            failures = [CheckFailure(key, reason) for key, reason in e.field_errors.items()]
        return CheckResult(inputs, failures)

    def diff(self, _id: str, _olds: dict[str, Any], _news: dict[str, Any]) -> DiffResult:
        data = ResourceData(
            USER_POOL_CLIENT_SCHEMA,
            resource_id=_id,
            config=_declared(_news),
            state=_declared(_olds),
        )
        changed = data.changed_fields()
        replaces = data.replacement_fields()
        # A replacement yields a new client, so no output is known in advance
        stables: list[str] = []
        if not replaces:
            stables = [
                key
                for key, field_schema in USER_POOL_CLIENT_SCHEMA.items()
                if key not in changed and not field_schema.computed
            ]
        return DiffResult(
            changes=bool(changed),
            replaces=replaces,
            stables=stables,
            delete_before_replace=False,
        )

    def create(self, props: dict[str, Any]) -> CreateResult:
        config = _declared(props)
        validate_config(USER_POOL_CLIENT_SCHEMA, config)

        data = self.resource.new_data(config=config)
        self.resource.create(data)
        return CreateResult(data.id, _outputs(data))

    def read(self, id_: str, props: dict[str, Any]) -> ReadResult:
        state = _declared(props)
        if not state.get("user_pool_id") and "/" in id_:
            data = self.resource.import_state(id_)
        else:
            data = self.resource.new_data(resource_id=id_, state=state)
            self.resource.read(data)
        # An empty id tells the engine the client is gone
        return ReadResult(data.id, _outputs(data))

    def update(self, _id: str, _olds: dict[str, Any], _news: dict[str, Any]) -> UpdateResult:
        config = _declared(_news)
        validate_config(USER_POOL_CLIENT_SCHEMA, config)

        data = self.resource.new_data(resource_id=_id, config=config, state=_declared(_olds))
        self.resource.update(data)
        return UpdateResult(_outputs(data))

    def delete(self, _id: str, _props: dict[str, Any]) -> None:
        data = self.resource.new_data(resource_id=_id, state=_declared(_props))
        self.resource.delete(data)


class UserPoolClient(Resource):
    """A Cognito user pool client managed through UserPoolClientProvider."""

    name: pulumi.Output[str]
    user_pool_id: pulumi.Output[str]
    generate_secret: pulumi.Output[bool]
    explicit_auth_flows: pulumi.Output[list]
    read_attributes: pulumi.Output[list]
    write_attributes: pulumi.Output[list]
    refresh_token_validity: pulumi.Output[int]
    allowed_oauth_flows: pulumi.Output[list]
    allowed_oauth_flows_user_pool_client: pulumi.Output[bool]
    allowed_oauth_scopes: pulumi.Output[list]
    callback_urls: pulumi.Output[list]
    default_redirect_uri: pulumi.Output[str]
    logout_urls: pulumi.Output[list]
    supported_identity_providers: pulumi.Output[list]
    client_secret: pulumi.Output[str]

    def __init__(
        self,
        resource_name: str,
        args: dict[str, Any],
        opts: Optional[pulumi.ResourceOptions] = None,
        provider: Optional[UserPoolClientProvider] = None,
    ) -> None:
        props: dict[str, Any] = {key: None for key in USER_POOL_CLIENT_SCHEMA}
        props.update(args)
        opts = pulumi.ResourceOptions.merge(
            opts, pulumi.ResourceOptions(additional_secret_outputs=["client_secret"])
        )
        super().__init__(provider or UserPoolClientProvider(), resource_name, props, opts)
