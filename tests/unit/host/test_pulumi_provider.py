"""Tests for the Pulumi dynamic provider."""

import pickle

import pytest
from google.protobuf import struct_pb2
from pulumi.runtime import rpc

from cognito_client.domain.base.exceptions import ResourceValidationError
from cognito_client.host.pulumi_provider import UserPoolClientProvider

POOL_ID = "us-east-1_AbCdEf123"


def _from_engine(props: dict) -> dict:
    """Round-trip properties through the engine's wire format."""
    struct = struct_pb2.Struct()
    struct.update(props)
    return rpc.deserialize_properties(struct)


@pytest.fixture
def provider(aws_mocks) -> UserPoolClientProvider:
    return UserPoolClientProvider(region="us-east-1")


@pytest.mark.unit
class TestCheck:
    def test_valid_inputs(self):
        result = UserPoolClientProvider().check({}, {"name": "web", "user_pool_id": POOL_ID})

        assert result.failures == []
        assert result.inputs == {"name": "web", "user_pool_id": POOL_ID}

    def test_engine_keys_are_ignored(self):
        result = UserPoolClientProvider().check(
            {}, {"__provider": "serialized", "name": "web", "user_pool_id": POOL_ID}
        )

        assert result.failures == []
        assert "__provider" not in result.inputs

    def test_reports_failures_per_field(self):
        result = UserPoolClientProvider().check(
            {},
            {"name": "web", "explicit_auth_flows": ["MAGIC"], "refresh_token_validity": 9999},
        )

        failed = {failure.property: failure.reason for failure in result.failures}
        assert set(failed) == {"user_pool_id", "explicit_auth_flows", "refresh_token_validity"}

    def test_engine_numbers_are_accepted(self):
        news = _from_engine({"name": "web", "user_pool_id": POOL_ID, "refresh_token_validity": 60})
        assert isinstance(news["refresh_token_validity"], float)

        result = UserPoolClientProvider().check({}, news)

        assert result.failures == []

    def test_fractional_number_is_rejected(self):
        news = _from_engine({"name": "web", "user_pool_id": POOL_ID, "refresh_token_validity": 1.5})

        result = UserPoolClientProvider().check({}, news)

        assert [failure.property for failure in result.failures] == ["refresh_token_validity"]


@pytest.mark.unit
class TestDiff:
    OLDS = {
        "name": "web",
        "user_pool_id": POOL_ID,
        "generate_secret": False,
        "read_attributes": ["email"],
        "refresh_token_validity": 30,
        "client_secret": None,
    }

    def test_no_changes(self):
        news = {"name": "web", "user_pool_id": POOL_ID, "read_attributes": ["email"]}

        result = UserPoolClientProvider().diff("client", self.OLDS, news)

        assert result.changes is False
        assert result.replaces == []

    def test_in_place_change(self):
        news = {"name": "web", "user_pool_id": POOL_ID, "read_attributes": ["email", "name"]}

        result = UserPoolClientProvider().diff("client", self.OLDS, news)

        assert result.changes is True
        assert result.replaces == []
        assert "read_attributes" not in result.stables
        assert "name" in result.stables
        assert "client_secret" not in result.stables

    def test_force_new_change_replaces(self):
        news = {"name": "web", "user_pool_id": POOL_ID, "generate_secret": True}

        result = UserPoolClientProvider().diff("client", self.OLDS, news)

        assert result.changes is True
        assert result.replaces == ["generate_secret"]
        assert result.stables == []
        assert result.delete_before_replace is False

    def test_engine_numbers_match_recorded_state(self):
        olds = dict(self.OLDS, refresh_token_validity=45)
        news = _from_engine(
            {"name": "web", "user_pool_id": POOL_ID, "read_attributes": ["email"], "refresh_token_validity": 45}
        )

        result = UserPoolClientProvider().diff("client", olds, news)

        assert result.changes is False


@pytest.mark.aws
class TestLifecycle:
    def test_create_returns_id_and_outputs(self, provider, client_config):
        result = provider.create(client_config)

        assert result.id
        assert result.outs["name"] == "web-client"
        assert result.outs["client_secret"]
        assert "id" not in result.outs

    def test_create_from_engine_inputs(self, provider, client_config, cognito_idp, user_pool_id):
        inputs = _from_engine(dict(client_config, refresh_token_validity=60))

        result = provider.create(inputs)

        assert result.outs["refresh_token_validity"] == 60
        assert isinstance(result.outs["refresh_token_validity"], int)
        remote = cognito_idp.describe_user_pool_client(UserPoolId=user_pool_id, ClientId=result.id)
        assert remote["UserPoolClient"]["RefreshTokenValidity"] == 60

    def test_create_rejects_invalid_inputs(self, provider, user_pool_id):
        with pytest.raises(ResourceValidationError):
            provider.create({"name": "", "user_pool_id": user_pool_id})

    def test_read_refreshes_outputs(self, provider, client_config):
        created = provider.create(client_config)

        result = provider.read(created.id, created.outs)

        assert result.id == created.id
        assert result.outs == created.outs

    def test_read_of_deleted_client_returns_empty_id(self, provider, client_config, cognito_idp, user_pool_id):
        created = provider.create(client_config)
        cognito_idp.delete_user_pool_client(UserPoolId=user_pool_id, ClientId=created.id)

        result = provider.read(created.id, created.outs)

        assert result.id == ""

    def test_read_imports_by_pool_and_client_id(self, provider, client_config, user_pool_id):
        created = provider.create(client_config)

        result = provider.read(f"{user_pool_id}/{created.id}", {})

        assert result.id == created.id
        assert result.outs == created.outs

    def test_update(self, provider, client_config):
        created = provider.create(client_config)
        news = dict(client_config, refresh_token_validity=45)

        result = provider.update(created.id, created.outs, news)

        assert result.outs["refresh_token_validity"] == 45
        assert result.outs["client_secret"] == created.outs["client_secret"]

    def test_delete(self, provider, client_config, cognito_idp, user_pool_id):
        created = provider.create(client_config)

        provider.delete(created.id, created.outs)

        clients = cognito_idp.list_user_pool_clients(UserPoolId=user_pool_id, MaxResults=10)
        assert clients["UserPoolClients"] == []


@pytest.mark.unit
def test_provider_pickles_without_live_client(aws_mocks):
    provider = UserPoolClientProvider(region="us-east-1", endpoint_url="http://localhost:5000")
    assert provider.resource is not None

    restored = pickle.loads(pickle.dumps(provider))

    assert restored._resource is None
    assert restored.region == "us-east-1"
    assert restored.endpoint_url == "http://localhost:5000"
