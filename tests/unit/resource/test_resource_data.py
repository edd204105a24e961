"""Tests for ResourceData change tracking."""

import pytest

from cognito_client.resource.resource_data import ResourceData
from cognito_client.resource.user_pool_client import USER_POOL_CLIENT_SCHEMA

POOL_ID = "us-east-1_AbCdEf123"

PRIOR_STATE = {
    "id": "client-123",
    "name": "web-client",
    "user_pool_id": POOL_ID,
    "generate_secret": True,
    "explicit_auth_flows": ["USER_PASSWORD_AUTH", "ADMIN_NO_SRP_AUTH"],
    "read_attributes": ["email"],
    "refresh_token_validity": 30,
    "client_secret": "s3cret",
}


def _data(config=None, state=PRIOR_STATE, resource_id="client-123"):
    return ResourceData(USER_POOL_CLIENT_SCHEMA, resource_id=resource_id, config=config, state=state)


def _config(**overrides):
    config = {
        "name": "web-client",
        "user_pool_id": POOL_ID,
        "generate_secret": True,
        "explicit_auth_flows": ["ADMIN_NO_SRP_AUTH", "USER_PASSWORD_AUTH"],
        "read_attributes": ["email"],
    }
    config.update(overrides)
    return config


@pytest.mark.unit
class TestResourceData:
    """ResourceData lookups and change detection."""

    def test_get_prefers_declared_config(self):
        data = _data(config=_config(name="renamed"))

        assert data.get("name") == "renamed"

    def test_get_reads_state_without_config(self):
        data = _data()

        assert data.get("name") == "web-client"
        assert data.get("explicit_auth_flows") == ["ADMIN_NO_SRP_AUTH", "USER_PASSWORD_AUTH"]

    def test_computed_fields_come_from_state(self):
        data = _data(config=_config())

        assert data.get("client_secret") == "s3cret"

    def test_set_overrides_everything(self):
        data = _data(config=_config())
        data.set("name", "from-api")

        assert data.get("name") == "from-api"

    def test_unknown_field_raises(self):
        with pytest.raises(KeyError, match="Unknown field: nope"):
            _data().get("nope")

    def test_no_changes_when_config_matches_state(self):
        data = _data(config=_config())

        assert data.changed_fields() == []
        assert data.replacement_fields() == []

    def test_set_order_is_not_a_change(self):
        data = _data(config=_config(explicit_auth_flows=["USER_PASSWORD_AUTH", "ADMIN_NO_SRP_AUTH"]))

        assert not data.has_change("explicit_auth_flows")

    def test_default_matches_unset_value(self):
        # refresh_token_validity omitted from config, state holds the default
        data = _data(config=_config())

        assert not data.has_change("refresh_token_validity")

    def test_updatable_change(self):
        data = _data(config=_config(read_attributes=["email", "name"], refresh_token_validity=60))

        assert data.changed_fields() == ["read_attributes", "refresh_token_validity"]
        assert data.replacement_fields() == []

    def test_removed_list_is_a_change(self):
        data = _data(config=_config(read_attributes=[]))

        assert data.changed_fields() == ["read_attributes"]

    def test_force_new_change(self):
        data = _data(config=_config(name="renamed", generate_secret=False))

        assert data.replacement_fields() == ["name", "generate_secret"]

    def test_no_changes_without_config(self):
        assert _data().changed_fields() == []

    def test_state_snapshot(self):
        data = _data()
        data.set("refresh_token_validity", 90)

        state = data.state()

        assert state["id"] == "client-123"
        assert state["refresh_token_validity"] == 90
        assert state["write_attributes"] == []
        assert state["default_redirect_uri"] is None
        assert set(state) == set(USER_POOL_CLIENT_SCHEMA) | {"id"}

    def test_set_id(self):
        data = _data(resource_id=None, state=None)
        assert data.id == ""

        data.set_id("client-456")
        assert data.id == "client-456"

        data.set_id(None)
        assert data.id == ""
