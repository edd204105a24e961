"""Host-agnostic view of a single resource instance."""

from typing import Any, Optional

from cognito_client.resource.schema import Schema

ID_KEY = "id"


class ResourceData:
    """
    Declared configuration, prior state and new state of one resource.

    Lookups resolve, in order: values written with ``set`` during the
    current operation, the declared configuration (non-computed fields
    only, when a configuration was supplied), then the prior state.

    Args:
        schema: Resource schema
        resource_id: Identifier of the remote object, empty when not created
        config: Declared configuration, ``None`` for operations that only
            work from state (read, delete, import)
        state: Prior state as last recorded by the host
    """

    def __init__(
        self,
        schema: Schema,
        resource_id: Optional[str] = None,
        config: Optional[dict[str, Any]] = None,
        state: Optional[dict[str, Any]] = None,
    ) -> None:
        self.schema = schema
        self._id = resource_id or ""
        self._config = config
        self._state = {k: v for k, v in (state or {}).items() if k != ID_KEY}
        self._new_state: dict[str, Any] = {}

    @property
    def id(self) -> str:
        return self._id

    def set_id(self, resource_id: Optional[str]) -> None:
        """Record the remote identifier; an empty value marks the resource as gone."""
        self._id = resource_id or ""

    def get(self, key: str) -> Any:
        """Get the current normalized value of a field."""
        field_schema = self._field(key)
        if key in self._new_state:
            return self._new_state[key]
        if self._config is not None and not field_schema.computed:
            return field_schema.normalize(self._config.get(key))
        return field_schema.normalize(self._state.get(key))

    def get_prior(self, key: str) -> Any:
        """Get the normalized value of a field from prior state."""
        return self._field(key).normalize(self._state.get(key))

    def set(self, key: str, value: Any) -> None:
        """Write a field into new state."""
        self._new_state[key] = self._field(key).normalize(value)

    def has_change(self, key: str) -> bool:
        """Whether the declared value of a field differs from prior state."""
        field_schema = self._field(key)
        if self._config is None or field_schema.computed:
            return False
        return field_schema.normalize(self._config.get(key)) != self.get_prior(key)

    def changed_fields(self) -> list[str]:
        """Names of all declared fields whose value differs from prior state."""
        return [key for key in self.schema if self.has_change(key)]

    def replacement_fields(self) -> list[str]:
        """Changed fields that cannot be updated in place."""
        return [key for key in self.changed_fields() if self.schema[key].force_new]

    def state(self) -> dict[str, Any]:
        """Snapshot of the resource state, keyed by field name plus ``id``."""
        snapshot: dict[str, Any] = {ID_KEY: self._id}
        for key in self.schema:
            snapshot[key] = self.get(key)
        return snapshot

    def _field(self, key: str):
        try:
            return self.schema[key]
        except KeyError:
            raise KeyError(f"Unknown field: {key}") from None

    def __repr__(self) -> str:
        return f"ResourceData(id={self._id!r}, fields={len(self.schema)})"
