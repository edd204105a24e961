"""
Declarative resource schema.

A schema maps each declared field to its control-plane API key, its type
and its lifecycle flags. The resource adapter uses it to build requests,
to copy responses back into state, and to decide which changes force a
replacement of the remote object.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, Optional

from cognito_client.domain.base.exceptions import ResourceValidationError

# Returns an error message, or None when the value is acceptable
Validator = Callable[[Any], Optional[str]]


class FieldType(str, Enum):
    """Supported field value types."""

    STRING = "string"
    BOOL = "bool"
    INT = "int"
    SET = "set"


@dataclass(frozen=True)
class FieldSchema:
    """Schema of one declared or computed field."""

    type: FieldType
    api_name: str
    required: bool = False
    computed: bool = False
    force_new: bool = False
    sensitive: bool = False
    default: Any = None
    max_items: Optional[int] = None
    # Applied to the value, or to each element of a set
    validator: Optional[Validator] = None
    description: str = ""

    def normalize(self, value: Any) -> Any:
        """
        Bring a value into its canonical state form.

        Unset values become the field default (``[]`` for sets, ``False``
        for bools); sets are de-duplicated and sorted so that comparisons
        ignore ordering.
        """
        if value is None or value == "":
            value = self.default
        if self.type == FieldType.SET:
            return sorted(set(value or []))
        if self.type == FieldType.BOOL:
            return bool(value)
        if self.type == FieldType.INT and isinstance(value, float) and value.is_integer():
            return int(value)
        return value

    def check_type(self, value: Any) -> bool:
        if self.type == FieldType.STRING:
            return isinstance(value, str)
        if self.type == FieldType.BOOL:
            return isinstance(value, bool)
        if self.type == FieldType.INT:
            # Host runtimes such as Pulumi deliver every number as a float
            if isinstance(value, float):
                return value.is_integer()
            return isinstance(value, int) and not isinstance(value, bool)
        return isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value)


Schema = dict[str, FieldSchema]


def validate_config(schema: Schema, config: dict[str, Any]) -> None:
    """
    Validate declared configuration against a schema.

    Args:
        schema: Resource schema
        config: Declared field values

    Raises:
        ResourceValidationError: With every failing field, if any
    """
    errors: dict[str, str] = {}

    for key in config:
        if key not in schema:
            errors[key] = "unknown field"

    for key, field_schema in schema.items():
        value = config.get(key)

        if field_schema.computed:
            if value is not None:
                errors[key] = "computed field cannot be set"
            continue

        if value is None:
            if field_schema.required:
                errors[key] = "required field is missing"
            continue

        if not field_schema.check_type(value):
            errors[key] = f"expected {field_schema.type.value}, got {type(value).__name__}"
            continue

        error = _run_validator(field_schema, value)
        if error:
            errors[key] = error

    if errors:
        summary = "; ".join(f"{key}: {message}" for key, message in sorted(errors.items()))
        raise ResourceValidationError(f"Invalid configuration - {summary}", errors)


def _run_validator(field_schema: FieldSchema, value: Any) -> Optional[str]:
    if field_schema.type != FieldType.SET:
        return field_schema.validator(value) if field_schema.validator else None

    if field_schema.max_items is not None and len(set(value)) > field_schema.max_items:
        return f"at most {field_schema.max_items} items allowed, got {len(set(value))}"

    if field_schema.validator:
        for item in value:
            error = field_schema.validator(item)
            if error:
                return error
    return None


# Validator factories


def one_of(allowed: Iterable[str]) -> Validator:
    allowed = list(allowed)

    def _validate(value: Any) -> Optional[str]:
        if value not in allowed:
            return f"{value!r} must be one of {', '.join(allowed)}"
        return None

    return _validate


def int_between(minimum: int, maximum: int) -> Validator:
    def _validate(value: Any) -> Optional[str]:
        if not minimum <= value <= maximum:
            return f"{value} must be between {minimum} and {maximum}"
        return None

    return _validate


def string_matching(
    pattern: str, min_length: int = 1, max_length: Optional[int] = None, description: str = ""
) -> Validator:
    """Validator for length bounds plus a full-match regular expression."""
    compiled = re.compile(pattern)

    def _validate(value: Any) -> Optional[str]:
        if len(value) < min_length:
            return f"must be at least {min_length} characters"
        if max_length is not None and len(value) > max_length:
            return f"must be at most {max_length} characters"
        if not compiled.fullmatch(value):
            return f"{value!r} {description or 'has an invalid format'}"
        return None

    return _validate


def string_length(min_length: int, max_length: int) -> Validator:
    return string_matching(r"(?s).*", min_length, max_length)
