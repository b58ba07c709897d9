"""Base models for all domain entities.

Entities are built from raw payloads (plain mappings coming from the
transport layer or from a repository row). Each entity declares the fields it
requires and their primitive types; the shape check runs once, before pydantic
sees the data, so a failed construction always surfaces as a domain
``ValidationError`` carrying a stable code.
"""

from collections.abc import Mapping
from typing import Any, ClassVar, TypeVar

from pydantic import AliasGenerator, BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

from forum.domain.error import MalformedRecordError, ValidationError
from forum.domain.value import ShapeViolation
from forum.domain.value.common import ValueObject

FieldTypes = Mapping[str, type | tuple[type, ...]]

E = TypeVar("E", bound="PayloadEntity")


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and camelCase output.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,
        alias_generator=AliasGenerator(serialization_alias=to_camel),
    )


class ShapeCheck(ValueObject):
    """Result of checking a payload against an entity's field types."""

    violation: ShapeViolation | None = None

    @property
    def ok(self) -> bool:
        return self.violation is None


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def _matches(value: Any, expected: type | tuple[type, ...]) -> bool:
    expected_types = expected if isinstance(expected, tuple) else (expected,)
    for expected_type in expected_types:
        if expected_type is bool:
            if type(value) is bool:
                return True
        elif expected_type is int:
            if isinstance(value, int) and not isinstance(value, bool):
                return True
        elif isinstance(value, expected_type):
            return True
    return False


def check_shape(
    payload: Any,
    required: FieldTypes,
    optional: FieldTypes | None = None,
) -> ShapeCheck:
    """Check a raw payload for missing fields and primitive type mismatches.

    Missing fields win over type mismatches: a payload lacking ``title`` and
    carrying a numeric ``id`` reports NOT_CONTAIN_NEEDED_PROPERTY.

    Args:
        payload: Raw payload, expected to be a mapping
        required: Field name to accepted type(s); absent, None or "" is missing
        optional: Field name to accepted type(s); checked only when present

    Returns:
        ShapeCheck with ``violation`` set on failure
    """
    if not isinstance(payload, Mapping):
        return ShapeCheck(violation=ShapeViolation.NOT_MEET_DATA_TYPE_SPECIFICATION)

    if any(_is_missing(payload.get(name)) for name in required):
        return ShapeCheck(violation=ShapeViolation.NOT_CONTAIN_NEEDED_PROPERTY)

    for name, expected in required.items():
        if not _matches(payload[name], expected):
            return ShapeCheck(
                violation=ShapeViolation.NOT_MEET_DATA_TYPE_SPECIFICATION
            )

    for name, expected in (optional or {}).items():
        value = payload.get(name)
        if value is not None and not _matches(value, expected):
            return ShapeCheck(
                violation=ShapeViolation.NOT_MEET_DATA_TYPE_SPECIFICATION
            )

    return ShapeCheck()


class PayloadEntity(DomainModel):
    """Entity whose constructor is the sole validation gate for its payload.

    Subclasses declare ``ERROR_PREFIX`` plus ``REQUIRED`` and, when needed,
    ``OPTIONAL`` field types. Fields not declared on the model are dropped.
    """

    ERROR_PREFIX: ClassVar[str]
    REQUIRED: ClassVar[FieldTypes]
    OPTIONAL: ClassVar[FieldTypes] = {}

    @model_validator(mode="before")
    @classmethod
    def check_payload_shape(cls, data: Any) -> Any:
        """Reject payloads with missing fields or wrong primitive types."""
        check = check_shape(data, cls.REQUIRED, cls.OPTIONAL)
        if not check.ok:
            raise ValidationError(cls.ERROR_PREFIX, check.violation.value)
        return data

    @classmethod
    def from_record(cls: type[E], record: Mapping[str, Any]) -> E:
        """Build the entity from a repository record.

        Raises:
            MalformedRecordError: If the record violates the entity's shape
        """
        try:
            return cls.model_validate(record)
        except ValidationError as e:
            raise MalformedRecordError(cls.ERROR_PREFIX, e.code) from e
