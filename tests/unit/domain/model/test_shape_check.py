"""Unit tests for the payload shape check."""

from datetime import datetime

from forum.domain.model.common import check_shape
from forum.domain.value import ShapeViolation

REQUIRED = {"name": str, "count": int}


def test_valid_payload_passes():
    check = check_shape({"name": "x", "count": 1}, REQUIRED)

    assert check.ok
    assert check.violation is None


def test_absent_field_is_missing():
    check = check_shape({"name": "x"}, REQUIRED)

    assert check.violation == ShapeViolation.NOT_CONTAIN_NEEDED_PROPERTY


def test_zero_is_not_missing():
    """Falsy non-empty values should still count as present."""
    check = check_shape({"name": "x", "count": 0}, REQUIRED)

    assert check.ok


def test_bool_is_not_int():
    check = check_shape({"name": "x", "count": False}, REQUIRED)

    assert check.violation == ShapeViolation.NOT_MEET_DATA_TYPE_SPECIFICATION


def test_optional_field_checked_only_when_present():
    optional = {"at": datetime}

    assert check_shape({"name": "x", "count": 1}, REQUIRED, optional).ok
    assert (
        check_shape({"name": "x", "count": 1, "at": "today"}, REQUIRED, optional).violation
        == ShapeViolation.NOT_MEET_DATA_TYPE_SPECIFICATION
    )


def test_non_mapping_is_type_violation():
    check = check_shape("name=x", REQUIRED)

    assert check.violation == ShapeViolation.NOT_MEET_DATA_TYPE_SPECIFICATION
