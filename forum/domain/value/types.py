"""Domain value types for the forum."""

from enum import Enum


class ShapeViolation(str, Enum):
    """Kinds of payload shape failure reported by entity constructors."""

    NOT_CONTAIN_NEEDED_PROPERTY = "NOT_CONTAIN_NEEDED_PROPERTY"
    NOT_MEET_DATA_TYPE_SPECIFICATION = "NOT_MEET_DATA_TYPE_SPECIFICATION"


class IdPrefix(str, Enum):
    """Prefixes of generated identifiers."""

    THREAD = "thread"
    COMMENT = "comment"
    REPLY = "reply"
