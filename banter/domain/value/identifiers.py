"""Strongly typed identifiers for Banter domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

from banter.domain.error import InvalidArgumentError

BlogId = NewType("BlogId", UUID)
CommentId = NewType("CommentId", UUID)
UserId = NewType("UserId", UUID)


def parse_uuid(value: str, kind: str) -> UUID:
    """Parse an identifier received from a caller.

    Args:
        value: Raw identifier string
        kind: Human-readable entity name used in the error message

    Returns:
        Parsed UUID

    Raises:
        InvalidArgumentError: If the value is not a valid UUID
    """
    try:
        return UUID(str(value))
    except ValueError:
        raise InvalidArgumentError(f"Invalid {kind} id: {value}")
