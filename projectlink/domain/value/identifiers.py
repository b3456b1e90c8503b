"""Strongly typed identifiers for ProjectLink domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

from projectlink.domain.error import NotFoundError

UserId = NewType("UserId", UUID)
ProjectId = NewType("ProjectId", UUID)
CommentId = NewType("CommentId", UUID)


def parse_uuid(value: str, resource: str) -> UUID:
    """Parse an identifier from a request.

    A malformed identifier cannot name an existing entity, so it is
    reported as not found.

    Args:
        value: Raw identifier string
        resource: Resource name used in the error message

    Returns:
        Parsed UUID

    Raises:
        NotFoundError: If the value is not a valid UUID
    """
    try:
        return UUID(str(value))
    except ValueError:
        raise NotFoundError(resource, value)
