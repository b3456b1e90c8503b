"""User aggregate root.

Users publish projects and form a directed follow graph. Each side of a
follow is stored on its own user record (``following`` on the follower,
``followers`` on the followee), so the graph is kept symmetric by the
services that mutate it.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from projectlink.domain.model.common import DomainModel, utcnow
from projectlink.domain.value import UserId


class FollowEdge(DomainModel):
    """One side of a follow relation, stamped with when it was created."""

    user_id: UserId
    created_at: datetime = Field(default_factory=utcnow)


class User(DomainModel):
    """User aggregate root.

    Credentials live with the external identity service; this record only
    carries profile and social graph state.
    """

    id: UserId
    name: str = Field(min_length=1, max_length=100)
    email: str
    institution: str = ""
    avatar_url: Optional[str] = None
    bio: str = Field(default="", max_length=1000)
    skills: list[str] = Field(default_factory=list)
    followers: list[FollowEdge] = Field(default_factory=list)
    following: list[FollowEdge] = Field(default_factory=list)
    is_admin: bool = False
    banned: bool = False
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @model_validator(mode="after")
    def validate_no_self_follow(self) -> "User":
        """A user never appears in their own follow lists."""
        if self.id in self.follower_ids or self.id in self.following_ids:
            raise ValueError("User cannot follow themself")
        return self

    @property
    def follower_ids(self) -> list[UserId]:
        return [edge.user_id for edge in self.followers]

    @property
    def following_ids(self) -> list[UserId]:
        return [edge.user_id for edge in self.following]

    def is_following(self, user_id: UserId) -> bool:
        """Whether this user follows ``user_id``."""
        return any(edge.user_id == user_id for edge in self.following)


class PublicProfile(DomainModel):
    """Canonical public projection of a user.

    Used wherever another user's identity is embedded in a response
    (comment authors, followers, feed actors).
    """

    id: UserId
    name: str
    avatar_url: Optional[str] = None
    institution: str = ""

    @classmethod
    def from_user(cls, user: User) -> "PublicProfile":
        return cls(
            id=user.id,
            name=user.name,
            avatar_url=user.avatar_url,
            institution=user.institution,
        )

    @classmethod
    def unknown(cls, user_id: UserId) -> "PublicProfile":
        """Placeholder for a user that no longer exists."""
        return cls(id=user_id, name="Unknown User")
