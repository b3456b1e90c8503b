"""Comment entity.

Comments are embedded in their project and stored in insertion order.
"""

from datetime import datetime

from pydantic import Field

from projectlink.domain.model.common import DomainModel, utcnow
from projectlink.domain.value import CommentId, UserId


class Comment(DomainModel):
    """Comment embedded in a project.

    Deletable by its author or by the project's author.
    """

    id: CommentId
    user_id: UserId
    text: str = Field(min_length=1, max_length=5000)
    created_at: datetime = Field(default_factory=utcnow)
