"""Comment domain service."""

from uuid import uuid4

import logfire

from projectlink.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from projectlink.domain.model import Comment, PublicProfile
from projectlink.domain.repository import ProjectRepository
from projectlink.domain.value import CommentId, ProjectId, UserId
from projectlink.util.sanitize import strip_markup

from .base import Service
from .project_service import ProjectService
from .user_service import UserService

MAX_COMMENT_LENGTH = 5000


class CommentService(Service):
    """Domain service for comments embedded in projects."""

    def __init__(
        self,
        project_repository: ProjectRepository,
        project_service: ProjectService,
        user_service: UserService,
    ) -> None:
        """Initialize comment service.

        Args:
            project_repository: Project repository
            project_service: Project service (lookups)
            user_service: User service (commenter profiles)
        """
        self.project_repository = project_repository
        self.project_service = project_service
        self.user_service = user_service

    async def add_comment(
        self, user_id: UserId, project_id: ProjectId, text: str
    ) -> tuple[Comment, PublicProfile]:
        """Append a comment to a project.

        Markup is stripped before the text is stored.

        Args:
            user_id: Commenter
            project_id: Commented project
            text: Raw comment text

        Returns:
            The stored comment and the commenter's profile

        Raises:
            ValidationError: If the text is empty after sanitizing or too long
            NotFoundError: If project not found
        """
        with logfire.span(
            "comment_service.add_comment",
            project_id=str(project_id),
            user_id=str(user_id),
        ):
            if not text or not text.strip():
                raise ValidationError("Comment text is required")

            clean = strip_markup(text)
            if not clean:
                logfire.warn("Comment empty after sanitizing", user_id=str(user_id))
                raise ValidationError("Comment text is required")
            if len(clean) > MAX_COMMENT_LENGTH:
                raise ValidationError(
                    f"Comment must be at most {MAX_COMMENT_LENGTH} characters"
                )

            project = await self.project_service.get_by_id(project_id, for_update=True)
            comment = Comment(id=CommentId(uuid4()), user_id=user_id, text=clean)
            await self.project_repository.save(
                project.model_copy(update={"comments": [*project.comments, comment]})
            )

            profiles = await self.user_service.get_public_profiles([user_id])
            logfire.info(
                "Comment added",
                project_id=str(project_id),
                comment_id=str(comment.id),
                length=len(clean),
            )
            return comment, profiles[user_id]

    async def delete_comment(
        self, user_id: UserId, project_id: ProjectId, comment_id: CommentId
    ) -> None:
        """Remove a comment.

        Allowed for the comment's author and the project's author.

        Raises:
            NotFoundError: If the project or comment does not exist
            NotAuthorizedError: If the user may not delete the comment
        """
        with logfire.span(
            "comment_service.delete_comment",
            project_id=str(project_id),
            comment_id=str(comment_id),
        ):
            project = await self.project_service.get_by_id(project_id, for_update=True)
            comment = project.find_comment(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            if user_id not in (comment.user_id, project.author_id):
                logfire.warn(
                    "Unauthorized comment deletion",
                    comment_id=str(comment_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError("comment", str(comment_id), str(user_id))

            await self.project_repository.save(
                project.model_copy(
                    update={
                        "comments": [c for c in project.comments if c.id != comment_id]
                    }
                )
            )
            logfire.info("Comment deleted", comment_id=str(comment_id))

    async def list_comments(
        self, project_id: ProjectId
    ) -> list[tuple[Comment, PublicProfile]]:
        """List a project's comments in insertion order with commenter profiles."""
        with logfire.span("comment_service.list_comments", project_id=str(project_id)):
            project = await self.project_service.get_by_id(project_id)
            profiles = await self.user_service.get_public_profiles(
                [c.user_id for c in project.comments]
            )
            return [(c, profiles[c.user_id]) for c in project.comments]
