"""User domain service."""

from dataclasses import dataclass
from typing import Any, Sequence

import logfire

from projectlink.domain.error import (
    AlreadyFollowingError,
    NotFoundError,
    SelfReferenceError,
)
from projectlink.domain.model import FollowEdge, PublicProfile, User
from projectlink.domain.model.common import utcnow
from projectlink.domain.repository import UserRepository
from projectlink.domain.value import UserId

from .base import Service

PROFILE_FIELDS = frozenset({"name", "institution", "bio", "avatar_url", "skills"})


@dataclass
class FollowCounts:
    """Follow graph sizes after a follow or unfollow."""

    followers: int  # target user's followers
    following: int  # acting user's following


class UserService(Service):
    """Domain service for user profiles and the follow graph."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId, for_update: bool = False) -> User:
        """Get user by ID.

        Args:
            user_id: User ID
            for_update: Lock the record for the rest of the transaction

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id, for_update=for_update)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_public_profiles(
        self, user_ids: Sequence[UserId]
    ) -> dict[UserId, PublicProfile]:
        """Resolve public profiles for a batch of user IDs.

        Users that no longer exist resolve to an "Unknown User" placeholder.

        Args:
            user_ids: IDs to resolve (duplicates allowed)

        Returns:
            Mapping from every requested ID to a profile
        """
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}

        users = await self.user_repository.find_by_ids(unique_ids)
        profiles = {user.id: PublicProfile.from_user(user) for user in users}
        for user_id in unique_ids:
            if user_id not in profiles:
                profiles[user_id] = PublicProfile.unknown(user_id)
        return profiles

    async def update_profile(self, user_id: UserId, changes: dict[str, Any]) -> User:
        """Update editable profile fields.

        Args:
            user_id: User ID
            changes: Field name to new value; only profile fields are applied

        Returns:
            Updated user

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.update_profile", user_id=str(user_id)):
            user = await self.get_by_id(user_id, for_update=True)
            update = {k: v for k, v in changes.items() if k in PROFILE_FIELDS}
            if not update:
                return user

            # Re-validate so field constraints apply to the new values
            updated = User.model_validate(
                {**user.model_dump(), **update, "updated_at": utcnow()}
            )
            await self.user_repository.save(updated)
            logfire.info(
                "Profile updated", user_id=str(user_id), fields=sorted(update.keys())
            )
            return updated

    async def _lock_pair(
        self, user_id: UserId, target_id: UserId
    ) -> tuple[User, User]:
        """Lock both users in id order and return them as (user, target).

        Opposite follows between the same two users lock the rows in the
        same order, so one waits for the other instead of deadlocking.
        """
        locked = {}
        for uid in sorted((user_id, target_id), key=str):
            locked[uid] = await self.get_by_id(uid, for_update=True)
        return locked[user_id], locked[target_id]

    async def follow(self, user_id: UserId, target_id: UserId) -> FollowCounts:
        """Make ``user_id`` follow ``target_id``.

        Both records are written in the caller's transaction.

        Args:
            user_id: Acting user
            target_id: User to follow

        Returns:
            Follow counts after the change

        Raises:
            SelfReferenceError: If the user tries to follow themself
            NotFoundError: If either user does not exist
            AlreadyFollowingError: If already following
        """
        with logfire.span(
            "user_service.follow", user_id=str(user_id), target_id=str(target_id)
        ):
            if user_id == target_id:
                raise SelfReferenceError("You cannot follow yourself")

            user, target = await self._lock_pair(user_id, target_id)

            if user.is_following(target_id):
                logfire.warn(
                    "Duplicate follow attempt",
                    user_id=str(user_id),
                    target_id=str(target_id),
                )
                raise AlreadyFollowingError(str(user_id), str(target_id))

            now = utcnow()
            updated_user = user.model_copy(
                update={
                    "following": [
                        *user.following,
                        FollowEdge(user_id=target_id, created_at=now),
                    ],
                    "updated_at": now,
                }
            )

            # The followers side may already hold the edge after a partial write
            followers = list(target.followers)
            if user_id not in target.follower_ids:
                followers.append(FollowEdge(user_id=user_id, created_at=now))
            updated_target = target.model_copy(
                update={"followers": followers, "updated_at": now}
            )

            await self.user_repository.save(updated_user)
            await self.user_repository.save(updated_target)

            logfire.info(
                "User followed", user_id=str(user_id), target_id=str(target_id)
            )
            return FollowCounts(
                followers=len(updated_target.followers),
                following=len(updated_user.following),
            )

    async def unfollow(self, user_id: UserId, target_id: UserId) -> FollowCounts:
        """Make ``user_id`` stop following ``target_id``.

        Unfollowing a user that is not followed is a no-op.

        Raises:
            SelfReferenceError: If the user tries to unfollow themself
            NotFoundError: If either user does not exist
        """
        with logfire.span(
            "user_service.unfollow", user_id=str(user_id), target_id=str(target_id)
        ):
            if user_id == target_id:
                raise SelfReferenceError("You cannot unfollow yourself")

            user, target = await self._lock_pair(user_id, target_id)

            now = utcnow()
            updated_user = user.model_copy(
                update={
                    "following": [e for e in user.following if e.user_id != target_id],
                    "updated_at": now,
                }
            )
            updated_target = target.model_copy(
                update={
                    "followers": [e for e in target.followers if e.user_id != user_id],
                    "updated_at": now,
                }
            )

            await self.user_repository.save(updated_user)
            await self.user_repository.save(updated_target)

            logfire.info(
                "User unfollowed", user_id=str(user_id), target_id=str(target_id)
            )
            return FollowCounts(
                followers=len(updated_target.followers),
                following=len(updated_user.following),
            )

    async def reconcile_follow_graph(self) -> int:
        """Repair asymmetric follow pairs across all users.

        For every edge A -> B, A must list B in ``following`` and B must
        list A in ``followers``. A missing half is restored with the
        timestamp of the half that exists. Edges pointing at users that no
        longer exist are dropped, as are duplicate edges.

        Returns:
            Number of user records rewritten
        """
        with logfire.span("user_service.reconcile_follow_graph"):
            users = {user.id: user for user in await self.user_repository.find_all()}

            following: dict[UserId, dict[UserId, FollowEdge]] = {
                uid: {} for uid in users
            }
            followers: dict[UserId, dict[UserId, FollowEdge]] = {
                uid: {} for uid in users
            }

            for user in users.values():
                for edge in user.following:
                    if edge.user_id not in users:
                        continue
                    following[user.id].setdefault(edge.user_id, edge)
                    followers[edge.user_id].setdefault(
                        user.id,
                        FollowEdge(user_id=user.id, created_at=edge.created_at),
                    )
                for edge in user.followers:
                    if edge.user_id not in users:
                        continue
                    followers[user.id].setdefault(edge.user_id, edge)
                    following[edge.user_id].setdefault(
                        user.id,
                        FollowEdge(user_id=user.id, created_at=edge.created_at),
                    )

            repaired = 0
            for user in users.values():
                new_following = list(following[user.id].values())
                new_followers = list(followers[user.id].values())
                if new_following == user.following and new_followers == user.followers:
                    continue
                await self.user_repository.save(
                    user.model_copy(
                        update={
                            "following": new_following,
                            "followers": new_followers,
                            "updated_at": utcnow(),
                        }
                    )
                )
                repaired += 1

            logfire.info(
                "Follow graph reconciled", users=len(users), repaired=repaired
            )
            return repaired
