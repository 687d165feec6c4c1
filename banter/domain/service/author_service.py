"""Comment author resolution.

Comments store the author's ID plus a snapshot of their display fields.
Which of the two is rendered is an explicit policy:

- JOIN: look up current users at read time (fresh, one batch query)
- SNAPSHOT: render what was captured at write time (no query, may be stale)

Authors that can't be resolved render as a placeholder instead of failing.
"""

from typing import Iterable, Optional

import logfire

from banter.domain.model import Comment, User
from banter.domain.repository import UserRepository
from banter.domain.value import AuthorPolicy, CommentId, UserId
from banter.domain.value.common import ValueObject

from .base import Service


class AuthorView(ValueObject):
    """Display fields of a comment author."""

    id: UserId
    name: str
    avatar_url: Optional[str] = None


class AuthorService(Service):
    """Resolves AuthorView values for comments according to a policy."""

    def __init__(
        self,
        user_repository: UserRepository,
        policy: AuthorPolicy,
        placeholder_name: str,
        placeholder_avatar_url: str | None,
    ) -> None:
        """Initialize author service.

        Args:
            user_repository: User repository (used by JOIN policy)
            policy: Resolution policy
            placeholder_name: Name shown for unresolvable authors
            placeholder_avatar_url: Avatar shown for unresolvable authors
        """
        self.user_repository = user_repository
        self.policy = policy
        self.placeholder_name = placeholder_name
        self.placeholder_avatar_url = placeholder_avatar_url

    @staticmethod
    def view_for_user(user: User) -> AuthorView:
        """Build an author view from a user record."""
        return AuthorView(id=user.id, name=user.name, avatar_url=user.avatar_url)

    def _from_snapshot(self, comment: Comment) -> AuthorView:
        if comment.author_name:
            return AuthorView(
                id=comment.author_id,
                name=comment.author_name,
                avatar_url=comment.author_avatar_url,
            )
        return self._placeholder(comment.author_id)

    def _placeholder(self, author_id: UserId) -> AuthorView:
        return AuthorView(
            id=author_id,
            name=self.placeholder_name,
            avatar_url=self.placeholder_avatar_url,
        )

    async def resolve(self, comments: Iterable[Comment]) -> dict[CommentId, AuthorView]:
        """Resolve the author view of each comment.

        Args:
            comments: Comments to resolve authors for

        Returns:
            Mapping of comment ID to author view (every comment is present)
        """
        comments = list(comments)
        with logfire.span(
            "author_service.resolve",
            policy=self.policy.value,
            count=len(comments),
        ):
            if self.policy == AuthorPolicy.SNAPSHOT or not comments:
                return {c.id: self._from_snapshot(c) for c in comments}

            users = await self.user_repository.find_by_ids(
                {c.author_id for c in comments}
            )
            views: dict[CommentId, AuthorView] = {}
            missing = 0
            for comment in comments:
                user = users.get(comment.author_id)
                if user:
                    views[comment.id] = self.view_for_user(user)
                else:
                    # Author deleted since writing - fall back to the snapshot
                    missing += 1
                    views[comment.id] = self._from_snapshot(comment)

            if missing:
                logfire.warn("Comment authors not found", missing=missing)
            return views
