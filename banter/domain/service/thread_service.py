"""Thread assembly for comment discussions.

Turns the flat set of a blog's comments into the two-level tree that is
rendered: top-level comments newest first, each with its replies oldest
first. Replies whose parent is not among the top-level comments (deleted,
hidden or never existed) are orphans and are left out of the tree.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Iterable

from banter.domain.model import Comment
from banter.domain.value import CommentId


@dataclass
class ThreadNode:
    """Comment with its replies in the rendered thread."""

    comment: Comment
    replies: list["ThreadNode"] = field(default_factory=list)


def _chronological_key(comment: Comment) -> tuple:
    return (comment.created_at, str(comment.id))


def assemble_thread(comments: Iterable[Comment]) -> list[ThreadNode]:
    """Build the rendered thread from a flat set of comments.

    Single grouping pass, no recursion. Duplicate IDs in the input are
    collapsed to their last occurrence.

    Args:
        comments: Comments of one blog, any order

    Returns:
        Top-level nodes ordered newest first, replies ordered oldest first
    """
    by_id: dict[CommentId, Comment] = {c.id: c for c in comments}

    top_level = [c for c in by_id.values() if c.parent_id is None]
    top_level_ids = {c.id for c in top_level}

    replies_by_parent: dict[CommentId, list[Comment]] = defaultdict(list)
    for comment in by_id.values():
        if comment.parent_id is not None and comment.parent_id in top_level_ids:
            replies_by_parent[comment.parent_id].append(comment)

    top_level.sort(key=_chronological_key, reverse=True)

    return [
        ThreadNode(
            comment=parent,
            replies=[
                ThreadNode(comment=reply)
                for reply in sorted(
                    replies_by_parent.get(parent.id, []), key=_chronological_key
                )
            ],
        )
        for parent in top_level
    ]


def count_nodes(thread: list[ThreadNode]) -> int:
    """Total number of rendered nodes (top-level plus replies)."""
    return sum(1 + len(node.replies) for node in thread)
