"""Comment forest construction.

Comments are stored flat with a ``parent_id`` back-reference. Display needs
them nested, so the builder turns one photo's flat list into a forest.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator

import logfire

from gallery.domain.model.comment import Comment
from gallery.domain.value import CommentId


@dataclass
class CommentTreeNode:
    """Node in a comment forest.

    Holds a comment and its direct replies, in the order they were given.
    """

    comment: Comment
    replies: list["CommentTreeNode"] = field(default_factory=list)


def build_comment_forest(comments: Iterable[Comment]) -> list[CommentTreeNode]:
    """Build a forest of comment threads from a flat list.

    Algorithm:
    1. Index every comment by id.
    2. Walk the input again; attach each comment to its parent's replies when
       the parent is in the index, otherwise make it a root.

    A reply whose parent is missing from the input is adopted as a root.
    Comments caught in a parent cycle are unreachable from any root; the
    first of them in input order is detached from its parent and becomes a
    root, so every input comment appears exactly once.
    Roots and siblings keep the relative order of the input.

    Args:
        comments: Flat comments, typically ordered by created_at ascending

    Returns:
        Root nodes with replies populated
    """
    comments = list(comments)
    nodes: dict[CommentId, CommentTreeNode] = {
        comment.id: CommentTreeNode(comment=comment) for comment in comments
    }

    roots: list[CommentTreeNode] = []
    for comment in comments:
        node = nodes[comment.id]
        parent = nodes.get(comment.parent_id) if comment.parent_id else None
        if parent is None or parent is node:
            roots.append(node)
        else:
            parent.replies.append(node)

    reached = {node.comment.id for node in iter_forest(roots)}
    if len(reached) < len(nodes):
        for comment in comments:
            if comment.id in reached:
                continue
            node = nodes[comment.id]
            parent = nodes[comment.parent_id]
            parent.replies = [reply for reply in parent.replies if reply is not node]
            roots.append(node)
            reached.update(n.comment.id for n in iter_forest([node]))
            logfire.warn(
                "Comment parent cycle broken",
                comment_id=str(comment.id),
                parent_id=str(comment.parent_id),
            )
    return roots


def iter_forest(forest: list[CommentTreeNode]) -> Iterator[CommentTreeNode]:
    """Yield every node of a forest in pre-order, without recursion."""
    stack = list(reversed(forest))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.replies))


def count_nodes(forest: list[CommentTreeNode]) -> int:
    return sum(1 for _ in iter_forest(forest))
