"""Reply tree assembly.

Turns the flat, oldest-first comment list of an area into threads.
"""

from dataclasses import dataclass, field

from comet.domain.model import Comment
from comet.domain.value import CommentId

DEFAULT_MAX_DEPTH = 32


@dataclass
class CommentNode:
    """Comment with its direct replies, in thread order.

    ``orphan`` marks the top of a thread that cannot be reached from any root.
    """

    comment: Comment
    replies: list["CommentNode"] = field(default_factory=list)
    orphan: bool = False

    def size(self) -> int:
        """Number of comments in this subtree, including this one."""
        count = 0
        stack = [self]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.replies)
        return count


@dataclass
class CommentTree:
    """Assembled threads.

    ``roots`` holds the renderable threads. ``orphans`` holds comments whose
    parent is absent, is the comment itself, or belongs to a parent cycle;
    they and their replies never appear under ``roots``.
    """

    roots: list[CommentNode]
    orphans: list[CommentNode]

    @property
    def total(self) -> int:
        """Number of comments reachable from the roots."""
        return sum(root.size() for root in self.roots)


class CommentTreeBuilder:
    """Builds reply trees from flat comment lists.

    Pure: identical input always produces an identical tree. Pinned comments
    are not moved. Replies nested deeper than ``max_depth`` are attached to
    their deepest allowed ancestor, after that ancestor's direct replies.
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        if max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        self.max_depth = max_depth

    def build(self, comments: list[Comment]) -> CommentTree:
        """Build the reply tree.

        Args:
            comments: Comments of one area, ascending by created_at

        Returns:
            Root threads plus orphaned comments
        """
        nodes: dict[CommentId, CommentNode] = {
            comment.id: CommentNode(comment=comment) for comment in comments
        }
        children: dict[CommentId, list[CommentNode]] = {}

        roots: list[CommentNode] = []
        detached: list[CommentNode] = []
        for comment in comments:
            node = nodes[comment.id]
            if comment.is_root:
                roots.append(node)
                continue

            parent = nodes.get(comment.parent_id)
            if parent is None or parent is node:
                detached.append(node)
                continue

            children.setdefault(parent.comment.id, []).append(node)

        placed: set[CommentId] = set()
        for root in roots:
            self._attach(root, children, placed)

        orphans: list[CommentNode] = []
        for node in detached:
            node.orphan = True
            orphans.append(node)
            self._attach(node, children, placed)

        # Members of a parent cycle hang off each other and never reach a root
        for comment in comments:
            if comment.id in placed:
                continue
            node = nodes[comment.id]
            node.orphan = True
            orphans.append(node)
            self._attach(node, children, placed)

        return CommentTree(roots=roots, orphans=orphans)

    def _attach(
        self,
        top: CommentNode,
        children: dict[CommentId, list[CommentNode]],
        placed: set[CommentId],
    ) -> None:
        """Attach every descendant of ``top`` without recursing."""
        placed.add(top.comment.id)
        # (node, its depth below top, the node holding it as a reply)
        stack: list[tuple[CommentNode, int, CommentNode]] = [(top, 0, top)]
        while stack:
            node, depth, holder = stack.pop()
            if depth < self.max_depth:
                target, child_depth = node, depth + 1
            else:
                target, child_depth = holder, depth

            pending = []
            for child in children.get(node.comment.id, []):
                if child.comment.id in placed:
                    continue
                placed.add(child.comment.id)
                target.replies.append(child)
                pending.append((child, child_depth, target))
            stack.extend(reversed(pending))
