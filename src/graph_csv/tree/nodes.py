"""TreeNode dataclass for the attribute-tree representation of an object graph.

Each node pairs an association label with the attribute map of one object.
The root node carries the empty label "" and represents the primary object;
every other node represents one associated object reached through an
``include`` entry.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

ROOT_LABEL = ""


@dataclass(slots=True)
class TreeNode:
    """A node in the attribute tree.

    Attributes:
        label:    Association label, e.g. "profile_item". "" for the root.
        content:  Field identifier -> value map produced by AttributeResolver.
        children: Child nodes, owned by this node. Must use
                  field(default_factory=list) so each instance gets its own list.
        parent:   Back-reference used for upward traversal only. Not part of
                  equality or repr, so comparing two trees never recurses upward.
    """

    label: str = ROOT_LABEL
    content: dict[str, Any] = field(default_factory=dict)
    children: list[TreeNode] = field(default_factory=list)
    parent: TreeNode | None = field(default=None, repr=False, compare=False)

    def add_child(self, node: TreeNode) -> TreeNode:
        """Append ``node`` to the children and point its parent at self."""
        self.children.append(node)
        node.parent = self
        return node

    def clear_children(self) -> None:
        """Detach every child. Detached children keep no parent reference."""
        for child in self.children:
            child.parent = None
        self.children = []

    def has_children(self) -> bool:
        return bool(self.children)

    def detached_copy(self) -> TreeNode:
        """Return a new childless node with the same label and a copied content map."""
        return TreeNode(label=self.label, content=dict(self.content))

    def walk(self) -> Iterator[TreeNode]:
        """Yield nodes depth-first, left to right, parents before children."""
        yield self
        for child in self.children:
            yield from child.walk()

    def walk_breadth_first(self) -> Iterator[TreeNode]:
        """Yield nodes breadth-first, left to right.

        The visited set is local to each call so repeated scans of the same
        tree never see stale state.
        """
        visited: set[int] = {id(self)}
        queue: deque[TreeNode] = deque([self])
        while queue:
            node = queue.popleft()
            yield node
            for child in node.children:
                if id(child) not in visited:
                    visited.add(id(child))
                    queue.append(child)

    def leaves(self) -> Iterator[TreeNode]:
        """Yield the childless nodes in depth-first order."""
        return (node for node in self.walk() if not node.children)

    def path(self) -> list[TreeNode]:
        """Return the nodes from the root down to (and including) self."""
        nodes: list[TreeNode] = []
        node: TreeNode | None = self
        while node is not None:
            nodes.append(node)
            node = node.parent
        nodes.reverse()
        return nodes

    def render(self, show_label: bool = True, show_content: bool = False) -> str:
        """Draw the tree as an outline, one node per line.

        For a tree A1 -> (B1 -> (C1, C2), B2) the output is::

            +A1
            |  +B1
            |  |  +C1
            |  |  +C2
            |  +B2
        """
        lines: list[str] = []
        self._render_into(lines, 0, show_label, show_content)
        return "\n".join(lines)

    def _render_into(
        self,
        lines: list[str],
        depth: int,
        show_label: bool,
        show_content: bool,
    ) -> None:
        if show_label and show_content:
            text = f"{self.label}:{self.content}"
        elif show_content:
            text = f"{self.content}"
        else:
            text = self.label
        lines.append("|  " * depth + f"+{text}")
        for child in self.children:
            child._render_into(lines, depth + 1, show_label, show_content)
