"""TreeNormalizer: reshapes an attribute tree so every level holds one label.

Header and row layout assume that all nodes at a given depth represent the
same association, so that a root-to-leaf path reads as "one column group per
level".  Mixed include graphs break that assumption: with
``include=["favorites", "profile_items"]`` the root's children mix
``favorite`` and ``profile_item`` nodes.

The normalizer fixes such trees in two passes:

1. Group every node by label, in depth-first first-seen order.  Each group
   becomes one level of the rebuilt tree::

       ""           -> [root]
       favorite     -> [f1, f2]
       profile_item -> [p1, p2]

2. Rebuild top-down: every node of level ``i`` receives a fresh copy of every
   node of level ``i + 1`` as children.  The root keeps its identity; all
   other nodes are new, so no subtree is ever shared between two parents::

       +                                  (root)
       |  +favorite        f1
       |  |  +profile_item p1
       |  |  +profile_item p2
       |  +favorite        f2
       |  |  +profile_item p1
       |  |  +profile_item p2

The root-to-leaf paths of the result are the Cartesian product of the
levels, which is what turns "2 favorites, 2 profile items" into 4 rows.
"""

from __future__ import annotations

import logging

from graph_csv.tree.nodes import TreeNode

__all__ = ["TreeNormalizer"]

logger = logging.getLogger(__name__)


class TreeNormalizer:
    """Rewrites trees in place into label-homogeneous levels.

    Example::

        normalizer = TreeNormalizer()
        normalizer.rebuild(tree)
        assert normalizer.is_homogeneous(tree)
    """

    def is_homogeneous(self, tree: TreeNode) -> bool:
        """Return True if, for every node, all of its children share one label.

        A tree without children is trivially homogeneous.
        """
        for node in tree.walk_breadth_first():
            if not node.children:
                continue
            first = node.children[0].label
            if any(child.label != first for child in node.children):
                return False
        return True

    def collect_levels(self, tree: TreeNode) -> list[list[TreeNode]]:
        """Group the tree's nodes by label in depth-first first-seen order.

        Returns:
            One node list per distinct label.  The first list is ``[tree]``
            since the root is visited first and is the only "" node.
        """
        groups: dict[str, list[TreeNode]] = {}
        seen: set[int] = set()
        for node in tree.walk():
            if id(node) in seen:
                continue
            seen.add(id(node))
            groups.setdefault(node.label, []).append(node)
        return list(groups.values())

    def rebuild(self, tree: TreeNode) -> TreeNode:
        """Normalize ``tree`` in place and return it.

        Homogeneous trees are returned untouched.
        """
        if self.is_homogeneous(tree):
            return tree

        levels = self.collect_levels(tree)
        logger.debug(
            "Rebuilding tree into %d levels: %s",
            len(levels),
            [level[0].label for level in levels],
        )

        tree.clear_children()
        for child in self._graft(levels, 1):
            tree.add_child(child)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Rebuilt tree:\n%s", tree.render())
        return tree

    def _graft(self, levels: list[list[TreeNode]], depth: int) -> list[TreeNode]:
        """Return fresh copies of level ``depth``, each carrying all deeper levels."""
        if depth >= len(levels):
            return []
        grafted: list[TreeNode] = []
        for template in levels[depth]:
            node = template.detached_copy()
            for child in self._graft(levels, depth + 1):
                node.add_child(child)
            grafted.append(node)
        return grafted
