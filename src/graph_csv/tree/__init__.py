"""Tree subpackage for record-to-tree conversion primitives.

Re-exports the public API for the tree module:
- TreeNode: dataclass representing one object (label + attribute map) in the tree
- TreeBuilder: converts a record and its included associations into a TreeNode tree
- TreeNormalizer: reshapes a tree so every level holds a single label
"""

from graph_csv.tree.builder import TreeBuilder
from graph_csv.tree.nodes import ROOT_LABEL, TreeNode
from graph_csv.tree.normalizer import TreeNormalizer

__all__ = ["ROOT_LABEL", "TreeBuilder", "TreeNode", "TreeNormalizer"]
