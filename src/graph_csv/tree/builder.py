"""TreeBuilder: converts a record and its included associations into a TreeNode tree.

Uses recursive descent over the RowPolicy's ``include`` entries.  Each node
holds the attribute map of one object; each included association contributes
one child node per associated object, labelled with the association's
singular name.

Children ordering is deterministic:
- inclusions are visited in the order of their keys sorted by ``str``,
- within one inclusion, objects keep the order the accessor returned them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from graph_csv.labels import LabelFormatter
from graph_csv.policy import RowPolicy
from graph_csv.resolve.associations import AssociationExpander
from graph_csv.resolve.attributes import AttributeResolver
from graph_csv.tree.nodes import ROOT_LABEL, TreeNode


@dataclass
class TreeBuilder:
    """Builds the attribute tree of one record.

    Example::

        builder = TreeBuilder()
        tree = builder.build(user, RowPolicy.from_options({"include": "favorites"}))
        # tree: ""(age, id, name) -> favorite(favorite_id, favorite_name) x 2
    """

    labels: LabelFormatter = field(default_factory=LabelFormatter)
    attributes: AttributeResolver = field(default_factory=AttributeResolver)
    associations: AssociationExpander = field(default_factory=AssociationExpander)

    def build(
        self,
        record: Any,
        policy: RowPolicy,
        label: str = ROOT_LABEL,
    ) -> TreeNode:
        """Build the subtree rooted at ``record``.

        Args:
            record: Any supported record shape.
            policy: Options for this record and, through ``include``, for
                    its associations.
            label:  Association label of this node. "" for the primary object.

        Returns:
            A TreeNode whose children are the included associated objects.

        Raises:
            TypeError: If ``record`` (or an associated object) exposes no
                attributes.
        """
        content = self.attributes.resolve(record, policy, label)
        node = TreeNode(label=label, content=content)

        for inclusion in sorted(policy.include, key=lambda inc: str(inc.key)):
            association = self.associations.expand(record, inclusion)
            if not association.objects:
                continue
            child_label = self.labels.association_label(inclusion.key)
            for associated in association.objects:
                node.add_child(self.build(associated, association.policy, child_label))

        return node
