"""Resolve subpackage: reading fields and associations off records.

Re-exports the public API for the resolve module:
- AttributeResolver: applies only/except/methods and qualifies field names
- AssociationExpander: resolves the objects behind one include entry
- attribute_map / invoke: the accessor layer every resolver goes through
"""

from graph_csv.resolve.accessors import attribute_map, invoke
from graph_csv.resolve.associations import Association, AssociationExpander
from graph_csv.resolve.attributes import AttributeResolver

__all__ = [
    "Association",
    "AssociationExpander",
    "AttributeResolver",
    "attribute_map",
    "invoke",
]
