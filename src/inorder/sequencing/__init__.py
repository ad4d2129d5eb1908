from inorder.sequencing.algorithms import (
    check_in_order,
    check_in_order_only,
    check_the_same_elements_in_order_as,
)
from inorder.sequencing.base import (
    ArraySequencing,
    IteratorSequencing,
    ListSequencing,
    SequenceSequencing,
    Sequencing,
    StringSequencing,
    ViewSequencing,
)
from inorder.sequencing.registry import (
    DEFAULT_REGISTRY,
    SequencingRegistry,
    build_default_registry,
    contains_in_order,
    contains_in_order_only,
    contains_the_same_elements_in_order_as,
    convert_equality_to_sequencing,
    sequencing_for_array,
    sequencing_for_iterator,
    sequencing_for_list,
    sequencing_for_sequence,
    sequencing_for_string,
)
from inorder.sequencing.views import OrderedView

__all__ = [
    "DEFAULT_REGISTRY",
    "ArraySequencing",
    "IteratorSequencing",
    "ListSequencing",
    "OrderedView",
    "SequenceSequencing",
    "Sequencing",
    "SequencingRegistry",
    "StringSequencing",
    "ViewSequencing",
    "build_default_registry",
    "check_in_order",
    "check_in_order_only",
    "check_the_same_elements_in_order_as",
    "contains_in_order",
    "contains_in_order_only",
    "contains_the_same_elements_in_order_as",
    "convert_equality_to_sequencing",
    "sequencing_for_array",
    "sequencing_for_iterator",
    "sequencing_for_list",
    "sequencing_for_sequence",
    "sequencing_for_string",
]
