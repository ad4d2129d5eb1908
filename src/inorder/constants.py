from __future__ import annotations

CONFIG_FILENAME = "inorder.yaml"

SHAPE_SEQUENCE = "sequence"
SHAPE_ITERATOR = "iterator"
SHAPE_ARRAY = "array"
SHAPE_LIST = "list"
SHAPE_STRING = "string"

# Resolution order matters: str is also a Sequence, list is also a Sequence.
SHAPES = (
    SHAPE_STRING,
    SHAPE_ARRAY,
    SHAPE_LIST,
    SHAPE_SEQUENCE,
    SHAPE_ITERATOR,
)

MODE_IN_ORDER = "in_order"
MODE_IN_ORDER_ONLY = "in_order_only"
MODE_SAME_ELEMENTS_IN_ORDER = "same_elements_in_order"

MODES = (
    MODE_IN_ORDER,
    MODE_IN_ORDER_ONLY,
    MODE_SAME_ELEMENTS_IN_ORDER,
)

MESSAGE_IN_ORDER_DUPLICATE = "in_order_duplicate"

EXIT_SUCCESS = 0
EXIT_MISMATCH = 1
EXIT_USAGE_ERROR = 2
