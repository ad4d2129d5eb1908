"""inorder: normalized equality and ordered-containment checks.

The library layer has no dependency on typer; only ``inorder.cli`` does.
"""

from __future__ import annotations

from inorder.equality import (
    DEFAULT_EQUALITY,
    DefaultEquality,
    Equality,
    Normalization,
    NormalizingEquality,
    after_being,
    lower_cased,
    trimmed,
)
from inorder.errors import DuplicateElementError, InorderError
from inorder.sequencing import (
    DEFAULT_REGISTRY,
    Sequencing,
    contains_in_order,
    contains_in_order_only,
    contains_the_same_elements_in_order_as,
    convert_equality_to_sequencing,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_EQUALITY",
    "DEFAULT_REGISTRY",
    "DefaultEquality",
    "DuplicateElementError",
    "Equality",
    "InorderError",
    "Normalization",
    "NormalizingEquality",
    "Sequencing",
    "__version__",
    "after_being",
    "contains_in_order",
    "contains_in_order_only",
    "contains_the_same_elements_in_order_as",
    "convert_equality_to_sequencing",
    "lower_cased",
    "trimmed",
]
