from inorder.equality.base import DEFAULT_EQUALITY, DefaultEquality, Equality, try_equality
from inorder.equality.normalization import (
    ComposedNormalization,
    FunctionNormalization,
    Normalization,
    TypedNormalization,
    as_normalization,
)
from inorder.equality.normalizing import ComposedNormalizingEquality, NormalizingEquality, after_being
from inorder.equality.strings import (
    BUILTIN_NORMALIZATIONS,
    case_folded,
    chain_by_names,
    collapsed_whitespace,
    lower_cased,
    normalization_by_name,
    trimmed,
    upper_cased,
)

__all__ = [
    "BUILTIN_NORMALIZATIONS",
    "DEFAULT_EQUALITY",
    "ComposedNormalization",
    "ComposedNormalizingEquality",
    "DefaultEquality",
    "Equality",
    "FunctionNormalization",
    "Normalization",
    "NormalizingEquality",
    "TypedNormalization",
    "after_being",
    "as_normalization",
    "case_folded",
    "chain_by_names",
    "collapsed_whitespace",
    "lower_cased",
    "normalization_by_name",
    "trimmed",
    "try_equality",
    "upper_cased",
]
