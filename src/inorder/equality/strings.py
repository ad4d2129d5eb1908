from __future__ import annotations

from collections.abc import Iterable
from types import MappingProxyType

from inorder.equality.normalization import FunctionNormalization, Normalization
from inorder.errors import UnknownNormalizationError

trimmed: Normalization[str] = FunctionNormalization(element_type=str, func=str.strip, name="trimmed")
lower_cased: Normalization[str] = FunctionNormalization(element_type=str, func=str.lower, name="lower_cased")
upper_cased: Normalization[str] = FunctionNormalization(element_type=str, func=str.upper, name="upper_cased")
case_folded: Normalization[str] = FunctionNormalization(element_type=str, func=str.casefold, name="case_folded")


def _collapse_whitespace(value: str) -> str:
    return " ".join(value.split())


collapsed_whitespace: Normalization[str] = FunctionNormalization(
    element_type=str,
    func=_collapse_whitespace,
    name="collapsed_whitespace",
)

BUILTIN_NORMALIZATIONS = MappingProxyType(
    {
        "trimmed": trimmed,
        "lower_cased": lower_cased,
        "upper_cased": upper_cased,
        "case_folded": case_folded,
        "collapsed_whitespace": collapsed_whitespace,
    }
)


def normalization_by_name(name: str) -> Normalization[str]:
    try:
        return BUILTIN_NORMALIZATIONS[name]
    except KeyError:
        known = ", ".join(sorted(BUILTIN_NORMALIZATIONS))
        raise UnknownNormalizationError(
            f"Unknown normalization: {name}. Known: {known}",
            details={"name": name},
        ) from None


def chain_by_names(names: Iterable[str]) -> Normalization[str]:
    resolved = [normalization_by_name(name) for name in names]
    if not resolved:
        raise UnknownNormalizationError("At least one normalization name is required")
    composed = resolved[0]
    for other in resolved[1:]:
        composed = composed & other
    return composed


__all__ = [
    "BUILTIN_NORMALIZATIONS",
    "case_folded",
    "chain_by_names",
    "collapsed_whitespace",
    "lower_cased",
    "normalization_by_name",
    "trimmed",
    "upper_cased",
]
