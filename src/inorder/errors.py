from __future__ import annotations

from typing import Any

ERROR_CODE_IN_ORDER_DUPLICATE = "IN_ORDER_DUPLICATE"
ERROR_CODE_UNSUPPORTED_SHAPE = "UNSUPPORTED_SHAPE"
ERROR_CODE_UNKNOWN_NORMALIZATION = "UNKNOWN_NORMALIZATION"
ERROR_CODE_UNKNOWN_MESSAGE = "UNKNOWN_MESSAGE"
ERROR_CODE_INVALID_CONFIG = "INVALID_CONFIG"


class InorderError(Exception):
    """Base class for errors raised by inorder.

    Every error carries a stable ``code`` so callers (an assertion DSL, the
    CLI) can branch on the failure kind without parsing the message.
    """

    code: str = "INORDER_ERROR"

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details: dict[str, Any] = dict(details or {})

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class DuplicateElementError(InorderError, ValueError):
    """The expected elements given to an in-order check contain a duplicate."""

    code = ERROR_CODE_IN_ORDER_DUPLICATE

    def __init__(self, message: str, *, element: Any) -> None:
        super().__init__(message, details={"element": element})
        self.element = element


class UnsupportedShapeError(InorderError, TypeError):
    code = ERROR_CODE_UNSUPPORTED_SHAPE


class UnknownNormalizationError(InorderError, LookupError):
    code = ERROR_CODE_UNKNOWN_NORMALIZATION


class UnknownMessageError(InorderError, KeyError):
    code = ERROR_CODE_UNKNOWN_MESSAGE

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return self.message


class ConfigError(InorderError, ValueError):
    code = ERROR_CODE_INVALID_CONFIG


__all__ = [
    "ERROR_CODE_INVALID_CONFIG",
    "ERROR_CODE_IN_ORDER_DUPLICATE",
    "ERROR_CODE_UNKNOWN_MESSAGE",
    "ERROR_CODE_UNKNOWN_NORMALIZATION",
    "ERROR_CODE_UNSUPPORTED_SHAPE",
    "ConfigError",
    "DuplicateElementError",
    "InorderError",
    "UnknownMessageError",
    "UnknownNormalizationError",
    "UnsupportedShapeError",
]
