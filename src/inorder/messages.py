from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from inorder.constants import MESSAGE_IN_ORDER_DUPLICATE
from inorder.errors import UnknownMessageError

DEFAULT_TEMPLATES: Mapping[str, str] = MappingProxyType(
    {
        MESSAGE_IN_ORDER_DUPLICATE: "inOrder contained a duplicate element: {0}",
    }
)


def _decorate(value: Any) -> str:
    # Strings are quoted so that "1" and 1 render differently in messages.
    return repr(value)


@dataclass(slots=True, frozen=True)
class MessageCatalog:
    templates: Mapping[str, str] = field(default_factory=lambda: DEFAULT_TEMPLATES)

    def lookup(self, key: str, *args: Any) -> str:
        try:
            template = self.templates[key]
        except KeyError:
            raise UnknownMessageError(f"Unknown failure message id: {key}", details={"key": key}) from None
        return template.format(*(_decorate(arg) for arg in args))

    def with_overrides(self, overrides: Mapping[str, str]) -> MessageCatalog:
        merged = dict(self.templates)
        merged.update({str(key): str(value) for key, value in overrides.items()})
        return MessageCatalog(templates=MappingProxyType(merged))


DEFAULT_MESSAGES = MessageCatalog()


def failure_message(key: str, *args: Any) -> str:
    return DEFAULT_MESSAGES.lookup(key, *args)


__all__ = [
    "DEFAULT_MESSAGES",
    "DEFAULT_TEMPLATES",
    "MessageCatalog",
    "failure_message",
]
