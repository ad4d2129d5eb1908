from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from inorder.constants import CONFIG_FILENAME
from inorder.equality.base import DEFAULT_EQUALITY, Equality
from inorder.equality.normalization import Normalization
from inorder.equality.normalizing import after_being
from inorder.equality.strings import BUILTIN_NORMALIZATIONS, chain_by_names
from inorder.errors import ConfigError
from inorder.messages import DEFAULT_MESSAGES, MessageCatalog
from inorder.sequencing.registry import SequencingRegistry, build_default_registry


@dataclass(slots=True)
class InorderConfig:
    messages: MessageCatalog = field(default_factory=lambda: DEFAULT_MESSAGES)
    normalizations: dict[str, tuple[str, ...]] = field(default_factory=dict)
    source_path: Path | None = None

    def expand_names(self, names: str | list[str] | tuple[str, ...]) -> list[str]:
        requested = [names] if isinstance(names, str) else list(names)
        expanded: list[str] = []
        for name in requested:
            if name in self.normalizations:
                expanded.extend(self.normalizations[name])
            else:
                expanded.append(name)
        return expanded

    def normalization_for(self, names: str | list[str] | tuple[str, ...]) -> Normalization[str]:
        return chain_by_names(self.expand_names(names))

    def equality_for(self, names: str | list[str] | tuple[str, ...] | None) -> Equality[Any]:
        if not names:
            return DEFAULT_EQUALITY
        return after_being(self.normalization_for(names))

    def registry(self) -> SequencingRegistry:
        return build_default_registry(messages=self.messages)


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}", details={"path": str(path)}) from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}", details={"path": str(path)}) from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"Config file must be a mapping: {path}", details={"path": str(path)})
    return loaded


def _parse_string_list(raw: Any, *, field_name: str) -> list[str]:
    if raw is None:
        return []
    if isinstance(raw, str):
        return [raw]
    if not isinstance(raw, list):
        raise ConfigError(f"{field_name} must be a list")
    return [str(item) for item in raw]


def _parse_messages(raw: Any) -> MessageCatalog:
    if raw is None:
        return DEFAULT_MESSAGES
    if not isinstance(raw, dict):
        raise ConfigError("messages must be a mapping of message id to template")
    return DEFAULT_MESSAGES.with_overrides({str(key): str(value) for key, value in raw.items()})


def _parse_normalizations(raw: Any) -> dict[str, tuple[str, ...]]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError("normalizations must be a mapping of chain name to normalization names")

    chains: dict[str, tuple[str, ...]] = {}
    for name, steps_raw in raw.items():
        chain_name = str(name)
        if chain_name in BUILTIN_NORMALIZATIONS:
            raise ConfigError(f"normalizations.{chain_name} shadows a built-in normalization")
        steps = _parse_string_list(steps_raw, field_name=f"normalizations.{chain_name}")
        if not steps:
            raise ConfigError(f"normalizations.{chain_name} must name at least one normalization")
        for step in steps:
            # Chains may only reference built-ins, so expansion never recurses.
            if step not in BUILTIN_NORMALIZATIONS:
                raise ConfigError(
                    f"normalizations.{chain_name} references unknown normalization: {step}",
                    details={"chain": chain_name, "name": step},
                )
        chains[chain_name] = tuple(steps)
    return chains


def load_config(path: Path) -> InorderConfig:
    raw = _load_yaml(path)
    return InorderConfig(
        messages=_parse_messages(raw.get("messages")),
        normalizations=_parse_normalizations(raw.get("normalizations")),
        source_path=path,
    )


def discover_config(project_root: Path) -> Path | None:
    candidate = project_root / CONFIG_FILENAME
    if candidate.is_file():
        return candidate
    return None


def load_project_config(project_root: Path) -> InorderConfig:
    path = discover_config(project_root)
    if path is None:
        return InorderConfig()
    return load_config(path)


__all__ = [
    "InorderConfig",
    "discover_config",
    "load_config",
    "load_project_config",
]
