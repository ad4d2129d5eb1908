"""YAML check cases evaluated by ``inorder check``.

A case file looks like::

    cases:
      - name: greetings
        mode: in_order
        normalize: [trimmed, lower_cased]
        actual: [" Hi", "there", "WORLD "]
        expected: [hi, world]

``shape`` defaults to ``string`` for string ``actual`` values and to
``list`` otherwise. ``normalize`` accepts built-in names and chain names
from ``inorder.yaml``.
"""

from __future__ import annotations

from array import array
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

import yaml

from inorder.config import InorderConfig
from inorder.constants import (
    EXIT_MISMATCH,
    EXIT_SUCCESS,
    EXIT_USAGE_ERROR,
    MODE_IN_ORDER,
    MODE_IN_ORDER_ONLY,
    MODE_SAME_ELEMENTS_IN_ORDER,
    MODES,
    SHAPE_ARRAY,
    SHAPE_ITERATOR,
    SHAPE_LIST,
    SHAPE_SEQUENCE,
    SHAPE_STRING,
    SHAPES,
)
from inorder.errors import ConfigError, InorderError

CaseStatus = Literal["PASS", "FAIL", "ERROR"]


@dataclass(slots=True)
class CheckCase:
    name: str
    mode: str
    actual: Any
    expected: list[Any]
    shape: str
    normalize: list[str] = field(default_factory=list)
    typecode: str = "q"


@dataclass(slots=True)
class CaseResult:
    case: CheckCase
    status: CaseStatus
    error: InorderError | None = None


@dataclass(slots=True)
class CheckOutcome:
    exit_code: int
    results: list[CaseResult] = field(default_factory=list)

    @property
    def failed(self) -> list[CaseResult]:
        return [result for result in self.results if result.status != "PASS"]


def _parse_case(raw: Any, index: int) -> CheckCase:
    if not isinstance(raw, dict):
        raise ConfigError(f"cases[{index}] must be a mapping")

    name = str(raw.get("name") or f"case-{index + 1}")
    mode = str(raw.get("mode", MODE_IN_ORDER))
    if mode not in MODES:
        raise ConfigError(f"cases[{index}].mode must be one of: {', '.join(MODES)}")

    if "actual" not in raw:
        raise ConfigError(f"cases[{index}].actual is required")
    actual = raw["actual"]
    expected = raw.get("expected") or []
    if not isinstance(expected, list):
        raise ConfigError(f"cases[{index}].expected must be a list")

    default_shape = SHAPE_STRING if isinstance(actual, str) else SHAPE_LIST
    shape = str(raw.get("shape", default_shape))
    if shape not in SHAPES:
        raise ConfigError(f"cases[{index}].shape must be one of: {', '.join(SHAPES)}")
    if shape == SHAPE_STRING and not isinstance(actual, str):
        raise ConfigError(f"cases[{index}].actual must be a string for shape {SHAPE_STRING}")
    if shape != SHAPE_STRING and not isinstance(actual, list):
        raise ConfigError(f"cases[{index}].actual must be a list for shape {shape}")

    normalize_raw = raw.get("normalize")
    if normalize_raw is None:
        normalize: list[str] = []
    elif isinstance(normalize_raw, str):
        normalize = [normalize_raw]
    elif isinstance(normalize_raw, list):
        normalize = [str(item) for item in normalize_raw]
    else:
        raise ConfigError(f"cases[{index}].normalize must be a string or list")

    return CheckCase(
        name=name,
        mode=mode,
        actual=actual,
        expected=expected,
        shape=shape,
        normalize=normalize,
        typecode=str(raw.get("typecode", "q")),
    )


def load_cases(path: Path) -> list[CheckCase]:
    try:
        loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}", details={"path": str(path)}) from exc
    if not isinstance(loaded, dict) or not isinstance(loaded.get("cases"), list):
        raise ConfigError(f"Case file must be a mapping with a 'cases' list: {path}")
    return [_parse_case(raw, index) for index, raw in enumerate(loaded["cases"])]


def _container_for(case: CheckCase) -> Any:
    if case.shape == SHAPE_STRING:
        return case.actual
    if case.shape == SHAPE_SEQUENCE:
        return tuple(case.actual)
    if case.shape == SHAPE_ITERATOR:
        return iter(case.actual)
    if case.shape == SHAPE_ARRAY:
        try:
            return array(case.typecode, case.actual)
        except (TypeError, ValueError, OverflowError) as exc:
            raise ConfigError(f"{case.name}: cannot build array({case.typecode!r}): {exc}") from exc
    return list(case.actual)


def evaluate_case(case: CheckCase, config: InorderConfig) -> CaseResult:
    try:
        equality = config.equality_for(case.normalize)
        sequencing = config.registry().for_shape(case.shape, equality)
        container = _container_for(case)
        if case.mode == MODE_IN_ORDER:
            matched = sequencing.contains_in_order(container, case.expected)
        elif case.mode == MODE_IN_ORDER_ONLY:
            matched = sequencing.contains_in_order_only(container, case.expected)
        elif case.mode == MODE_SAME_ELEMENTS_IN_ORDER:
            matched = sequencing.contains_the_same_elements_in_order_as(container, case.expected)
        else:
            raise ConfigError(f"Unsupported mode: {case.mode}")
    except InorderError as exc:
        return CaseResult(case=case, status="ERROR", error=exc)
    return CaseResult(case=case, status="PASS" if matched else "FAIL")


def run_cases(cases: list[CheckCase], config: InorderConfig) -> CheckOutcome:
    results = [evaluate_case(case, config) for case in cases]
    if any(result.status == "ERROR" for result in results):
        exit_code = EXIT_USAGE_ERROR
    elif any(result.status == "FAIL" for result in results):
        exit_code = EXIT_MISMATCH
    else:
        exit_code = EXIT_SUCCESS
    return CheckOutcome(exit_code=exit_code, results=results)


__all__ = [
    "CaseResult",
    "CheckCase",
    "CheckOutcome",
    "evaluate_case",
    "load_cases",
    "run_cases",
]
