from __future__ import annotations

from pathlib import Path

import pytest

from inorder.config import InorderConfig, discover_config, load_config, load_project_config
from inorder.constants import MESSAGE_IN_ORDER_DUPLICATE, SHAPE_LIST
from inorder.equality import DEFAULT_EQUALITY, NormalizingEquality
from inorder.errors import ConfigError, DuplicateElementError, UnknownNormalizationError


def _write(path: Path, content: str) -> Path:
    path.write_text(content.strip() + "\n", encoding="utf-8")
    return path


def test_defaults_without_file(tmp_path: Path) -> None:
    config = load_project_config(tmp_path)
    assert config.source_path is None
    assert config.normalizations == {}
    assert config.equality_for(None) is DEFAULT_EQUALITY
    assert discover_config(tmp_path) is None


def test_load_messages_and_chains(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "inorder.yaml",
        """
messages:
  in_order_duplicate: "duplicate in expected list: {0}"
normalizations:
  loose: [trimmed, lower_cased]
  shout: upper_cased
""",
    )
    assert discover_config(tmp_path) == path

    config = load_project_config(tmp_path)
    assert config.source_path == path
    assert config.normalizations == {"loose": ("trimmed", "lower_cased"), "shout": ("upper_cased",)}
    assert config.messages.lookup(MESSAGE_IN_ORDER_DUPLICATE, "a") == "duplicate in expected list: 'a'"

    equality = config.equality_for("loose")
    assert isinstance(equality, NormalizingEquality)
    assert equality.are_equal("  HI ", "hi")
    assert config.expand_names(["loose", "shout"]) == ["trimmed", "lower_cased", "upper_cased"]


def test_registry_uses_configured_messages(tmp_path: Path) -> None:
    config = load_config(_write(tmp_path / "c.yaml", "messages:\n  in_order_duplicate: 'again {0}'"))
    sequencing = config.registry().for_shape(SHAPE_LIST)
    with pytest.raises(DuplicateElementError, match="again 1"):
        sequencing.contains_in_order([1], [1, 1])


def test_empty_file_is_default(tmp_path: Path) -> None:
    config = load_config(_write(tmp_path / "inorder.yaml", ""))
    assert config.normalizations == {}


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list",
        "messages: [1, 2]",
        "normalizations: [trimmed]",
        "normalizations:\n  loose: [reversed]",
        "normalizations:\n  trimmed: [lower_cased]",
        "normalizations:\n  empty: []",
        "normalizations:\n  bad: {a: 1}",
        "messages: {unterminated",
    ],
)
def test_invalid_config(tmp_path: Path, content: str) -> None:
    with pytest.raises(ConfigError):
        load_config(_write(tmp_path / "inorder.yaml", content))


def test_unknown_normalization_name() -> None:
    with pytest.raises(UnknownNormalizationError):
        InorderConfig().equality_for(["nope"])


def test_missing_config_file_is_a_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError) as excinfo:
        load_config(tmp_path / "missing.yaml")
    assert excinfo.value.details == {"path": str(tmp_path / "missing.yaml")}


def test_normalization_for_expands_chains() -> None:
    config = InorderConfig(normalizations={"loose": ("trimmed", "lower_cased")})
    assert config.normalization_for(["loose", "upper_cased"]).normalized(" Ab ") == "AB"
    with pytest.raises(UnknownNormalizationError):
        config.normalization_for([])
