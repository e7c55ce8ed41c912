from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml

from wish_oracle.config import CONFIG_ENV_VAR, LimitsConfig, OracleConfig, load_config
from wish_oracle.vocabulary import DEFAULT_VOCABULARY


def test_default_config_builds_default_vocabulary(config: OracleConfig) -> None:
    assert config.vocabulary.build() == DEFAULT_VOCABULARY
    assert config.limits == LimitsConfig()


def test_load_yaml_with_overrides(tmp_path: Path) -> None:
    path = tmp_path / "oracle.yaml"
    path.write_text(
        yaml.safe_dump({"limits": {"image_count": 3}, "vocabulary": {"fallback_keywords": ["ember"]}}),
        encoding="utf8",
    )
    config = load_config(path, overrides=[{"limits": {"wish_max_length": 100}}])
    assert config.limits.image_count == 3
    assert config.limits.wish_max_length == 100
    assert config.limits.interpretation_limit == 200
    assert config.vocabulary.fallback_keywords == ["ember"]


def test_load_json_and_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "oracle.json"
    original = OracleConfig.from_dict({"limits": {"interpretation_limit": 120}})
    original.save(path)
    assert load_config(path) == original


def test_environment_variable_names_default_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "env.json"
    path.write_text(json.dumps({"limits": {"image_count": 2}}), encoding="utf8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    assert load_config().limits.image_count == 2


def test_non_mapping_root_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("- just\n- a list\n", encoding="utf8")
    with pytest.raises(TypeError):
        load_config(path)


def test_invalid_limits_are_rejected() -> None:
    with pytest.raises(ValueError):
        LimitsConfig(wish_min_length=10, wish_max_length=5)
    with pytest.raises(ValueError):
        OracleConfig.from_dict({"limits": {"image_count": 0}})


def test_empty_fallback_pool_is_rejected() -> None:
    with pytest.raises(ValueError):
        OracleConfig.from_dict({"vocabulary": {"fallback_keywords": []}}).vocabulary.build()


def test_empty_yaml_sections_use_defaults(tmp_path: Path) -> None:
    path = tmp_path / "oracle.yaml"
    path.write_text("vocabulary:\nlimits:\n", encoding="utf8")
    assert load_config(path) == OracleConfig()


def test_non_mapping_section_is_rejected() -> None:
    with pytest.raises(TypeError, match="'limits'"):
        OracleConfig.from_dict({"limits": ["image_count", 3]})
