from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from playwright_perf.config.loader import load_config
from playwright_perf.config.models import AnalysisConfig


def _write_yaml(path: Path, data: dict) -> None:
    path.write_text(yaml.safe_dump(data), encoding="utf-8")


def test_defaults_match_report_conventions() -> None:
    config = AnalysisConfig()

    assert config.results_path == "test-results/test-results.json"
    assert config.slow_threshold_ms == 5000
    assert config.fast_threshold_ms == 1000
    assert config.fast_limit == 10


def test_load_config_resolves_results_path(tmp_path: Path) -> None:
    config_path = tmp_path / "perf.yaml"
    _write_yaml(
        config_path,
        {"results_path": "out/results.json", "slow_threshold_ms": 3000},
    )

    config = load_config(config_path)

    assert config.results_path == str((tmp_path / "out/results.json").resolve())
    assert config.slow_threshold_ms == 3000
    assert config.fast_threshold_ms == 1000


def test_load_config_empty_file_uses_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "perf.yaml"
    config_path.write_text("", encoding="utf-8")

    assert load_config(config_path) == AnalysisConfig()


def test_load_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    config_path = tmp_path / "perf.yaml"
    config_path.write_text("- 1\n- 2\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Expected a YAML mapping"):
        load_config(config_path)


def test_load_config_rejects_unknown_keys(tmp_path: Path) -> None:
    config_path = tmp_path / "perf.yaml"
    _write_yaml(config_path, {"slow_threshold": 10})

    with pytest.raises(ValidationError):
        load_config(config_path)
