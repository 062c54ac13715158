from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .models import AnalysisConfig


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}") from exc
    except OSError as exc:
        raise FileNotFoundError(f"Unable to read {path}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a YAML mapping in {path}")
    return data


def load_config(path: Path) -> AnalysisConfig:
    """Load analysis settings, resolving ``results_path`` against the config file's directory."""
    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")
    data = _load_yaml(path)
    results_path = data.get("results_path")
    if isinstance(results_path, str) and not Path(results_path).is_absolute():
        data["results_path"] = str((path.parent / results_path).resolve())
    return AnalysisConfig.model_validate(data)
