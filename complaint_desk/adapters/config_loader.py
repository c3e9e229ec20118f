"""Settings file loading helpers."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

import yaml


def load_config(path: str | Path) -> Dict[str, Any]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(path)
    with path.open("r", encoding="utf-8") as fh:
        if path.suffix.lower() in {".yaml", ".yml"}:
            data = yaml.safe_load(fh)
        else:
            data = json.load(fh)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {path} must contain a mapping")
    return {str(key).upper(): value for key, value in data.items()}
