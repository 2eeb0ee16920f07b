from __future__ import annotations
from typing import Any, Dict
from pathlib import Path
import os
import sys

import yaml

CONFIG_DEFAULT_PATH = Path(os.path.expanduser("~/.config/portpick/config.yml"))

DEFAULT_CONFIG: Dict[str, Any] = {
    "color": True,
}


def load_config(path: Path | str | None = CONFIG_DEFAULT_PATH) -> Dict[str, Any]:
    cfg = DEFAULT_CONFIG.copy()
    if path is None or not Path(path).exists():
        return cfg
    try:
        data = yaml.safe_load(Path(path).read_text()) or {}
        if not isinstance(data, dict):
            raise ValueError("top level must be a mapping")
        cfg.update({k: v for k, v in data.items() if k in DEFAULT_CONFIG})
    except (OSError, yaml.YAMLError, ValueError) as e:
        print(f"Warning: Could not load config {path}: {e}", file=sys.stderr)
    return cfg
