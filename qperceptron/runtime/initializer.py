import json
from pathlib import Path
from typing import Any, Dict, Optional

from qperceptron import config
from qperceptron.errors import InvalidArgumentError

DEFAULTS: Dict[str, Any] = {
    "alpha": 0.0,
    "n_points": config.POINTS,
    "n_iterations": config.ITERATIONS,
    "seed": config.SEED,
    "workers": config.WORKERS,
    "margin": config.MARGIN,
    "true_alpha": None,
}


def load_config(name="config.json", root: Optional[Path] = None) -> Dict[str, Any]:
    path = Path(name)
    if not path.is_absolute():
        path = (root if root is not None else config.CONFIG_DIR) / path
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidArgumentError(f"{path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise InvalidArgumentError(f"{path} must contain a JSON object")
    unknown = set(data) - set(DEFAULTS)
    if unknown:
        raise InvalidArgumentError(f"Unknown settings in {path}: {sorted(unknown)}")
    return data


def initialize(name="config.json", root: Optional[Path] = None, **overrides) -> Dict[str, Any]:
    """Driver settings: defaults, then the JSON file, then non-None overrides."""
    cfg = dict(DEFAULTS)
    cfg.update(load_config(name, root))
    cfg.update({k: v for k, v in overrides.items() if v is not None})
    return cfg

__all__ = ["DEFAULTS", "load_config", "initialize"]
