import json
from pathlib import Path
from typing import Any, Dict, Optional

from qperceptron.config import OUTPUT_DIR
from qperceptron.utils.logger import get_logger

logger = get_logger(__name__)


def save_metrics(metrics: Dict[str, Any], name: str = "metrics.json", out_dir: Optional[Path] = None) -> str:
    out_dir = Path(out_dir) if out_dir is not None else OUTPUT_DIR
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / name
    with open(path, "w", encoding="utf-8") as f:
        json.dump(metrics, f, indent=2, sort_keys=True)
    logger.info("Wrote metrics to %s", path)
    return str(path)


def load_metrics(path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)

__all__ = ["save_metrics", "load_metrics"]
