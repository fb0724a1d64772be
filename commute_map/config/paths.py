# commute_map/config/paths.py
import os
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent.parent
OUTPUT_DIR = Path(os.environ.get("COMMUTE_MAP_OUTPUT_DIR", PROJECT_ROOT / "output"))


def output_path(filename) -> Path:
    path = OUTPUT_DIR / filename
    path.parent.mkdir(parents=True, exist_ok=True)
    return path
