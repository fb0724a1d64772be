# commute_map/data/loader.py
"""
CSV import/export for point sets.
Files carry one point per row with ``lat`` and ``lng`` columns.
"""

from pathlib import Path
from typing import Iterable, Tuple, Union

import pandas as pd

from commute_map.core.errors import InvalidArgumentError
from commute_map.core.geometry import Coordinate

REQUIRED_COLUMNS = ("lat", "lng")


def load_points(csv_path: Union[str, Path]) -> Tuple[Coordinate, ...]:
    """Load points in file order. Rows with a missing value are skipped."""
    df = pd.read_csv(csv_path)

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise InvalidArgumentError(f"{csv_path}: missing columns {', '.join(missing)}")

    df = df.dropna(subset=list(REQUIRED_COLUMNS))
    points = tuple(
        Coordinate(lat=float(row["lat"]), lng=float(row["lng"]))
        for _, row in df.iterrows()
    )
    print(f"Loaded {len(points)} points from {csv_path}")
    return points


def save_points(points: Iterable[Coordinate], csv_path: Union[str, Path]) -> Path:
    df = pd.DataFrame([p.as_dict() for p in points], columns=list(REQUIRED_COLUMNS))
    df.to_csv(csv_path, index=False)
    return Path(csv_path)
