# Telemetry series persistence for playback
# IMPURE - file I/O

import csv
import dataclasses
import logging
from pathlib import Path
from typing import List, Sequence

from ..core.types import TelemetrySample


logger = logging.getLogger(__name__)

FIELDNAMES = [f.name for f in dataclasses.fields(TelemetrySample)]


def save_telemetry_csv(samples: Sequence[TelemetrySample], path: Path) -> Path:
    """Write a telemetry series to CSV.

    Args:
        samples: Telemetry samples
        path: Output file; parent directories are created

    Returns:
        Path written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDNAMES)
        writer.writeheader()
        for sample in samples:
            writer.writerow(sample.to_dict())

    logger.info(f"Saved {len(samples)} telemetry samples to {path}")
    return path


def load_telemetry_csv(path: Path) -> List[TelemetrySample]:
    """Read a telemetry series written by save_telemetry_csv.

    Args:
        path: CSV file

    Returns:
        List of samples in file order
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Telemetry file not found: {path}")

    samples = []
    with open(path, newline="") as f:
        for row in csv.DictReader(f):
            samples.append(TelemetrySample(
                timestamp=float(row["timestamp"]),
                speed=float(row["speed"]),
                rpm=float(row["rpm"]),
                throttle=float(row["throttle"]),
                brake=float(row["brake"]),
                g_force_x=float(row["g_force_x"]),
                g_force_y=float(row["g_force_y"]),
                g_force_z=float(row["g_force_z"]),
                gear=int(row["gear"]),
            ))
    return samples
