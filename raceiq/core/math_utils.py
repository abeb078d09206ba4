# Mathematical utilities
# FORBIDDEN: logging, any I/O

import numpy as np
from typing import Sequence, Tuple


def lap_progress(timestamp: float, lap_duration: float) -> float:
    """Fraction of the lap completed at a timestamp.

    Args:
        timestamp: Time since start in seconds
        lap_duration: Assumed lap length in seconds

    Returns:
        Progress in [0, 1)
    """
    return (timestamp % lap_duration) / lap_duration


def segment_position(progress: float, num_segments: int) -> Tuple[int, float]:
    """Split lap progress into a segment index and the fraction within it.

    Args:
        progress: Lap progress [0, 1)
        num_segments: Number of equal segments around the lap

    Returns:
        (segment index, fraction within segment [0, 1))
    """
    position = progress * num_segments
    index = int(np.floor(position))
    return min(index, num_segments - 1), float(position % 1.0)


def population_std(values: Sequence[float]) -> float:
    """Standard deviation dividing by n. Empty input gives 0."""
    if len(values) == 0:
        return 0.0
    return float(np.std(np.asarray(values, dtype=np.float64)))
