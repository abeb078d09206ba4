# Metrics computation

import numpy as np
from typing import Dict, Optional, Sequence

from ..core.math_utils import population_std
from ..core.types import LapRecord, PerformanceMetrics, TelemetrySample, Track


DEFAULT_TRACK_LENGTH = 5.0  # km


def compute_performance_metrics(
    laps: Sequence[LapRecord],
    track: Optional[Track] = None,
) -> PerformanceMetrics:
    """Compute summary metrics for a sequence of laps.

    Args:
        laps: Recorded laps
        track: Track the laps were driven on, for total distance

    Returns:
        PerformanceMetrics; all zeros when there are no laps
    """
    if not laps:
        return PerformanceMetrics()

    lap_times = [lap.lap_time for lap in laps]
    speeds = [lap.speed for lap in laps]
    track_length = track.length if track is not None else DEFAULT_TRACK_LENGTH

    return PerformanceMetrics(
        best_lap=float(np.min(lap_times)),
        average_lap=float(np.mean(lap_times)),
        consistency=population_std(lap_times),
        top_speed=float(np.max(speeds)),
        average_speed=float(np.mean(speeds)),
        total_distance=len(laps) * track_length,
    )


def summarize_telemetry(samples: Sequence[TelemetrySample]) -> Dict[str, float]:
    """Compute summary statistics for a telemetry series.

    Args:
        samples: Telemetry samples

    Returns:
        Dict of computed metrics (empty if there are no samples)
    """
    metrics = {}

    if not samples:
        return metrics

    speeds = np.array([s.speed for s in samples])
    rpms = np.array([s.rpm for s in samples])

    metrics["duration"] = float(samples[-1].timestamp - samples[0].timestamp)
    metrics["top_speed"] = float(np.max(speeds))
    metrics["mean_speed"] = float(np.mean(speeds))
    metrics["min_speed"] = float(np.min(speeds))
    metrics["max_rpm"] = float(np.max(rpms))
    metrics["mean_rpm"] = float(np.mean(rpms))
    metrics["mean_throttle"] = float(np.mean([s.throttle for s in samples]))
    metrics["mean_brake"] = float(np.mean([s.brake for s in samples]))
    metrics["peak_lateral_g"] = float(np.max(np.abs([s.g_force_x for s in samples])))
    metrics["peak_vertical_g"] = float(np.max(np.abs([s.g_force_y for s in samples])))
    metrics["peak_longitudinal_g"] = float(np.max(np.abs([s.g_force_z for s in samples])))
    metrics["peak_total_g"] = float(np.max([s.g_forces.total for s in samples]))

    return metrics
