# Synthetic telemetry generation
# FORBIDDEN: analysis.*, strategy.*, session.*

import logging
from typing import Iterator, List, Optional, Tuple, Union
import numpy as np

from ..core.math_utils import lap_progress, segment_position
from ..core.physics import compute_g_forces, speed_and_gear_to_rpm
from ..core.tracks import lookup_track_by_name
from ..core.types import Corner, TelemetrySample, Track


logger = logging.getLogger(__name__)


SAMPLE_RATE_HZ = 10
SAMPLE_INTERVAL = 1.0 / SAMPLE_RATE_HZ
# Lap progress assumes a fixed lap cycle regardless of the track's lap record
ASSUMED_LAP_DURATION = 90.0

INITIAL_SPEED = 80.0   # km/h
INITIAL_GEAR = 2
MIN_SPEED = 50.0
MAX_SPEED = 350.0
SPEED_SMOOTHING = 0.1
SPEED_NOISE = 2.5
THROTTLE_NOISE = 5.0
BRAKE_NOISE = 2.5

APPROACH_FRACTION = 0.7
CORNER_WINDOW = (0.8, 0.95)

# (target speed, throttle, brake) without track geometry
STRAIGHT_LINE_TARGET = (250.0, 80.0, 0.0)
MAX_STRAIGHT_SPEED = 320.0
STRAIGHT_SPEED_MARGIN = 50.0


def driving_targets(corner: Corner, fraction: float) -> Tuple[float, float, float]:
    """Target speed, throttle and brake for a position relative to a corner.

    Args:
        corner: Active corner
        fraction: Progress within the corner's lap segment [0, 1)

    Returns:
        (target speed km/h, throttle %, brake %)
    """
    approaching = fraction > APPROACH_FRACTION
    in_corner = CORNER_WINDOW[0] < fraction < CORNER_WINDOW[1]

    if approaching and corner.braking_zone:
        return float(corner.entry_speed), 20.0, 60.0
    if in_corner:
        return float(corner.exit_speed), 40.0, 0.0
    return min(MAX_STRAIGHT_SPEED, corner.exit_speed + STRAIGHT_SPEED_MARGIN), 85.0, 0.0


class TelemetrySynthesizer:
    """Generate 10 Hz telemetry by driving a simple model around a track.

    Each call produces an independent series. Pass a seeded generator
    for reproducible output.
    """

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        max_duration_s: float = 3600.0,
    ):
        """Initialize synthesizer.

        Args:
            rng: Random source for speed, pedal and G-force noise
            max_duration_s: Longest series a single call may produce
        """
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_duration_s = max_duration_s

    def _resolve_track(self, track: Union[Track, str, None]) -> Optional[Track]:
        if isinstance(track, str):
            resolved = lookup_track_by_name(track)
            if resolved is None:
                logger.warning(f"Unknown track '{track}', simulating straight-line driving")
            return resolved
        return track

    def _num_samples(self, duration_seconds: float) -> int:
        duration = max(0.0, float(duration_seconds))
        if duration > self.max_duration_s:
            logger.warning(
                f"Requested duration {duration:.1f}s exceeds limit, "
                f"clamping to {self.max_duration_s:.1f}s"
            )
            duration = self.max_duration_s
        return int(round(duration * SAMPLE_RATE_HZ))

    def iter_samples(
        self,
        duration_seconds: float,
        track: Union[Track, str, None] = None,
    ) -> Iterator[TelemetrySample]:
        """Lazily yield telemetry samples.

        Args:
            duration_seconds: Length of the series in seconds
            track: Track or track name; None drives a straight line

        Yields:
            TelemetrySample at 0.1 s steps starting from 0.0
        """
        track = self._resolve_track(track)
        num_samples = self._num_samples(duration_seconds)
        corners = track.corners if track is not None else ()

        current_speed = INITIAL_SPEED
        current_gear = INITIAL_GEAR
        previous_speed = None

        for i in range(num_samples):
            timestamp = i / SAMPLE_RATE_HZ

            target_speed, throttle, brake = STRAIGHT_LINE_TARGET
            if corners:
                progress = lap_progress(timestamp, ASSUMED_LAP_DURATION)
                index, fraction = segment_position(progress, len(corners))
                corner = corners[index]
                target_speed, throttle, brake = driving_targets(corner, fraction)
                current_gear = corner.gear

            current_speed += (
                (target_speed - current_speed) * SPEED_SMOOTHING
                + self.rng.uniform(-SPEED_NOISE, SPEED_NOISE)
            )
            current_speed = float(np.clip(current_speed, MIN_SPEED, MAX_SPEED))

            rpm = speed_and_gear_to_rpm(current_speed, current_gear)

            # First sample has no history, so it has zero longitudinal load
            if previous_speed is None:
                previous_speed = current_speed
            g_forces = compute_g_forces(
                current_speed,
                previous_speed,
                SAMPLE_INTERVAL,
                rng=self.rng,
            )

            throttle = throttle + self.rng.uniform(-THROTTLE_NOISE, THROTTLE_NOISE)
            brake = brake + self.rng.uniform(-BRAKE_NOISE, BRAKE_NOISE)

            yield TelemetrySample(
                timestamp=timestamp,
                speed=current_speed,
                rpm=rpm,
                throttle=float(np.clip(throttle, 0.0, 100.0)),
                brake=float(np.clip(brake, 0.0, 100.0)),
                g_force_x=g_forces.x,
                g_force_y=g_forces.y,
                g_force_z=g_forces.z,
                gear=int(current_gear),
            )
            previous_speed = current_speed

    def generate(
        self,
        duration_seconds: float,
        track: Union[Track, str, None] = None,
    ) -> List[TelemetrySample]:
        """Generate a complete telemetry series.

        Args:
            duration_seconds: Length of the series in seconds
            track: Track or track name; None drives a straight line

        Returns:
            List of duration * 10 samples
        """
        samples = list(self.iter_samples(duration_seconds, track))
        logger.debug(f"Generated {len(samples)} telemetry samples")
        return samples


def generate_telemetry(
    duration_seconds: float,
    track: Union[Track, str, None] = None,
    rng: Optional[np.random.Generator] = None,
) -> List[TelemetrySample]:
    """Generate telemetry with a one-off synthesizer."""
    return TelemetrySynthesizer(rng=rng).generate(duration_seconds, track)
