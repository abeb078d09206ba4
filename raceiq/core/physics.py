# Kinematics and G-force calculations
# FORBIDDEN: logging, any I/O
# Simplified models for dashboard telemetry, not vehicle dynamics

from typing import Optional
import numpy as np

from .types import GForces, Track


IDLE_RPM = 800.0
MAX_RPM = 15000.0

# Index 0 is neutral
GEAR_RATIOS = (0.0, 3.2, 2.4, 1.9, 1.5, 1.2, 1.0, 0.85, 0.72)
FINAL_DRIVE_RATIO = 3.5
WHEEL_DIAMETER = 0.66  # m
MIN_GEAR = 1
MAX_GEAR = 8

GRAVITY = 9.81

LATERAL_G_LIMIT = 4.0
VERTICAL_G_LIMIT = 3.0
LONGITUDINAL_G_LIMIT = 5.0


def speed_and_gear_to_rpm(speed: float, gear: int) -> float:
    """Calculate engine RPM from road speed and selected gear.

    Args:
        speed: Vehicle speed in km/h
        gear: Selected gear, 0 is neutral

    Returns:
        Engine RPM in [800, 15000]
    """
    if gear == 0 or speed == 0:
        return IDLE_RPM

    gear_ratio = GEAR_RATIOS[int(np.clip(gear, MIN_GEAR, MAX_GEAR))]
    wheel_circumference = np.pi * WHEEL_DIAMETER

    # km/h -> m/s -> wheel revolutions per minute
    wheel_rpm = (speed * 1000.0 / 3600.0) / wheel_circumference * 60.0
    engine_rpm = wheel_rpm * gear_ratio * FINAL_DRIVE_RATIO

    return float(np.clip(engine_rpm, IDLE_RPM, MAX_RPM))


def gear_for_speed(speed: float) -> int:
    """Pick a gear for a given speed, one gear per 45 km/h band."""
    return int(np.clip(np.floor(speed / 45.0) + 1, MIN_GEAR, MAX_GEAR))


def compute_g_forces(
    speed: float,
    previous_speed: float,
    delta_time: float,
    corner_type: Optional[str] = None,
    track: Optional[Track] = None,
    rng: Optional[np.random.Generator] = None,
) -> GForces:
    """Calculate the 3-axis G-force vector for one sample.

    Longitudinal force is the speed delta over time in g. Lateral force
    follows the expected corner load when a matching corner exists on the
    track, otherwise it is general driving noise. Vertical force is
    gravity plus a downforce baseline.

    Args:
        speed: Current speed
        previous_speed: Speed at the previous sample
        delta_time: Time between samples in seconds
        corner_type: Optional corner type (slow, medium, fast)
        track: Track used to resolve the corner type
        rng: Random source; a fresh unseeded generator if omitted

    Returns:
        GForces with x in [-4, 4], y in [-3, 3], z in [-5, 5]
    """
    if rng is None:
        rng = np.random.default_rng()

    if delta_time > 0:
        g_z = (speed - previous_speed) / delta_time / GRAVITY
    else:
        g_z = 0.0

    corner = None
    if corner_type is not None and track is not None:
        corner = track.corner_of_type(corner_type)

    if corner is not None:
        speed_factor = speed / corner.entry_speed
        g_x = corner.g_force_expected * speed_factor * rng.uniform(0.85, 1.15)
    else:
        g_x = rng.uniform(-1.0, 1.0)

    g_y = rng.uniform(-1.0, -0.5)

    return GForces(
        x=float(np.clip(np.nan_to_num(g_x), -LATERAL_G_LIMIT, LATERAL_G_LIMIT)),
        y=float(np.clip(g_y, -VERTICAL_G_LIMIT, VERTICAL_G_LIMIT)),
        z=float(np.clip(np.nan_to_num(g_z), -LONGITUDINAL_G_LIMIT, LONGITUDINAL_G_LIMIT)),
    )
