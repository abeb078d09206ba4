# Core module - Pure functions, no side effects
# FORBIDDEN: logging, pathlib, any I/O

from .types import (
    Corner,
    Sector,
    Track,
    GForces,
    TelemetrySample,
    LapRecord,
    Session,
    PerformanceMetrics,
    TireCompound,
    COMPOUND_PROFILES,
)
from .tracks import TRACKS, lookup_track_by_name, all_track_names
from .physics import speed_and_gear_to_rpm, compute_g_forces
from .degradation import tire_grip, fuel_consumed, TireState, FuelState
