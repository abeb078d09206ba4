# Tire and fuel degradation models
# FORBIDDEN: logging, any I/O

from dataclasses import dataclass
from typing import Optional
import numpy as np

from .types import COMPOUND_PROFILES, compound_name


DEFAULT_DECAY_RATE = 0.05
BASE_FUEL_PER_LAP = 2.3      # L/lap
REFERENCE_TRACK_LENGTH = 5.0  # km

# Per-lap consumption reduction (L) and lap time cost (s) per fuel saving mode
FUEL_SAVING_REDUCTION = (0.0, 0.2, 0.4)
FUEL_SAVING_PENALTY = (0.0, 0.1, 0.3)
MIN_CONSUMPTION_RATE = 1.5


def decay_rate(compound) -> float:
    """Exponential grip decay rate per lap for a compound."""
    profile = COMPOUND_PROFILES.get(compound_name(compound))
    if profile is None:
        return DEFAULT_DECAY_RATE
    return profile.decay_rate


def initial_grip_for(compound) -> float:
    """Grip of a new tire in %, 100 for unknown compounds."""
    profile = COMPOUND_PROFILES.get(compound_name(compound))
    return profile.initial_grip if profile is not None else 100.0


def tire_grip(initial_grip: float, laps_completed: float, compound) -> float:
    """Calculate remaining tire grip.

    grip = initial_grip * exp(-rate * laps)

    Args:
        initial_grip: Grip of a new tire in %
        laps_completed: Laps run on the tire (negative treated as 0)
        compound: Tire compound name, unknown names use the default rate

    Returns:
        Grip in % [0, 100]
    """
    laps = max(0.0, laps_completed)
    grip = initial_grip * np.exp(-decay_rate(compound) * laps)
    return float(np.clip(grip, 0.0, 100.0))


def fuel_consumed(
    laps_completed: float,
    throttle_percent: float = 75.0,
    track_length_km: Optional[float] = None,
) -> float:
    """Calculate fuel burned over a number of laps.

    Args:
        laps_completed: Laps driven (negative treated as 0)
        throttle_percent: Average throttle in % [0, 100]
        track_length_km: Track length; consumption scales against a 5 km lap

    Returns:
        Fuel consumed in liters
    """
    laps = max(0.0, laps_completed)
    throttle = float(np.clip(throttle_percent, 0.0, 100.0))

    throttle_multiplier = 0.6 + (throttle / 100.0) * 0.8
    if track_length_km is not None:
        track_multiplier = track_length_km / REFERENCE_TRACK_LENGTH
    else:
        track_multiplier = 1.0

    return laps * BASE_FUEL_PER_LAP * throttle_multiplier * track_multiplier


def lap_time_penalty(grip: float) -> float:
    """Lap time lost to tire wear in seconds, 0.02 s per grip point lost."""
    return (100.0 - grip) * 0.02


def _saving_mode_index(mode: int) -> int:
    return int(np.clip(mode, 0, len(FUEL_SAVING_REDUCTION) - 1))


def adjusted_consumption_rate(consumption_rate: float, saving_mode: int = 0) -> float:
    """Per-lap consumption after fuel saving, never below 1.5 L/lap."""
    reduction = FUEL_SAVING_REDUCTION[_saving_mode_index(saving_mode)]
    return max(MIN_CONSUMPTION_RATE, consumption_rate - reduction)


def fuel_saving_penalty(saving_mode: int) -> float:
    return FUEL_SAVING_PENALTY[_saving_mode_index(saving_mode)]


@dataclass(frozen=True)
class TireState:
    """Derived tire condition after a number of laps."""
    compound: str
    laps_used: float
    initial_grip: Optional[float] = None

    @property
    def starting_grip(self) -> float:
        if self.initial_grip is not None:
            return self.initial_grip
        return initial_grip_for(self.compound)

    @property
    def grip(self) -> float:
        return tire_grip(self.starting_grip, self.laps_used, self.compound)

    @property
    def lap_time_penalty(self) -> float:
        return lap_time_penalty(self.grip)


@dataclass(frozen=True)
class FuelState:
    """Derived fuel situation after a number of laps."""
    initial_fuel: float
    consumption_rate: float
    throttle_percent: float = 75.0
    laps_completed: float = 0.0
    track_length_km: Optional[float] = None
    saving_mode: int = 0

    @property
    def fuel_used(self) -> float:
        return fuel_consumed(self.laps_completed, self.throttle_percent, self.track_length_km)

    @property
    def fuel_remaining(self) -> float:
        return max(0.0, self.initial_fuel - self.fuel_used)

    @property
    def effective_consumption_rate(self) -> float:
        return adjusted_consumption_rate(self.consumption_rate, self.saving_mode)

    @property
    def fuel_laps_remaining(self) -> float:
        return self.fuel_remaining / self.effective_consumption_rate
