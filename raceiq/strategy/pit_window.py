# Pit window recommendation
# FORBIDDEN: telemetry.*, session.*

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..core.degradation import (
    FuelState,
    TireState,
    adjusted_consumption_rate,
    fuel_consumed,
    initial_grip_for,
    lap_time_penalty,
    tire_grip,
)
from ..core.types import COMPOUND_PROFILES, compound_name


GRIP_THRESHOLD = 70.0        # %
FUEL_LAPS_THRESHOLD = 5.0    # laps
DEFAULT_STINT_LAPS = 35


@dataclass(frozen=True)
class FuelParams:
    initial_fuel: float = 110.0      # L
    consumption_rate: float = 2.3    # L/lap
    saving_mode: int = 0             # 0, 1, 2


@dataclass(frozen=True)
class PitAdvice:
    grip: float
    fuel_laps_remaining: float
    pit_for_tires: bool
    pit_for_fuel: bool

    @property
    def pit_now(self) -> bool:
        return self.pit_for_tires or self.pit_for_fuel


class PitWindowAdvisor:
    """Compare projected tire and fuel state against pit thresholds."""

    def __init__(
        self,
        grip_threshold: float = GRIP_THRESHOLD,
        fuel_laps_threshold: float = FUEL_LAPS_THRESHOLD,
    ):
        self.grip_threshold = grip_threshold
        self.fuel_laps_threshold = fuel_laps_threshold

    def assess(self, grip: float, fuel_laps_remaining: float) -> PitAdvice:
        """Decide whether the car should pit now.

        Args:
            grip: Current tire grip in %
            fuel_laps_remaining: Laps of fuel left

        Returns:
            PitAdvice with the reason flags set
        """
        return PitAdvice(
            grip=grip,
            fuel_laps_remaining=fuel_laps_remaining,
            pit_for_tires=grip < self.grip_threshold,
            pit_for_fuel=fuel_laps_remaining < self.fuel_laps_threshold,
        )

    def assess_state(self, tire: TireState, fuel: FuelState) -> PitAdvice:
        return self.assess(tire.grip, fuel.fuel_laps_remaining)

    def find_optimal_pit_lap(
        self,
        race_laps: int,
        compound,
        throttle_percent: float = 75.0,
        fuel: Optional[FuelParams] = None,
        initial_grip: Optional[float] = None,
        track_length_km: Optional[float] = None,
    ) -> int:
        """Find the first lap at which a pit stop becomes necessary.

        Steps through the race lap by lap, projecting grip and fuel laps
        remaining, and stops at the first lap that crosses either threshold.

        Args:
            race_laps: Race distance in laps
            compound: Tire compound fitted at the start
            throttle_percent: Average throttle in %
            fuel: Starting fuel and consumption parameters
            initial_grip: Grip of the new tire; compound default if omitted
            track_length_km: Track length for fuel scaling

        Returns:
            Pit lap in [1, race_laps], the last lap if no threshold is crossed
        """
        if fuel is None:
            fuel = FuelParams()
        if initial_grip is None:
            initial_grip = initial_grip_for(compound)

        rate = adjusted_consumption_rate(fuel.consumption_rate, fuel.saving_mode)

        for lap in range(1, int(race_laps) + 1):
            grip = tire_grip(initial_grip, lap, compound)
            fuel_left = fuel.initial_fuel - fuel_consumed(lap, throttle_percent, track_length_km)
            advice = self.assess(grip, fuel_left / rate)
            if advice.pit_now:
                return lap

        return max(1, int(race_laps))

    def project_stint(
        self,
        compound,
        laps: Optional[int] = None,
        initial_grip: Optional[float] = None,
    ) -> List[Tuple[int, float, float]]:
        """Project grip over a stint.

        Args:
            compound: Tire compound
            laps: Stint length; the compound's maximum stint if omitted
            initial_grip: Grip of the new tire; compound default if omitted

        Returns:
            List of (lap, grip %, lap time penalty s) from lap 0
        """
        if laps is None:
            profile = COMPOUND_PROFILES.get(compound_name(compound))
            laps = profile.max_laps if profile is not None else DEFAULT_STINT_LAPS
        if initial_grip is None:
            initial_grip = initial_grip_for(compound)

        curve = []
        for lap in range(0, laps + 1):
            grip = tire_grip(initial_grip, lap, compound)
            curve.append((lap, grip, lap_time_penalty(grip)))
        return curve


def find_optimal_pit_lap(
    race_laps: int,
    compound,
    throttle_percent: float = 75.0,
    fuel: Optional[FuelParams] = None,
    track_length_km: Optional[float] = None,
) -> int:
    """Optimal pit lap using the default thresholds."""
    return PitWindowAdvisor().find_optimal_pit_lap(
        race_laps,
        compound,
        throttle_percent=throttle_percent,
        fuel=fuel,
        track_length_km=track_length_km,
    )
