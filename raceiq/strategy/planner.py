# Race strategy comparison
# FORBIDDEN: telemetry.*, session.*

import dataclasses
from dataclasses import dataclass, field
from typing import List

import numpy as np


RAIN_TOTAL_PENALTY = 30.0    # s
RAIN_PACE_PENALTY = 2.0      # s/lap on non-intermediate tires
RAIN_CONDITIONS = ("Light Rain",)


@dataclass
class Stint:
    compound: str
    start_lap: int
    end_lap: int
    fuel_load: float       # L
    expected_pace: float   # s/lap

    @property
    def laps(self) -> int:
        return max(0, self.end_lap - self.start_lap + 1)


@dataclass
class RaceStrategy:
    name: str
    stints: List[Stint] = field(default_factory=list)
    total_time: float = 0.0
    position: int = 0
    risk_level: str = "Low"

    @property
    def pit_stops(self) -> int:
        return max(0, len(self.stints) - 1)


@dataclass(frozen=True)
class ManeuverOutcome:
    success: bool
    probability: float   # % [5, 95]


def generate_strategies(
    race_laps: int = 53,
    average_lap_time: float = 92.3,
    pit_lane_delta: float = 22.5,
    weather: str = "Dry",
) -> List[RaceStrategy]:
    """Build the candidate race strategies ranked by total race time.

    Args:
        race_laps: Race distance in laps
        average_lap_time: Reference lap time in seconds
        pit_lane_delta: Time lost per pit stop in seconds
        weather: Weather condition name

    Returns:
        Strategies sorted fastest first, positions 1..n
    """
    base_time = average_lap_time * race_laps
    pace = average_lap_time

    strategies = [
        RaceStrategy(
            name="One Stop",
            stints=[
                Stint("Medium", 1, 35, 80.0, pace + 0.2),
                Stint("Hard", 36, race_laps, 45.0, pace + 0.5),
            ],
            # Heavier fuel load costs time
            total_time=base_time + pit_lane_delta + 15.0,
            risk_level="Low",
        ),
        RaceStrategy(
            name="Two Stop",
            stints=[
                Stint("Soft", 1, 18, 45.0, pace - 0.3),
                Stint("Medium", 19, 36, 45.0, pace),
                Stint("Soft", 37, race_laps, 40.0, pace - 0.2),
            ],
            total_time=base_time + pit_lane_delta * 2 - 8.0,
            risk_level="Medium",
        ),
        RaceStrategy(
            name="Aggressive",
            stints=[
                Stint("Soft", 1, 15, 35.0, pace - 0.5),
                Stint("Soft", 16, 30, 35.0, pace - 0.3),
                Stint("Medium", 31, race_laps, 50.0, pace + 0.1),
            ],
            total_time=base_time + pit_lane_delta * 2 - 12.0,
            risk_level="High",
        ),
        RaceStrategy(
            name="Conservative",
            stints=[
                Stint("Hard", 1, 40, 90.0, pace + 0.8),
                Stint("Medium", 41, race_laps, 35.0, pace + 0.3),
            ],
            total_time=base_time + pit_lane_delta + 25.0,
            risk_level="Low",
        ),
    ]

    if weather in RAIN_CONDITIONS:
        strategies = [_apply_rain(strategy) for strategy in strategies]

    strategies.sort(key=lambda s: s.total_time)
    for index, strategy in enumerate(strategies):
        strategy.position = index + 1

    return strategies


def _apply_rain(strategy: RaceStrategy) -> RaceStrategy:
    stints = [
        stint if stint.compound == "Intermediate"
        else dataclasses.replace(stint, expected_pace=stint.expected_pace + RAIN_PACE_PENALTY)
        for stint in strategy.stints
    ]
    return dataclasses.replace(
        strategy,
        stints=stints,
        total_time=strategy.total_time + RAIN_TOTAL_PENALTY,
    )


def strategy_risk(strategy: RaceStrategy, weather: str = "Dry") -> int:
    """Score strategy risk from 0 (safe) to 100.

    More stops, softer tires and rain all add risk.
    """
    score = strategy.pit_stops * 20
    for stint in strategy.stints:
        if stint.compound == "Soft":
            score += 15
        elif stint.compound == "Medium":
            score += 5
    if weather in RAIN_CONDITIONS:
        score += 25
    return min(100, score)


def _bounded_probability(ratio: float) -> float:
    return float(np.clip(ratio * 100.0, 5.0, 95.0))


def undercut_outcome(
    gap_to_target: float,
    pit_advantage: float,
    fresher_tire_advantage: float,
) -> ManeuverOutcome:
    """Estimate whether pitting first gains the position.

    Args:
        gap_to_target: Gap to the car ahead in seconds
        pit_advantage: Time gained from a faster stop in seconds
        fresher_tire_advantage: Time gained on the out lap in seconds

    Returns:
        ManeuverOutcome with probability in [5, 95] %
    """
    total_advantage = pit_advantage + fresher_tire_advantage
    if gap_to_target <= 0:
        return ManeuverOutcome(success=total_advantage > gap_to_target, probability=95.0)
    return ManeuverOutcome(
        success=total_advantage > gap_to_target,
        probability=_bounded_probability(total_advantage / gap_to_target),
    )


def overcut_outcome(
    gap_to_target: float,
    pit_advantage: float,
    pit_lane_delta: float,
    stay_out_laps: int = 3,
) -> ManeuverOutcome:
    """Estimate whether staying out longer gains the position.

    Args:
        gap_to_target: Gap to the car ahead in seconds
        pit_advantage: Time gained per extra lap on track in seconds
        pit_lane_delta: Time lost per pit stop in seconds
        stay_out_laps: Extra laps before pitting

    Returns:
        ManeuverOutcome with probability in [5, 95] %
    """
    required = gap_to_target + pit_lane_delta
    time_gained = pit_advantage * stay_out_laps
    if required <= 0:
        return ManeuverOutcome(success=time_gained > required, probability=95.0)
    return ManeuverOutcome(
        success=time_gained > required,
        probability=_bounded_probability(time_gained / required),
    )
