# Lap recording and best-lap bookkeeping

import dataclasses
import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..core.types import LapRecord, Session


logger = logging.getLogger(__name__)

SECTOR_TOLERANCE = 0.1  # s

QUICK_LAP_BASE_TIMES = {
    "Monaco Grand Prix": 70.5,
    "Silverstone": 85.5,
    "Monza": 79.2,
}
DEFAULT_QUICK_LAP_BASE_TIME = 90.0


def personal_best_threshold(laps: Sequence[LapRecord]) -> float:
    """Fastest lap time so far, infinity if there are no laps."""
    if not laps:
        return float("inf")
    return min(lap.lap_time for lap in laps)


def session_best_threshold(laps: Sequence[LapRecord]) -> float:
    """Session best baseline. Currently the same as the personal best."""
    return personal_best_threshold(laps)


def record_lap(
    existing_laps: Sequence[LapRecord],
    new_lap: LapRecord,
) -> Tuple[List[LapRecord], LapRecord]:
    """Flag a new lap against the existing ones.

    A lap holding the best time loses its flag when the new lap beats it.
    Inputs are not modified.

    Args:
        existing_laps: Laps already in the session
        new_lap: Lap to add; its best flags are ignored

    Returns:
        (existing laps with revised flags, new lap with flags set)
    """
    personal_best = personal_best_threshold(existing_laps)
    session_best = session_best_threshold(existing_laps)

    flagged = dataclasses.replace(
        new_lap,
        is_personal_best=new_lap.lap_time < personal_best,
        is_session_best=new_lap.lap_time < session_best,
    )

    updated = []
    for lap in existing_laps:
        beaten = new_lap.lap_time < lap.lap_time
        updated.append(dataclasses.replace(
            lap,
            is_personal_best=False if lap.lap_time == personal_best and beaten else lap.is_personal_best,
            is_session_best=False if lap.lap_time == session_best and beaten else lap.is_session_best,
        ))

    return updated, flagged


def check_sector_times(
    lap: LapRecord,
    tolerance: float = SECTOR_TOLERANCE,
) -> Tuple[bool, List[str]]:
    """Check that sector times add up to the lap time.

    Args:
        lap: Lap record
        tolerance: Allowed difference in seconds

    Returns:
        (ok, list of warnings)
    """
    warnings = []
    difference = abs(lap.sector_sum - lap.lap_time)
    if difference > tolerance:
        warnings.append(
            f"Lap {lap.lap_number}: sector times sum to {lap.sector_sum:.3f}s "
            f"but lap time is {lap.lap_time:.3f}s"
        )
    return len(warnings) == 0, warnings


def add_lap(session: Session, lap: LapRecord) -> Tuple[Session, List[str]]:
    """Append a lap to a session.

    The lap is numbered after the existing laps and always accepted;
    sector mismatches are reported as warnings.

    Args:
        session: Current session
        lap: Lap to add

    Returns:
        (new session with the lap appended, warnings)
    """
    lap = dataclasses.replace(lap, lap_number=len(session.laps) + 1)
    _, warnings = check_sector_times(lap)
    for warning in warnings:
        logger.warning(warning)

    updated, flagged = record_lap(session.laps, lap)
    return dataclasses.replace(session, laps=updated + [flagged]), warnings


def generate_quick_lap(
    lap_type: str,
    lap_number: int,
    track_name: Optional[str] = None,
    rng: Optional[np.random.Generator] = None,
) -> LapRecord:
    """Create a synthetic lap around the track's typical lap time.

    Args:
        lap_type: "fast", "average" or "slow"
        lap_number: Number to give the lap
        track_name: Track display name
        rng: Random source

    Returns:
        LapRecord with sectors summing to the lap time
    """
    if rng is None:
        rng = np.random.default_rng()

    base_time = QUICK_LAP_BASE_TIMES.get(track_name, DEFAULT_QUICK_LAP_BASE_TIME)

    if lap_type == "fast":
        lap_time = base_time + (rng.random() - 0.8) * 2
        compound = "Soft"
    elif lap_type == "slow":
        lap_time = base_time + (rng.random() + 0.5) * 4
        compound = "Hard"
    else:
        lap_time = base_time + (rng.random() - 0.5) * 3
        compound = "Medium"

    sector1 = lap_time * (0.32 + (rng.random() - 0.5) * 0.04)
    sector2 = lap_time * (0.34 + (rng.random() - 0.5) * 0.04)
    sector3 = lap_time - sector1 - sector2

    return LapRecord(
        lap_number=lap_number,
        lap_time=float(lap_time),
        sector1=float(sector1),
        sector2=float(sector2),
        sector3=float(sector3),
        speed=float(200 + rng.random() * 150),
        compound=compound,
        fuel_load=float(60 + rng.random() * 40),
        notes=f"Generated {lap_type} lap",
    )
