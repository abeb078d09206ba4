# Core type definitions
# FORBIDDEN: logging, any I/O

from dataclasses import dataclass, field, asdict
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Tuple
import numpy as np


class TireCompound(str, Enum):
    SOFT = "Soft"
    MEDIUM = "Medium"
    HARD = "Hard"
    INTERMEDIATE = "Intermediate"
    WET = "Wet"


class CornerType(str, Enum):
    SLOW = "slow"
    MEDIUM = "medium"
    FAST = "fast"


class SessionType(str, Enum):
    PRACTICE = "Practice"
    QUALIFYING = "Qualifying"
    RACE = "Race"


class WeatherCondition(str, Enum):
    DRY = "Dry"
    LIGHT_RAIN = "Light Rain"
    HEAVY_RAIN = "Heavy Rain"
    CLOUDY = "Cloudy"
    SUNNY = "Sunny"


def compound_name(compound) -> str:
    """Plain string name of a compound given as enum or string."""
    if isinstance(compound, TireCompound):
        return compound.value
    return str(compound)


@dataclass(frozen=True)
class Corner:
    """Reference geometry for a single corner."""
    number: int
    name: str
    type: str                # slow | medium | fast
    entry_speed: float       # km/h
    exit_speed: float        # km/h
    gear: int                # 1-8
    braking_zone: bool
    g_force_expected: float  # g


@dataclass(frozen=True)
class Sector:
    number: int
    length: float            # km
    corners: Tuple[int, ...]
    expected_time: float     # s


@dataclass(frozen=True)
class Track:
    """Immutable track reference data."""
    name: str
    length: float            # km
    turns: int
    lap_record: float        # s
    sectors: Tuple[Sector, ...]
    corners: Tuple[Corner, ...]

    def corner_of_type(self, corner_type: str) -> Optional[Corner]:
        """First corner whose type matches, or None."""
        wanted = corner_type.value if isinstance(corner_type, CornerType) else corner_type
        for corner in self.corners:
            if corner.type == wanted:
                return corner
        return None

    def corner_by_number(self, number: int) -> Optional[Corner]:
        for corner in self.corners:
            if corner.number == number:
                return corner
        return None

    @property
    def sector_length_total(self) -> float:
        return float(sum(s.length for s in self.sectors))


@dataclass(frozen=True)
class GForces:
    """3-axis force vector in g. x lateral, y vertical, z longitudinal."""
    x: float
    y: float
    z: float

    @property
    def total(self) -> float:
        return float(np.sqrt(self.x ** 2 + self.y ** 2 + self.z ** 2))


@dataclass(frozen=True)
class TelemetrySample:
    """One 10 Hz telemetry frame."""
    timestamp: float   # s
    speed: float       # km/h
    rpm: float
    throttle: float    # %
    brake: float       # %
    g_force_x: float
    g_force_y: float
    g_force_z: float
    gear: int

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

    @property
    def g_forces(self) -> GForces:
        return GForces(self.g_force_x, self.g_force_y, self.g_force_z)


@dataclass
class LapRecord:
    """A recorded lap. Best-lap flags are derived on insertion."""
    lap_number: int
    lap_time: float     # s
    sector1: float
    sector2: float
    sector3: float
    speed: float        # km/h
    compound: str
    fuel_load: float    # L
    is_personal_best: bool = False
    is_session_best: bool = False
    notes: Optional[str] = None

    @property
    def sector_sum(self) -> float:
        return self.sector1 + self.sector2 + self.sector3


@dataclass(frozen=True)
class CompoundProfile:
    """Stint characteristics of a tire compound."""
    compound: str
    max_laps: int
    initial_grip: float
    decay_rate: float


COMPOUND_PROFILES: Dict[str, CompoundProfile] = {
    "Soft": CompoundProfile("Soft", max_laps=25, initial_grip=100.0, decay_rate=0.08),
    "Medium": CompoundProfile("Medium", max_laps=35, initial_grip=95.0, decay_rate=0.05),
    "Hard": CompoundProfile("Hard", max_laps=50, initial_grip=90.0, decay_rate=0.03),
    "Intermediate": CompoundProfile("Intermediate", max_laps=30, initial_grip=85.0, decay_rate=0.06),
    "Wet": CompoundProfile("Wet", max_laps=20, initial_grip=80.0, decay_rate=0.10),
}


@dataclass
class PerformanceMetrics:
    best_lap: float = 0.0
    average_lap: float = 0.0
    consistency: float = 0.0
    top_speed: float = 0.0
    average_speed: float = 0.0
    total_distance: float = 0.0


@dataclass
class Session:
    """A driving session. Owned by the caller; the engine reads it."""
    driver_name: str
    car_number: str
    team: str
    session_type: str
    track_name: str
    weather: str
    laps: List[LapRecord] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.now)
