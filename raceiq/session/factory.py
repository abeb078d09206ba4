# Session construction

from datetime import datetime
from typing import Optional

from ..core.types import Session


DEFAULT_SESSION = {
    "driver_name": "Tanmay Kumar Singh",
    "car_number": "44",
    "team": "RaceIQ Racing",
    "session_type": "Practice",
    "track_name": "Monaco Grand Prix",
    "weather": "Sunny",
}


def new_session(
    driver_name: Optional[str] = None,
    car_number: Optional[str] = None,
    team: Optional[str] = None,
    session_type: Optional[str] = None,
    track_name: Optional[str] = None,
    weather: Optional[str] = None,
    created_at: Optional[datetime] = None,
) -> Session:
    """Create an empty session, filling unspecified fields with defaults."""
    return Session(
        driver_name=driver_name or DEFAULT_SESSION["driver_name"],
        car_number=car_number or DEFAULT_SESSION["car_number"],
        team=team or DEFAULT_SESSION["team"],
        session_type=session_type or DEFAULT_SESSION["session_type"],
        track_name=track_name or DEFAULT_SESSION["track_name"],
        weather=weather or DEFAULT_SESSION["weather"],
        laps=[],
        created_at=created_at or datetime.now(),
    )
