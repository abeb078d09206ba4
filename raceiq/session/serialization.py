# Session (de)serialization
# FORBIDDEN: telemetry.*, strategy.*

import dataclasses
import json
import re
from datetime import datetime
from typing import Any, Dict, Tuple

from ..core.types import LapRecord, Session


def session_to_dict(session: Session) -> Dict[str, Any]:
    """Convert a session to a JSON-compatible dict."""
    data = dataclasses.asdict(session)
    data["created_at"] = session.created_at.isoformat()
    return data


def session_from_dict(data: Dict[str, Any]) -> Session:
    """Rebuild a session from session_to_dict output.

    Args:
        data: Serialized session

    Returns:
        Session with LapRecord laps and a datetime created_at
    """
    laps = [LapRecord(**lap) for lap in data.get("laps", [])]
    created_at = data.get("created_at")
    return Session(
        driver_name=data["driver_name"],
        car_number=str(data["car_number"]),
        team=data["team"],
        session_type=data["session_type"],
        track_name=data["track_name"],
        weather=data["weather"],
        laps=laps,
        created_at=datetime.fromisoformat(created_at) if created_at else datetime.now(),
    )


def export_filename(session: Session) -> str:
    """Download name, e.g. raceiq_Monaco_Grand_Prix_Race_2024-05-26.json."""
    track = re.sub(r"\s+", "_", session.track_name)
    return f"raceiq_{track}_{session.session_type}_{session.created_at.date().isoformat()}.json"


def export_session_json(session: Session) -> Tuple[str, str]:
    """Serialize a session for download.

    Returns:
        (file name, JSON text)
    """
    return export_filename(session), json.dumps(session_to_dict(session), indent=2)


def import_session_json(text: str) -> Session:
    """Parse exported session JSON.

    Raises:
        ValueError: If the text is not a valid session export
    """
    try:
        data = json.loads(text)
        if not isinstance(data, dict):
            raise TypeError(f"expected an object, got {type(data).__name__}")
        return session_from_dict(data)
    except (json.JSONDecodeError, KeyError, TypeError) as e:
        raise ValueError(f"Invalid session file: {e}") from e
