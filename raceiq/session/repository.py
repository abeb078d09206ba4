# Session storage
# IMPURE - file I/O

import json
import logging
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Any, List, Optional

from ..core.types import Session
from .serialization import session_from_dict, session_to_dict


logger = logging.getLogger(__name__)

MAX_SAVED_SESSIONS = 10


class SessionRepository(ABC):
    """Storage for the current session and the recently saved ones."""

    @abstractmethod
    def load(self) -> Optional[Session]:
        """Current session, or None."""

    @abstractmethod
    def save(self, session: Session) -> None:
        """Make a session current and add it to the saved list."""

    @abstractmethod
    def list_recent(self, n: int = MAX_SAVED_SESSIONS) -> List[Session]:
        """Saved sessions, newest first."""

    @abstractmethod
    def delete(self, created_at: datetime) -> bool:
        """Remove a saved session by creation time. True if one was removed."""

    @abstractmethod
    def clear(self) -> None:
        """Forget the current session."""


class InMemorySessionRepository(SessionRepository):

    def __init__(self, max_saved: int = MAX_SAVED_SESSIONS):
        self.max_saved = max_saved
        self._current: Optional[Session] = None
        self._saved: List[Session] = []

    def load(self) -> Optional[Session]:
        return self._current

    def save(self, session: Session) -> None:
        self._current = session
        self._saved = [session] + self._saved[:self.max_saved - 1]

    def list_recent(self, n: int = MAX_SAVED_SESSIONS) -> List[Session]:
        return list(self._saved[:max(0, n)])

    def delete(self, created_at: datetime) -> bool:
        before = len(self._saved)
        self._saved = [s for s in self._saved if s.created_at != created_at]
        return len(self._saved) != before

    def clear(self) -> None:
        self._current = None


class JsonSessionRepository(SessionRepository):
    """Sessions stored as JSON files in a directory."""

    CURRENT_FILE = "current_session.json"
    SAVED_FILE = "saved_sessions.json"

    def __init__(self, directory: Path, max_saved: int = MAX_SAVED_SESSIONS):
        """Initialize repository.

        Args:
            directory: Storage directory, created on first write
            max_saved: Number of saved sessions to keep
        """
        self.directory = Path(directory)
        self.max_saved = max_saved

    @property
    def current_path(self) -> Path:
        return self.directory / self.CURRENT_FILE

    @property
    def saved_path(self) -> Path:
        return self.directory / self.SAVED_FILE

    def _read(self, path: Path) -> Any:
        if not path.exists():
            return None
        try:
            with open(path) as f:
                return json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Ignoring unreadable session file {path}: {e}")
            return None

    def _write(self, path: Path, data: Any) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        # Write to temporary file first, then rename (atomic)
        temp_path = path.with_suffix(".tmp")
        with open(temp_path, "w") as f:
            json.dump(data, f, indent=2)
        temp_path.replace(path)

    def _load_saved(self) -> List[Session]:
        data = self._read(self.saved_path)
        if not isinstance(data, list):
            return []
        sessions = []
        for entry in data:
            try:
                sessions.append(session_from_dict(entry))
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                logger.warning(f"Skipping malformed saved session: {e}")
        return sessions

    def load(self) -> Optional[Session]:
        data = self._read(self.current_path)
        if data is None:
            return None
        try:
            return session_from_dict(data)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.warning(f"Ignoring malformed current session: {e}")
            return None

    def save(self, session: Session) -> None:
        self._write(self.current_path, session_to_dict(session))

        saved = [session] + self._load_saved()[:self.max_saved - 1]
        self._write(self.saved_path, [session_to_dict(s) for s in saved])
        logger.info(f"Saved session for {session.driver_name} at {session.track_name}")

    def list_recent(self, n: int = MAX_SAVED_SESSIONS) -> List[Session]:
        return self._load_saved()[:max(0, n)]

    def delete(self, created_at: datetime) -> bool:
        saved = self._load_saved()
        remaining = [s for s in saved if s.created_at != created_at]
        if len(remaining) == len(saved):
            return False
        self._write(self.saved_path, [session_to_dict(s) for s in remaining])
        return True

    def clear(self) -> None:
        if self.current_path.exists():
            self.current_path.unlink()
