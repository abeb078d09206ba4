# Session module - Persistence and export
# IMPURE - Has side effects (file I/O)

from .repository import SessionRepository, InMemorySessionRepository, JsonSessionRepository
from .serialization import (
    session_to_dict,
    session_from_dict,
    export_session_json,
    import_session_json,
)
from .factory import new_session
