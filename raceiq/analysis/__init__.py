# Analysis module - Lap bookkeeping, metrics, logging
# IMPURE - Has side effects (logging)

from .logger import setup_logging
from .metrics import compute_performance_metrics, summarize_telemetry
from .laps import (
    record_lap,
    add_lap,
    check_sector_times,
    generate_quick_lap,
    personal_best_threshold,
    session_best_threshold,
)
from .formatting import format_lap_time, format_race_time
