# Strategy module - Pit windows and race plans
# FORBIDDEN: telemetry.*, session.*

from .pit_window import PitWindowAdvisor, PitAdvice, FuelParams, find_optimal_pit_lap
from .planner import (
    RaceStrategy,
    Stint,
    generate_strategies,
    strategy_risk,
    undercut_outcome,
    overcut_outcome,
)
