# Configuration loading and validation

import copy
from pathlib import Path
from typing import Any, Dict, List

import yaml

from .core.tracks import all_track_names
from .core.types import COMPOUND_PROFILES


DEFAULT_CONFIG: Dict[str, Any] = {
    "experiment": {
        "name": "default",
        "seed": 42,
    },
    "simulation": {
        "track": "Monaco Grand Prix",
        "duration_s": 120,
        "max_duration_s": 3600,
    },
    "strategy": {
        "race_laps": 53,
        "compound": "Medium",
        "throttle_percent": 75,
        "initial_fuel": 110.0,
        "consumption_rate": 2.3,
        "fuel_saving_mode": 0,
        "grip_threshold": 70.0,
        "fuel_laps_threshold": 5.0,
        "average_lap_time": 92.3,
        "pit_lane_delta": 22.5,
        "weather": "Dry",
    },
    "storage": {
        "directory": "sessions",
        "max_saved_sessions": 10,
    },
    "logging": {
        "level": "INFO",
        "file": None,
    },
}


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def default_config() -> Dict[str, Any]:
    return copy.deepcopy(DEFAULT_CONFIG)


def load_config(config_path: Path) -> Dict[str, Any]:
    """Load configuration from YAML file.

    Missing keys are filled from DEFAULT_CONFIG.

    Args:
        config_path: Path to config file

    Returns:
        Configuration dictionary
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        config = yaml.safe_load(f) or {}

    return _deep_merge(DEFAULT_CONFIG, config)


def save_config(config: Dict[str, Any], config_path: Path) -> None:
    config_path = Path(config_path)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w") as f:
        yaml.dump(config, f, default_flow_style=False)


def apply_overrides(config: Dict[str, Any], overrides: List[str]) -> Dict[str, Any]:
    """Apply command-line overrides to config.

    Args:
        config: Base configuration
        overrides: List of "key.subkey=value" strings

    Returns:
        Modified configuration
    """
    for override in overrides:
        if "=" not in override:
            raise ValueError(f"Invalid override format: {override}. Expected key=value")

        key, value = override.split("=", 1)
        keys = key.split(".")

        # Navigate to nested key
        d = config
        for k in keys[:-1]:
            if k not in d:
                d[k] = {}
            d = d[k]

        # Infer type and set value
        try:
            d[keys[-1]] = int(value)
        except ValueError:
            try:
                d[keys[-1]] = float(value)
            except ValueError:
                if value.lower() in ("true", "false"):
                    d[keys[-1]] = value.lower() == "true"
                else:
                    d[keys[-1]] = value

    return config


def validate_config(config: Dict[str, Any]) -> List[str]:
    """Validate configuration.

    Args:
        config: Configuration dictionary

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    required_sections = ["experiment", "simulation", "strategy", "storage", "logging"]
    for section in required_sections:
        if section not in config:
            errors.append(f"Missing required section: {section}")

    if "experiment" in config:
        if "seed" not in config["experiment"]:
            errors.append("experiment.seed is required")

    if "simulation" in config:
        simulation = config["simulation"]
        track = simulation.get("track")
        if track is not None and track not in all_track_names():
            errors.append(f"simulation.track must be one of {all_track_names()}, got '{track}'")

        max_duration = simulation.get("max_duration_s", 0)
        if max_duration <= 0:
            errors.append(f"simulation.max_duration_s must be positive, got {max_duration}")

        duration = simulation.get("duration_s", 0)
        if duration <= 0:
            errors.append(f"simulation.duration_s must be positive, got {duration}")

    if "strategy" in config:
        strategy = config["strategy"]
        race_laps = strategy.get("race_laps", 0)
        if race_laps <= 0:
            errors.append(f"strategy.race_laps must be positive, got {race_laps}")

        compound = strategy.get("compound", "")
        if compound not in COMPOUND_PROFILES:
            errors.append(f"strategy.compound must be one of {list(COMPOUND_PROFILES)}, got '{compound}'")

        throttle = strategy.get("throttle_percent", 0)
        if not 0 <= throttle <= 100:
            errors.append(f"strategy.throttle_percent must be in [0, 100], got {throttle}")

        saving_mode = strategy.get("fuel_saving_mode", 0)
        if saving_mode not in (0, 1, 2):
            errors.append(f"strategy.fuel_saving_mode must be 0, 1 or 2, got {saving_mode}")

        initial_fuel = strategy.get("initial_fuel", 0)
        if initial_fuel <= 0:
            errors.append(f"strategy.initial_fuel must be positive, got {initial_fuel}")

    if "storage" in config:
        max_saved = config["storage"].get("max_saved_sessions", 0)
        if max_saved <= 0:
            errors.append(f"storage.max_saved_sessions must be positive, got {max_saved}")

    if "logging" in config:
        level = str(config["logging"].get("level", "")).upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR"):
            errors.append(f"logging.level must be DEBUG, INFO, WARNING or ERROR, got '{level}'")

    return errors
