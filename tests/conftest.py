# Pytest configuration and fixtures

import pytest
import numpy as np
from datetime import datetime
from pathlib import Path
import tempfile
import yaml

from raceiq.config import default_config
from raceiq.core.tracks import lookup_track_by_name
from raceiq.core.types import LapRecord, Session


@pytest.fixture
def seed():
    """Fixed seed for reproducibility."""
    return 42


@pytest.fixture
def rng(seed):
    """Seeded random generator."""
    return np.random.default_rng(seed)


@pytest.fixture
def monaco():
    return lookup_track_by_name("Monaco Grand Prix")


@pytest.fixture
def make_lap():
    """Factory for lap records with consistent sectors."""
    def _make(lap_number, lap_time, speed=250.0, compound="Medium"):
        return LapRecord(
            lap_number=lap_number,
            lap_time=lap_time,
            sector1=lap_time * 0.3,
            sector2=lap_time * 0.3,
            sector3=lap_time * 0.4,
            speed=speed,
            compound=compound,
            fuel_load=50.0,
        )
    return _make


@pytest.fixture
def session():
    """Empty practice session at Monaco."""
    return Session(
        driver_name="Test Driver",
        car_number="7",
        team="Test Team",
        session_type="Practice",
        track_name="Monaco Grand Prix",
        weather="Dry",
        laps=[],
        created_at=datetime(2024, 5, 26, 14, 0, 0),
    )


@pytest.fixture
def config():
    """Standard test configuration."""
    config = default_config()
    config["experiment"]["name"] = "test"
    config["simulation"]["duration_s"] = 10
    config["logging"]["level"] = "WARNING"
    return config


@pytest.fixture
def temp_dir():
    """Create temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_file(config, temp_dir):
    """Create temporary config file."""
    config_path = temp_dir / "config.yaml"
    with open(config_path, "w") as f:
        yaml.dump(config, f)
    return config_path
