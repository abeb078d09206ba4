# Tests for session and telemetry metrics

import pytest
import numpy as np
from raceiq.analysis.metrics import compute_performance_metrics, summarize_telemetry
from raceiq.core.tracks import TRACKS
from raceiq.core.types import PerformanceMetrics
from raceiq.telemetry import TelemetrySynthesizer


class TestPerformanceMetrics:

    def test_empty(self):
        """No laps should give all-zero metrics."""
        metrics = compute_performance_metrics([])
        assert metrics == PerformanceMetrics()
        assert metrics.best_lap == 0.0
        assert metrics.total_distance == 0.0

    def test_values(self, make_lap):
        """Metrics should summarize lap times and speeds."""
        laps = [
            make_lap(1, 90.0, speed=280.0),
            make_lap(2, 88.0, speed=300.0),
            make_lap(3, 92.0, speed=290.0),
        ]
        metrics = compute_performance_metrics(laps)
        assert metrics.best_lap == 88.0
        assert metrics.average_lap == pytest.approx(90.0)
        assert metrics.consistency == pytest.approx(np.sqrt(8.0 / 3.0))
        assert metrics.top_speed == 300.0
        assert metrics.average_speed == pytest.approx(290.0)

    def test_population_std(self, make_lap):
        """Consistency uses the population standard deviation."""
        laps = [make_lap(1, 90.0), make_lap(2, 92.0)]
        assert compute_performance_metrics(laps).consistency == pytest.approx(1.0)

    def test_single_lap(self, make_lap):
        """A single lap is perfectly consistent."""
        assert compute_performance_metrics([make_lap(1, 90.0)]).consistency == 0.0

    def test_distance(self, make_lap):
        """Distance should use the track length, or 5 km if unknown."""
        laps = [make_lap(i, 80.0 + i) for i in range(1, 5)]
        assert compute_performance_metrics(laps).total_distance == pytest.approx(20.0)
        spa = TRACKS["spa"]
        assert compute_performance_metrics(laps, spa).total_distance == pytest.approx(4 * 7.004)


class TestSummarizeTelemetry:

    def test_empty(self):
        """No samples should give an empty summary."""
        assert summarize_telemetry([]) == {}

    def test_summary(self, rng, monaco):
        """Summary should be consistent with the samples."""
        samples = TelemetrySynthesizer(rng=rng).generate(30, monaco)
        summary = summarize_telemetry(samples)

        assert summary["duration"] == pytest.approx(29.9)
        assert summary["top_speed"] == max(s.speed for s in samples)
        assert summary["min_speed"] <= summary["mean_speed"] <= summary["top_speed"]
        assert summary["peak_lateral_g"] <= 4.0
        assert summary["peak_total_g"] >= summary["peak_lateral_g"]
