# Tests for telemetry synthesis

import pytest
import numpy as np
from raceiq.core.physics import speed_and_gear_to_rpm
from raceiq.core.tracks import TRACKS
from raceiq.telemetry.synthesizer import (
    TelemetrySynthesizer,
    driving_targets,
    generate_telemetry,
)


@pytest.fixture
def synthesizer(rng):
    return TelemetrySynthesizer(rng=rng)


class TestGenerate:

    def test_monaco_sample_count(self, synthesizer, monaco):
        """Nine seconds at 10 Hz should give 90 samples."""
        samples = synthesizer.generate(9, monaco)
        assert len(samples) == 90

    def test_timestamps(self, synthesizer, monaco):
        """Timestamps should step by 0.1 s from zero."""
        samples = synthesizer.generate(9, monaco)
        timestamps = [s.timestamp for s in samples]
        assert timestamps == pytest.approx([i * 0.1 for i in range(90)])
        assert all(b > a for a, b in zip(timestamps, timestamps[1:]))

    def test_ranges(self, synthesizer):
        """Every sample should stay within physical ranges on every track."""
        for track in TRACKS.values():
            for s in synthesizer.generate(100, track):
                assert 50.0 <= s.speed <= 350.0
                assert 800.0 <= s.rpm <= 15000.0
                assert 0.0 <= s.throttle <= 100.0
                assert 0.0 <= s.brake <= 100.0
                assert 1 <= s.gear <= 8
                assert abs(s.g_force_x) <= 4.0
                assert abs(s.g_force_y) <= 3.0
                assert abs(s.g_force_z) <= 5.0

    def test_gear_follows_active_corner(self, synthesizer, monaco):
        """The first 9 s of a 90 s lap at Monaco sit in corner 1 (3rd gear)."""
        samples = synthesizer.generate(9, monaco)
        assert all(s.gear == 3 for s in samples)

    def test_braking_zone(self, synthesizer, monaco):
        """Approaching a braking-zone corner should brake."""
        samples = synthesizer.generate(9, monaco)
        straight = [s for s in samples if s.timestamp < 6.2]
        braking = [s for s in samples if s.timestamp > 6.4]
        assert all(s.brake <= 2.5 for s in straight)
        assert all(57.5 <= s.brake <= 62.5 for s in braking)
        assert all(15.0 <= s.throttle <= 25.0 for s in braking)

    def test_rpm_matches_kinematics(self, synthesizer, monaco):
        """RPM should be derived from each sample's speed and gear."""
        for s in synthesizer.generate(30, monaco):
            assert s.rpm == pytest.approx(speed_and_gear_to_rpm(s.speed, s.gear))

    def test_first_sample_zero_longitudinal(self, synthesizer, monaco):
        """First sample has no previous speed, so no longitudinal G."""
        samples = synthesizer.generate(1, monaco)
        assert samples[0].g_force_z == 0.0

    def test_initial_speed_smoothing(self, monaco):
        """First speed should move 10% toward the target from 80 km/h."""
        samples = TelemetrySynthesizer(rng=np.random.default_rng(0)).generate(1, monaco)
        # Corner 1 straight target is min(320, 120 + 50) = 170
        assert samples[0].speed == pytest.approx(80.0 + 9.0, abs=2.5)

    def test_track_by_name(self, monaco):
        """Track names should resolve through the catalog."""
        a = TelemetrySynthesizer(rng=np.random.default_rng(3)).generate(5, "Monaco Grand Prix")
        b = TelemetrySynthesizer(rng=np.random.default_rng(3)).generate(5, monaco)
        assert a == b


class TestStraightLine:

    def test_no_track(self, synthesizer):
        """Without a track the car drives a straight line in 2nd gear."""
        samples = synthesizer.generate(20)
        assert len(samples) == 200
        assert all(s.gear == 2 for s in samples)
        assert all(75.0 <= s.throttle <= 85.0 for s in samples)
        assert all(s.brake <= 2.5 for s in samples)

    def test_speed_approaches_target(self, synthesizer):
        """Speed should converge toward 250 km/h."""
        samples = synthesizer.generate(30)
        assert samples[-1].speed == pytest.approx(250.0, abs=15.0)

    def test_unknown_track_name(self, synthesizer):
        """Unknown track names fall back to straight-line driving."""
        samples = synthesizer.generate(2, "Nowhere Raceway")
        assert len(samples) == 20
        assert all(s.gear == 2 for s in samples)


class TestDeterminism:

    def test_same_seed_same_series(self, monaco):
        """Equal seeds should reproduce the series exactly."""
        a = generate_telemetry(12, monaco, rng=np.random.default_rng(11))
        b = generate_telemetry(12, monaco, rng=np.random.default_rng(11))
        assert a == b

    def test_different_seed_differs(self, monaco):
        """Different seeds should give different noise."""
        a = generate_telemetry(12, monaco, rng=np.random.default_rng(1))
        b = generate_telemetry(12, monaco, rng=np.random.default_rng(2))
        assert a != b

    def test_calls_are_independent(self, synthesizer, monaco):
        """Each call should return a fresh list."""
        a = synthesizer.generate(3, monaco)
        b = synthesizer.generate(3, monaco)
        assert a is not b
        assert len(a) == len(b) == 30

    def test_iterator_matches_list(self, monaco):
        """Lazy iteration should produce the same samples as generate."""
        lazy = list(TelemetrySynthesizer(rng=np.random.default_rng(5)).iter_samples(8, monaco))
        eager = TelemetrySynthesizer(rng=np.random.default_rng(5)).generate(8, monaco)
        assert lazy == eager


class TestDurationBounds:

    def test_zero_duration(self, synthesizer):
        """Zero duration should give no samples."""
        assert synthesizer.generate(0) == []

    def test_negative_duration(self, synthesizer):
        """Negative duration should give no samples."""
        assert synthesizer.generate(-5) == []

    def test_duration_clamped(self, rng):
        """Durations over the limit should be clamped."""
        synthesizer = TelemetrySynthesizer(rng=rng, max_duration_s=2.0)
        assert len(synthesizer.generate(60)) == 20


class TestDrivingTargets:

    def test_regimes(self, monaco):
        """Braking, in-corner and straight regimes should set targets."""
        sainte_devote = monaco.corners[0]
        assert driving_targets(sainte_devote, 0.75) == (180.0, 20.0, 60.0)
        assert driving_targets(sainte_devote, 0.5) == (170.0, 85.0, 0.0)

    def test_in_corner_without_braking_zone(self, monaco):
        """Non-braking corners should hold exit speed in the corner window."""
        massenet = monaco.corners[1]
        assert driving_targets(massenet, 0.9) == (140.0, 40.0, 0.0)
        assert driving_targets(massenet, 0.75) == (190.0, 85.0, 0.0)

    def test_straight_speed_capped(self):
        """Straight target should not exceed 320 km/h."""
        raidillon = TRACKS["spa"].corners[2]
        assert driving_targets(raidillon, 0.1)[0] == 320.0
