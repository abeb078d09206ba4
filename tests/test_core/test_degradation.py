# Tests for tire and fuel degradation models

import pytest
import numpy as np
from raceiq.core.degradation import (
    DEFAULT_DECAY_RATE,
    FuelState,
    TireState,
    adjusted_consumption_rate,
    decay_rate,
    fuel_consumed,
    fuel_saving_penalty,
    lap_time_penalty,
    tire_grip,
)
from raceiq.core.types import TireCompound


COMPOUNDS = ["Soft", "Medium", "Hard", "Intermediate", "Wet"]


class TestTireGrip:

    @pytest.mark.parametrize("compound", COMPOUNDS + ["Unknown"])
    def test_no_laps_no_decay(self, compound):
        """Grip should equal initial grip before any laps."""
        assert tire_grip(95.0, 0, compound) == pytest.approx(95.0)

    def test_wet_after_ten_laps(self):
        """Wet tires lose grip at 0.10 per lap."""
        assert tire_grip(100.0, 10, "Wet") == pytest.approx(100.0 * np.exp(-1.0), abs=0.1)
        assert tire_grip(100.0, 10, "Wet") == pytest.approx(36.8, abs=0.1)

    @pytest.mark.parametrize("compound", COMPOUNDS)
    def test_strictly_decreasing(self, compound):
        """Grip should fall with every lap."""
        grips = [tire_grip(100.0, lap, compound) for lap in range(0, 60)]
        assert all(b < a for a, b in zip(grips, grips[1:]))

    def test_decay_rates(self):
        """Compound decay rates should match the reference table."""
        assert decay_rate("Soft") == 0.08
        assert decay_rate("Medium") == 0.05
        assert decay_rate("Hard") == 0.03
        assert decay_rate("Intermediate") == 0.06
        assert decay_rate("Wet") == 0.10
        assert decay_rate(TireCompound.SOFT) == 0.08

    def test_unknown_compound_uses_default(self):
        """Unknown compounds should decay at the default rate."""
        assert decay_rate("Slick") == DEFAULT_DECAY_RATE
        assert tire_grip(100.0, 5, "Slick") == pytest.approx(tire_grip(100.0, 5, "Medium"))

    def test_softer_decays_faster(self):
        """Soft should lose more grip than Hard over the same laps."""
        assert tire_grip(100.0, 20, "Soft") < tire_grip(100.0, 20, "Hard")

    def test_clamped(self):
        """Grip should stay within [0, 100]."""
        assert tire_grip(150.0, 0, "Soft") == 100.0
        assert tire_grip(-10.0, 3, "Soft") == 0.0

    def test_negative_laps(self):
        """Negative laps should count as zero."""
        assert tire_grip(90.0, -5, "Soft") == pytest.approx(90.0)


class TestFuelConsumed:

    def test_base_consumption(self):
        """75% throttle on an unknown track burns 2.3 * 1.2 L per lap."""
        assert fuel_consumed(1) == pytest.approx(2.3 * 1.2)

    def test_throttle_multiplier_range(self):
        """Throttle multiplier should span 0.6 to 1.4."""
        assert fuel_consumed(1, 0) == pytest.approx(2.3 * 0.6)
        assert fuel_consumed(1, 100) == pytest.approx(2.3 * 1.4)

    def test_throttle_clamped(self):
        """Throttle outside [0, 100] should be clamped."""
        assert fuel_consumed(1, 150) == pytest.approx(fuel_consumed(1, 100))
        assert fuel_consumed(1, -20) == pytest.approx(fuel_consumed(1, 0))

    def test_track_multiplier(self):
        """Consumption should scale with track length against 5 km."""
        assert fuel_consumed(10, 75, 7.004) == pytest.approx(fuel_consumed(10, 75) * 7.004 / 5.0)

    @pytest.mark.parametrize("laps", [1, 7, 26])
    def test_linear_in_laps(self, laps):
        """Double the laps should double the fuel."""
        assert fuel_consumed(2 * laps, 60, 5.891) == pytest.approx(2 * fuel_consumed(laps, 60, 5.891))

    def test_non_decreasing(self):
        """More laps never burn less fuel."""
        values = [fuel_consumed(lap) for lap in range(0, 70)]
        assert all(b >= a for a, b in zip(values, values[1:]))

    def test_negative_laps(self):
        """Negative laps should burn nothing."""
        assert fuel_consumed(-3) == 0.0


class TestPenalties:

    def test_lap_time_penalty(self):
        """Each grip point lost costs 0.02 s."""
        assert lap_time_penalty(100.0) == 0.0
        assert lap_time_penalty(70.0) == pytest.approx(0.6)

    def test_fuel_saving(self):
        """Fuel saving reduces consumption but never below 1.5 L/lap."""
        assert adjusted_consumption_rate(2.3, 0) == pytest.approx(2.3)
        assert adjusted_consumption_rate(2.3, 1) == pytest.approx(2.1)
        assert adjusted_consumption_rate(2.3, 2) == pytest.approx(1.9)
        assert adjusted_consumption_rate(1.6, 2) == 1.5
        assert fuel_saving_penalty(2) == 0.3


class TestDerivedStates:

    def test_tire_state_defaults_to_compound_grip(self):
        """A new tire starts at the compound's initial grip."""
        assert TireState("Hard", 0).grip == pytest.approx(90.0)
        assert TireState("Soft", 0).grip == pytest.approx(100.0)
        assert TireState("Soft", 0, initial_grip=80.0).grip == pytest.approx(80.0)

    def test_tire_state_grip(self):
        """Tire state grip should use the decay model."""
        state = TireState("Medium", 10)
        assert state.grip == pytest.approx(95.0 * np.exp(-0.5))
        assert state.lap_time_penalty == pytest.approx((100.0 - state.grip) * 0.02)

    def test_fuel_state(self):
        """Fuel state should derive remaining fuel and laps."""
        state = FuelState(initial_fuel=110.0, consumption_rate=2.3, throttle_percent=75, laps_completed=10)
        assert state.fuel_used == pytest.approx(27.6)
        assert state.fuel_remaining == pytest.approx(82.4)
        assert state.fuel_laps_remaining == pytest.approx(82.4 / 2.3)

    def test_fuel_state_never_negative(self):
        """Remaining fuel should not go below zero."""
        state = FuelState(initial_fuel=10.0, consumption_rate=2.3, laps_completed=50)
        assert state.fuel_remaining == 0.0
        assert state.fuel_laps_remaining == 0.0
