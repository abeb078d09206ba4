# Telemetry sample validation
# FORBIDDEN: analysis.*, strategy.*, session.*

import dataclasses
from typing import List, Sequence, Tuple
import numpy as np

from ..core.types import TelemetrySample


class SampleValidator:
    """Validate telemetry samples are physically plausible."""

    # Physical bounds per field
    BOUNDS = {
        "speed": (0.0, 350.0),        # km/h
        "rpm": (800.0, 15000.0),
        "throttle": (0.0, 100.0),     # %
        "brake": (0.0, 100.0),        # %
        "g_force_x": (-4.0, 4.0),     # lateral g
        "g_force_y": (-3.0, 3.0),     # vertical g
        "g_force_z": (-5.0, 5.0),     # longitudinal g
        "gear": (1, 8),
    }

    @classmethod
    def validate(cls, sample: TelemetrySample) -> Tuple[bool, List[str]]:
        """Check a sample is within physical bounds.

        Args:
            sample: Telemetry sample

        Returns:
            (is_valid, list of violations)
        """
        violations = []

        values = np.array([getattr(sample, name) for name in cls.BOUNDS], dtype=np.float64)
        if np.any(np.isnan(values)):
            violations.append("Sample contains NaN")
            return False, violations
        if np.any(np.isinf(values)):
            violations.append("Sample contains Inf")
            return False, violations

        for name, (low, high) in cls.BOUNDS.items():
            value = getattr(sample, name)
            if value < low or value > high:
                violations.append(f"{name} out of bounds at t={sample.timestamp:.1f}s: {value}")

        return len(violations) == 0, violations

    @classmethod
    def validate_series(cls, samples: Sequence[TelemetrySample]) -> Tuple[bool, List[str]]:
        """Check every sample and that timestamps strictly increase.

        Args:
            samples: Ordered telemetry series

        Returns:
            (is_valid, list of violations)
        """
        violations = []
        previous = None
        for sample in samples:
            _, sample_violations = cls.validate(sample)
            violations.extend(sample_violations)
            if previous is not None and sample.timestamp <= previous:
                violations.append(f"Timestamp not increasing at t={sample.timestamp:.1f}s")
            previous = sample.timestamp
        return len(violations) == 0, violations

    @classmethod
    def clip(cls, sample: TelemetrySample) -> TelemetrySample:
        """Clip a sample to physical bounds.

        Args:
            sample: Telemetry sample

        Returns:
            New sample with every field inside its bounds
        """
        changes = {}
        for name, (low, high) in cls.BOUNDS.items():
            value = getattr(sample, name)
            clipped = np.clip(value, low, high)
            changes[name] = int(clipped) if name == "gear" else float(clipped)
        return dataclasses.replace(sample, **changes)
