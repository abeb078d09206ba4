#!/usr/bin/env python3
"""Generate synthetic telemetry for a track.

Usage:
    # Two minutes around Monaco
    python scripts/simulate_telemetry.py --track "Monaco Grand Prix" --duration 120

    # Save samples for playback
    python scripts/simulate_telemetry.py --track Monza --output telemetry.csv
"""

import argparse
import logging
import sys
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent))

from raceiq.analysis import setup_logging, summarize_telemetry
from raceiq.config import apply_overrides, default_config, load_config, validate_config
from raceiq.core.tracks import all_track_names
from raceiq.telemetry import SampleValidator, TelemetrySynthesizer, save_telemetry_csv


def main():
    parser = argparse.ArgumentParser(description="Generate synthetic telemetry")
    parser.add_argument("--config", type=Path, default=None, help="Path to configuration file")
    parser.add_argument("--track", type=str, default=None, choices=all_track_names(),
                        help="Track name (overrides config)")
    parser.add_argument("--duration", type=float, default=None, help="Duration in seconds")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--output", type=Path, default=None, help="Save telemetry to CSV")
    parser.add_argument("--override", action="append", default=[],
                        help="Config overrides in format key.subkey=value")

    args = parser.parse_args()

    config = load_config(args.config) if args.config else default_config()
    if args.override:
        config = apply_overrides(config, args.override)
    if args.track:
        config["simulation"]["track"] = args.track
    if args.duration is not None:
        config["simulation"]["duration_s"] = args.duration
    if args.seed is not None:
        config["experiment"]["seed"] = args.seed

    errors = validate_config(config)
    if errors:
        print("Configuration validation failed:")
        for error in errors:
            print(f"  - {error}")
        sys.exit(1)

    setup_logging(level=config["logging"]["level"], log_file=config["logging"].get("file"))
    logger = logging.getLogger("raceiq")

    simulation = config["simulation"]
    rng = np.random.default_rng(config["experiment"]["seed"])
    synthesizer = TelemetrySynthesizer(rng=rng, max_duration_s=simulation["max_duration_s"])

    logger.info(f"Simulating {simulation['duration_s']}s at {simulation['track']}")
    samples = synthesizer.generate(simulation["duration_s"], simulation["track"])

    valid, violations = SampleValidator.validate_series(samples)
    if not valid:
        for violation in violations[:10]:
            logger.warning(violation)

    metrics = summarize_telemetry(samples)
    print("\n" + "=" * 40)
    print("TELEMETRY SUMMARY")
    print("=" * 40)
    print(f"Samples:        {len(samples)}")
    for name, value in metrics.items():
        print(f"{name:<20} {value:10.2f}")

    if args.output:
        save_telemetry_csv(samples, args.output)
        print(f"Telemetry saved to {args.output}")


if __name__ == "__main__":
    main()
