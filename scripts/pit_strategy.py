#!/usr/bin/env python3
"""Pit window and race strategy report.

Usage:
    python scripts/pit_strategy.py --compound Soft --race-laps 53
    python scripts/pit_strategy.py --config configs/default.yaml --override strategy.weather="Light Rain"
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from raceiq.analysis import format_race_time, setup_logging
from raceiq.config import apply_overrides, default_config, load_config, validate_config
from raceiq.core.degradation import FuelState, TireState
from raceiq.core.tracks import lookup_track_by_name
from raceiq.strategy import (
    FuelParams,
    PitWindowAdvisor,
    generate_strategies,
    strategy_risk,
)


def main():
    parser = argparse.ArgumentParser(description="Pit window and strategy report")
    parser.add_argument("--config", type=Path, default=None, help="Path to configuration file")
    parser.add_argument("--compound", type=str, default=None, help="Starting tire compound")
    parser.add_argument("--race-laps", type=int, default=None, help="Race distance in laps")
    parser.add_argument("--laps-used", type=int, default=0, help="Laps already run on the tires")
    parser.add_argument("--override", action="append", default=[],
                        help="Config overrides in format key.subkey=value")

    args = parser.parse_args()

    config = load_config(args.config) if args.config else default_config()
    if args.override:
        config = apply_overrides(config, args.override)
    if args.compound:
        config["strategy"]["compound"] = args.compound
    if args.race_laps:
        config["strategy"]["race_laps"] = args.race_laps

    errors = validate_config(config)
    if errors:
        print("Configuration validation failed:")
        for error in errors:
            print(f"  - {error}")
        sys.exit(1)

    setup_logging(level=config["logging"]["level"], log_file=config["logging"].get("file"))

    strategy = config["strategy"]
    track = lookup_track_by_name(config["simulation"]["track"])
    track_length = track.length if track is not None else None

    advisor = PitWindowAdvisor(
        grip_threshold=strategy["grip_threshold"],
        fuel_laps_threshold=strategy["fuel_laps_threshold"],
    )
    fuel_params = FuelParams(
        initial_fuel=strategy["initial_fuel"],
        consumption_rate=strategy["consumption_rate"],
        saving_mode=strategy["fuel_saving_mode"],
    )

    tire = TireState(compound=strategy["compound"], laps_used=args.laps_used)
    fuel = FuelState(
        initial_fuel=fuel_params.initial_fuel,
        consumption_rate=fuel_params.consumption_rate,
        throttle_percent=strategy["throttle_percent"],
        laps_completed=args.laps_used,
        track_length_km=track_length,
        saving_mode=fuel_params.saving_mode,
    )
    advice = advisor.assess_state(tire, fuel)
    pit_lap = advisor.find_optimal_pit_lap(
        strategy["race_laps"],
        strategy["compound"],
        throttle_percent=strategy["throttle_percent"],
        fuel=fuel_params,
        track_length_km=track_length,
    )

    print("=" * 40)
    print("PIT WINDOW")
    print("=" * 40)
    print(f"Compound:          {strategy['compound']}")
    print(f"Tire grip:         {tire.grip:.1f}% (+{tire.lap_time_penalty:.2f}s/lap)")
    print(f"Fuel remaining:    {fuel.fuel_remaining:.1f} L ({fuel.fuel_laps_remaining:.1f} laps)")
    print(f"Optimal pit lap:   {pit_lap}")
    if advice.pit_now:
        reasons = []
        if advice.pit_for_tires:
            reasons.append("tires")
        if advice.pit_for_fuel:
            reasons.append("fuel")
        print(f"PIT WINDOW OPEN ({', '.join(reasons)})")

    print("\n" + "=" * 40)
    print("STRATEGIES")
    print("=" * 40)
    strategies = generate_strategies(
        race_laps=strategy["race_laps"],
        average_lap_time=strategy["average_lap_time"],
        pit_lane_delta=strategy["pit_lane_delta"],
        weather=strategy["weather"],
    )
    for plan in strategies:
        stints = " -> ".join(f"{s.compound}({s.start_lap}-{s.end_lap})" for s in plan.stints)
        print(f"P{plan.position} {plan.name:<13} {format_race_time(plan.total_time)}  "
              f"risk={strategy_risk(plan, strategy['weather'])}  {stints}")


if __name__ == "__main__":
    main()
