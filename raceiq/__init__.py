# RaceIQ - racing telemetry and strategy engine

__version__ = "0.1.0"
