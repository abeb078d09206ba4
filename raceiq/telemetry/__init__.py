# Telemetry module - Synthetic sample generation
# FORBIDDEN: analysis.*, strategy.*, session.*

from .synthesizer import TelemetrySynthesizer, generate_telemetry
from .validation import SampleValidator
from .export import save_telemetry_csv, load_telemetry_csv
