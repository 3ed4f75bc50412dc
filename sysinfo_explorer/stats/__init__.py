"""Live statistics module for sampling performance counters."""

from .counters import COUNTERS, CounterSpec, PdhCounterSource
from .sampler import LiveSampler, run_stats

__all__ = ["COUNTERS", "CounterSpec", "PdhCounterSource", "LiveSampler", "run_stats"]
