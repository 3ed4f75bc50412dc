"""
Live system statistics.

``LiveSampler`` takes one snapshot of the counters per call; ``run_stats``
drives it for a fixed number of iterations with a one second pause
between samples.
"""

import logging
import time
from datetime import datetime
from typing import Callable, Optional

from ..core.errors import (
    CounterUnavailableError,
    InvalidArgumentError,
    ProviderError,
    SamplingError,
)
from ..core.models import StatsSnapshot, memory_usage_percent
from ..collectors.wmi_provider import QueryProvider, query_total_memory_mb
from .counters import (
    AVAILABLE_MEMORY,
    CONTEXT_SWITCHES,
    CPU_USAGE,
    DISK_READ_BYTES,
    DISK_READ_TIME,
    DISK_WRITE_BYTES,
    DISK_WRITE_TIME,
    HANDLE_COUNT,
    SYSTEM_CALLS,
    THREAD_COUNT,
    CounterSource,
    CounterSpec,
)


logger = logging.getLogger(__name__)

CPU_SAMPLE_DELAY_SECONDS = 0.1
SAMPLE_INTERVAL_SECONDS = 1.0


class LiveSampler:
    """
    Samples CPU, memory, process and disk counters.

    Total memory is captured once at construction; when it is unknown
    (0) the memory usage percentage is reported as 0.
    """

    def __init__(
        self,
        counters: CounterSource,
        total_memory_mb: float,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.counters = counters
        self.total_memory_mb = total_memory_mb
        self._sleep = sleep

    @classmethod
    def from_provider(
        cls,
        counters: CounterSource,
        provider: Optional[QueryProvider],
        sleep: Callable[[float], None] = time.sleep,
    ) -> "LiveSampler":
        """Create a sampler, reading total memory from the query provider."""
        total = 0.0
        if provider is not None:
            try:
                total = query_total_memory_mb(provider)
            except (ProviderError, ValueError) as e:
                logger.warning(f"Total memory unavailable, usage will read 0%: {e}")
        return cls(counters, total, sleep)

    def _read(self, spec: CounterSpec) -> float:
        return self.counters.read_counter(spec.category, spec.counter, spec.instance)

    def _read_cpu_usage(self) -> float:
        # The first read of a rate counter is always ~0
        self._read(CPU_USAGE)
        self._sleep(CPU_SAMPLE_DELAY_SECONDS)
        return self._read(CPU_USAGE)

    def sample(self) -> StatsSnapshot:
        """Read every counter once; any failed read fails the whole sample."""
        try:
            free_memory = self._read(AVAILABLE_MEMORY)
            cpu_usage = self._read_cpu_usage()

            return StatsSnapshot(
                total_memory_mb=self.total_memory_mb,
                free_memory_mb=free_memory,
                memory_usage_percent=memory_usage_percent(self.total_memory_mb, free_memory),
                cpu_usage=cpu_usage,
                thread_count=int(self._read(THREAD_COUNT)),
                context_switches=int(self._read(CONTEXT_SWITCHES)),
                handle_count=int(self._read(HANDLE_COUNT)),
                system_calls=int(self._read(SYSTEM_CALLS)),
                disk_read_bytes=int(self._read(DISK_READ_BYTES)),
                disk_write_bytes=int(self._read(DISK_WRITE_BYTES)),
                avg_disk_read_seconds=self._read(DISK_READ_TIME),
                avg_disk_write_seconds=self._read(DISK_WRITE_TIME),
                timestamp=datetime.now(),
            )
        except CounterUnavailableError as e:
            raise SamplingError(f"Sampling failed: {e}") from e


def run_stats(
    sampler: LiveSampler,
    iterations: int,
    write: Callable[[str], None] = print,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """
    Sample ``iterations`` times, printing each snapshot.

    Returns the number of samples taken. A failed sample ends the loop
    by raising ``SamplingError``.
    """
    if iterations <= 0:
        raise InvalidArgumentError("Invalid number of iterations (>0)")

    taken = 0
    for i in range(iterations):
        try:
            snapshot = sampler.sample()
        except SamplingError as e:
            logger.error(f"Sample {i + 1}/{iterations}: {e}")
            raise

        taken += 1
        write(snapshot.render())
        sleep(SAMPLE_INTERVAL_SECONDS)

    return taken
