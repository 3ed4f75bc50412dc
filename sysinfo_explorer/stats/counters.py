"""
Performance counter access.

``PdhCounterSource`` reads Windows performance counters through the PDH
API exposed by pywin32's ``win32pdh``. Counter handles are kept open and
reused, so rate counters (``/sec``, ``% Processor Time``) report the
rate since the previous read of the same counter. The very first read
of a rate counter has nothing to compare against and reports 0.0.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Protocol, Sequence, Tuple

from ..core.errors import CounterUnavailableError


logger = logging.getLogger(__name__)

# PDH_INVALID_DATA / PDH_CSTATUS_INVALID_DATA: a rate counter with one sample
PDH_INVALID_DATA = 0xC0000BC6


@dataclass(frozen=True)
class CounterSpec:
    """Category, counter name and instance of one performance counter."""

    category: str
    counter: str
    instance: Optional[str] = None

    @property
    def path(self) -> str:
        if self.instance:
            return f"\\{self.category}({self.instance})\\{self.counter}"
        return f"\\{self.category}\\{self.counter}"


CPU_USAGE = CounterSpec("Processor", "% Processor Time", "_Total")
AVAILABLE_MEMORY = CounterSpec("Memory", "Available MBytes")
THREAD_COUNT = CounterSpec("Process", "Thread Count", "_Total")
CONTEXT_SWITCHES = CounterSpec("System", "Context Switches/sec")
HANDLE_COUNT = CounterSpec("Process", "Handle Count", "_Total")
SYSTEM_CALLS = CounterSpec("System", "System Calls/sec")
DISK_READ_BYTES = CounterSpec("PhysicalDisk", "Disk Read Bytes/sec", "_Total")
DISK_WRITE_BYTES = CounterSpec("PhysicalDisk", "Disk Write Bytes/sec", "_Total")
DISK_READ_TIME = CounterSpec("PhysicalDisk", "Avg. Disk sec/Read", "_Total")
DISK_WRITE_TIME = CounterSpec("PhysicalDisk", "Avg. Disk sec/Write", "_Total")

COUNTERS = (
    CPU_USAGE,
    AVAILABLE_MEMORY,
    THREAD_COUNT,
    CONTEXT_SWITCHES,
    HANDLE_COUNT,
    SYSTEM_CALLS,
    DISK_READ_BYTES,
    DISK_WRITE_BYTES,
    DISK_READ_TIME,
    DISK_WRITE_TIME,
)


class CounterSource(Protocol):
    """Anything that returns a point sample of a named counter."""

    def read_counter(self, category: str, counter: str, instance: Optional[str] = None) -> float:
        ...


class PdhCounterSource:
    """Counter source backed by the Windows PDH API."""

    def __init__(self):
        try:
            import pywintypes
            import win32pdh
        except ImportError as e:
            raise CounterUnavailableError(
                "Performance counters are not available on this platform"
            ) from e

        self._pdh = win32pdh
        self._error_type = pywintypes.error
        self._counters: Dict[str, Tuple[int, int]] = {}

    def _open(self, path: str) -> int:
        if path in self._counters:
            return self._counters[path][1]

        pdh = self._pdh
        query = pdh.OpenQuery()
        try:
            counter = pdh.AddEnglishCounter(query, path)
        except self._error_type as e:
            pdh.CloseQuery(query)
            raise CounterUnavailableError(f"Counter {path} is not available: {e}", path) from e

        self._counters[path] = (query, counter)
        return counter

    def open_counters(self, specs: Sequence[CounterSpec]):
        """Open every counter in ``specs``; the first unknown one raises."""
        for spec in specs:
            self._open(spec.path)

    def read_counter(self, category: str, counter: str, instance: Optional[str] = None) -> float:
        """Collect a fresh sample of one counter and return it as a float."""
        path = CounterSpec(category, counter, instance).path
        handle = self._open(path)
        query = self._counters[path][0]
        pdh = self._pdh

        try:
            pdh.CollectQueryData(query)
            _, value = pdh.GetFormattedCounterValue(handle, pdh.PDH_FMT_DOUBLE)
        except self._error_type as e:
            if (e.winerror & 0xFFFFFFFF) == PDH_INVALID_DATA:
                logger.debug(f"First sample of {path}, reporting 0")
                return 0.0
            raise CounterUnavailableError(f"Could not read {path}: {e}", path) from e

        return float(value)

    def list_categories(self) -> List[str]:
        """Names of all performance counter categories on this machine."""
        pdh = self._pdh
        try:
            return sorted(pdh.EnumObjects(None, None, pdh.PERF_DETAIL_WIZARD, True))
        except self._error_type as e:
            raise CounterUnavailableError(f"Could not enumerate counter categories: {e}") from e

    def list_counters(self, category: str) -> Tuple[List[str], List[str]]:
        """Counters and instances available in ``category``."""
        pdh = self._pdh
        try:
            counters, instances = pdh.EnumObjectItems(None, None, category, pdh.PERF_DETAIL_WIZARD)
        except self._error_type as e:
            raise CounterUnavailableError(f"Unknown counter category {category}: {e}") from e
        return list(counters), list(instances)

    def close(self):
        for query, _ in self._counters.values():
            try:
                self._pdh.CloseQuery(query)
            except self._error_type as e:
                logger.debug(f"CloseQuery failed: {e}")
        self._counters.clear()
