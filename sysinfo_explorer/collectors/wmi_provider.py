"""
WMI query provider.

Runs ``SELECT * FROM <class>`` queries through the WMI package and hands
each result back as a plain dict property bag, so extractors never see
COM objects.
"""

import logging
from typing import Any, Dict, List, Protocol

from ..core.errors import ProviderError


logger = logging.getLogger(__name__)

BYTES_PER_MEGABYTE = 1048576


class QueryProvider(Protocol):
    """Anything that can answer a management class query with property bags."""

    def query(self, class_name: str) -> List[Dict[str, Any]]:
        ...


class WMIQueryProvider:
    """
    Query provider backed by the local WMI service.

    Connecting happens in the constructor so that a machine without WMI
    fails at startup rather than section by section.
    """

    def __init__(self, namespace: str = "root\\cimv2"):
        self.namespace = namespace
        try:
            import wmi
        except ImportError as e:
            raise ProviderError("WMI is not available on this platform") from e

        self._error_type = wmi.x_wmi
        try:
            self._connection = wmi.WMI(namespace=namespace)
        except wmi.x_wmi as e:
            raise ProviderError(f"Could not connect to WMI namespace {namespace}: {e}") from e

    def query(self, class_name: str) -> List[Dict[str, Any]]:
        """Return one property bag per instance of ``class_name``."""
        logger.debug(f"Querying {class_name}")
        try:
            results = self._connection.query(f"SELECT * FROM {class_name}")
            return [self._to_bag(obj) for obj in results]
        except self._error_type as e:
            raise ProviderError(f"WMI query for {class_name} failed: {e}", class_name) from e

    @staticmethod
    def _to_bag(obj) -> Dict[str, Any]:
        return {name: getattr(obj, name, None) for name in obj.properties}


def query_total_memory_mb(provider: QueryProvider) -> float:
    """Installed physical memory in whole megabytes, from Win32_ComputerSystem."""
    total = 0.0
    for bag in provider.query("Win32_ComputerSystem"):
        value = bag.get("TotalPhysicalMemory")
        if value is None:
            continue
        total += round(float(value) / BYTES_PER_MEGABYTE)
    return total
