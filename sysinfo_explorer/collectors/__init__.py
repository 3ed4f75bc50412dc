"""Collectors module for gathering hardware inventory."""

from .explorer import SystemExplorer, explore_system
from .platform_collector import collect_platform_info
from .wmi_provider import WMIQueryProvider, query_total_memory_mb

__all__ = [
    "SystemExplorer",
    "explore_system",
    "collect_platform_info",
    "WMIQueryProvider",
    "query_total_memory_mb",
]
