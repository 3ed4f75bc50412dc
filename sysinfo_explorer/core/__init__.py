"""Core module containing data models, lookup tables and configuration."""

from .models import (
    CPUInfo,
    MemoryBankInfo,
    MemoryInfo,
    DiskDriveInfo,
    DiskPartitionInfo,
    VideoControllerInfo,
    PlatformInfo,
    StatsSnapshot,
    Inventory,
    aggregate_memory,
)
from .config import Config

__all__ = [
    "CPUInfo",
    "MemoryBankInfo",
    "MemoryInfo",
    "DiskDriveInfo",
    "DiskPartitionInfo",
    "VideoControllerInfo",
    "PlatformInfo",
    "StatsSnapshot",
    "Inventory",
    "aggregate_memory",
    "Config",
]
