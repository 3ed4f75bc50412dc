"""
Local platform information collector.

Gathers operating system and runtime facts using the standard library
and psutil. Unlike the hardware sections this does not go through WMI.
"""

import logging
import os
import platform
import socket
from typing import List

import psutil

from ..core.models import PlatformInfo


logger = logging.getLogger(__name__)


def _get_logical_drives() -> List[str]:
    """Mount points of all known partitions, e.g. ``C:\\``."""
    try:
        partitions = psutil.disk_partitions(all=True)
    except (PermissionError, OSError) as e:
        logger.debug(f"Could not list partitions: {e}")
        return []
    return [p.mountpoint for p in partitions]


def _is_64bit_os() -> bool:
    """Whether the operating system, not this process, is 64-bit."""
    if platform.system() == "Windows":
        # A 32-bit process on 64-bit Windows (WOW64) sees the real
        # architecture only in PROCESSOR_ARCHITEW6432
        arch = os.environ.get("PROCESSOR_ARCHITEW6432") or os.environ.get("PROCESSOR_ARCHITECTURE", "")
        return arch.upper().endswith("64")
    return platform.machine().endswith("64")


def collect_platform_info(include_environment: bool = False) -> PlatformInfo:
    """Get basic platform information for the local machine."""
    service_pack = ""
    if platform.system() == "Windows":
        service_pack = platform.win32_ver()[2]

    return PlatformInfo(
        is_64bit_os=_is_64bit_os(),
        machine_name=socket.gethostname(),
        os=platform.platform(),
        platform=platform.system(),
        service_pack=service_pack,
        runtime_version=platform.python_version(),
        version_string=platform.version(),
        processor_count=psutil.cpu_count(logical=True) or 0,
        logical_drives=_get_logical_drives(),
        environment=dict(os.environ) if include_environment else {},
    )
