"""
Data models for hardware inventory and live statistics.

These dataclasses are the records built from WMI property bags, the
derived memory summary, the platform description and the live
statistics snapshot. Records are frozen once built.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from .enums import (
    CpuArchitecture,
    CpuFamily,
    CpuStatus,
    CpuVoltage,
    MemoryFormFactor,
    VideoArchitecture,
    VideoMemoryType,
)
from .errors import EmptyInputError


BYTES_PER_MEGABYTE = 1024 * 1024
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _format_value(value: Any) -> str:
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, datetime):
        return value.strftime(DATE_FORMAT)
    return str(value)


def render_lines(lines: Iterable[Tuple[str, Any]]) -> str:
    """Render ``Label: value`` lines, leaving out empty values."""
    out = []
    for label, value in lines:
        if value is None or value == "":
            continue
        out.append(f"{label}: {_format_value(value)}\n")
    return "".join(out)


@dataclass(frozen=True)
class CPUInfo:
    """A processor as reported by Win32_Processor."""

    name: str
    address_width: int
    cpu_status: CpuStatus
    data_width: int
    device_id: str
    family: CpuFamily
    manufacturer: str
    max_clock_speed: int
    current_clock_speed: int
    part_number: str
    serial_number: str
    unique_id: str
    processor_type: int
    processor_id: str
    load_percentage: int
    architecture: CpuArchitecture
    current_voltage: CpuVoltage
    number_of_logical_processors: int
    number_of_cores: int
    number_of_enabled_core: int
    level: int
    l2_cache_size: int
    l2_cache_speed: int
    l3_cache_size: int
    l3_cache_speed: int
    thread_count: int
    virtualization_firmware_enabled: bool

    def render(self) -> str:
        return render_lines([
            ("Device ID", self.device_id),
            ("Name", self.name),
            ("Current Clock Speed (MHz)", self.current_clock_speed),
            ("Max. Clock Speed (MHz)", self.max_clock_speed),
            ("Architecture", self.architecture),
            ("Family", self.family),
            ("Manufacturer", self.manufacturer),
            ("Number Of Cores", self.number_of_cores),
            ("Number Of Logical Processors", self.number_of_logical_processors),
            ("Number Of Enabled Core", self.number_of_enabled_core),
            ("Virtualization Firmware",
             "ENABLED" if self.virtualization_firmware_enabled else "DISABLED"),
        ])

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class MemoryBankInfo:
    """A physical memory module as reported by Win32_PhysicalMemory."""

    capacity: int
    name: str
    bank_label: str
    description: str
    device_locator: str
    manufacturer: str
    serial_number: str
    sku: str
    status: str
    model: str
    other_identifying_info: str
    part_number: str
    data_width: int
    speed: int
    smbios_memory_type: int
    tag: str
    version: str
    total_width: int
    type_detail: int
    position_in_row: int
    form_factor: MemoryFormFactor

    @property
    def capacity_mb(self) -> int:
        return self.capacity // BYTES_PER_MEGABYTE

    def render(self) -> str:
        return render_lines([
            ("Tag", self.tag),
            ("Bank Label", self.bank_label),
            ("Device Locator", self.device_locator),
            ("Manufacturer", self.manufacturer),
            ("Part Number", self.part_number.strip()),
            ("Serial Number", self.serial_number.strip()),
            ("Capacity (Bytes)", self.capacity),
            ("Capacity (MegaBytes)", self.capacity_mb),
            ("Speed", self.speed),
            ("Data Width", self.data_width),
            ("Form Factor", self.form_factor),
        ])

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class MemoryInfo:
    """System-wide memory summary derived from the installed banks."""

    bank_count: int
    data_width: int
    total_size: int
    total_size_mb: int

    def render(self) -> str:
        return render_lines([
            ("Number of Memory Banks", self.bank_count),
            ("Memory Data Width", self.data_width),
            ("Memory Total Size (Bytes)", self.total_size),
            ("Memory Total Size (MegaBytes)", self.total_size_mb),
        ])

    def __str__(self) -> str:
        return self.render()


def aggregate_memory(banks: Sequence[MemoryBankInfo]) -> MemoryInfo:
    """
    Summarise a list of memory banks.

    The data width is taken from the first bank only; mixed-width
    configurations are reported with that width.
    """
    if not banks:
        raise EmptyInputError("no memory banks to aggregate")

    total = sum(bank.capacity for bank in banks)
    return MemoryInfo(
        bank_count=len(banks),
        data_width=banks[0].data_width,
        total_size=total,
        total_size_mb=total // BYTES_PER_MEGABYTE,
    )


@dataclass(frozen=True)
class DiskDriveInfo:
    """A physical disk as reported by Win32_DiskDrive."""

    name: str
    device_id: str
    model: str
    manufacturer: str
    serial_number: str
    status: str
    system_creation_class_name: str
    system_name: str
    total_cylinders: int
    total_heads: int
    total_sectors: int
    total_tracks: int
    size: int
    number_of_media_supported: int
    partitions: int
    tracks_per_cylinder: int
    status_info: str

    @property
    def size_gb(self) -> float:
        """Size in gigabytes, or 0.0 when unknown."""
        if self.size < 0:
            return 0.0
        return self.size / (1024 ** 3)

    def render(self) -> str:
        return render_lines([
            ("Name", self.name),
            ("Manufacturer", self.manufacturer),
            ("SerialNumber", self.serial_number),
            ("Model", self.model),
            ("Size (Bytes)", self.size if self.size >= 0 else None),
            ("Size (GB)", f"{self.size_gb:.2f}" if self.size >= 0 else None),
            ("Partitions", self.partitions),
            ("Status", self.status),
        ])

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class DiskPartitionInfo:
    """A partition as reported by Win32_DiskPartition."""

    name: str
    device_id: str
    size: int
    number_of_blocks: int
    status: str
    status_info: str
    system_creation_class_name: str
    system_name: str
    type: str
    bootable: bool
    boot_partition: bool
    primary_partition: bool
    rewrite_partition: bool

    def render(self) -> str:
        return render_lines([
            ("Name", self.name),
            ("Type", self.type),
            ("Size (Bytes)", self.size),
            ("Number Of Blocks", self.number_of_blocks),
            ("Partition Status", self.status),
            ("Boot Partition", self.boot_partition),
            ("Primary Partition", self.primary_partition),
        ])

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class VideoControllerInfo:
    """A display adapter as reported by Win32_VideoController."""

    name: str
    video_mode_description: str
    video_processor: str
    system_name: str
    description: str
    status: str
    adapter_ram: int
    color_table_entries: int
    adapter_dac_type: str
    last_error_code: int
    max_memory_supported: int
    max_number_controlled: int
    max_refresh_rate: int
    min_refresh_rate: int
    video_architecture: VideoArchitecture
    video_memory_type: VideoMemoryType
    video_mode: int
    current_bits_per_pixel: int
    current_horizontal_resolution: int
    current_number_of_colors: int
    current_number_of_columns: int
    current_number_of_rows: int
    current_refresh_rate: int
    current_scan_mode: int
    current_vertical_resolution: int
    device_specific_pens: int
    dither_type: int
    driver_date: Optional[datetime] = None

    def render(self) -> str:
        return render_lines([
            ("Name", self.name),
            ("Video Processor", self.video_processor),
            ("Video Architecture", self.video_architecture),
            ("Video Memory Type", self.video_memory_type),
            ("Video Controller Status", self.status),
            ("Adapter RAM (Bytes)", self.adapter_ram),
            ("Driver Date", self.driver_date),
            ("Video Mode Description", self.video_mode_description),
        ])

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class PlatformInfo:
    """Operating system and runtime facts about the local machine."""

    is_64bit_os: bool
    machine_name: str
    os: str
    platform: str
    service_pack: str
    runtime_version: str
    version_string: str
    processor_count: int
    logical_drives: List[str] = field(default_factory=list)
    environment: Dict[str, str] = field(default_factory=dict)

    def render(self) -> str:
        text = render_lines([
            ("64-bit Operating System", self.is_64bit_os),
            ("Machine Name", self.machine_name),
            ("OS", self.os),
            ("Platform", self.platform),
            ("Service Pack", self.service_pack),
            ("Python Version", self.runtime_version),
            ("Version String", self.version_string),
            ("Processor Count", self.processor_count),
        ])
        if self.logical_drives:
            text += "Logical Drives: " + " | ".join(self.logical_drives) + "\n"
        if self.environment:
            text += "Environment Variables:\n"
            for key in sorted(self.environment):
                text += f"\t{key}: {self.environment[key]}\n"
        return text

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class StatsSnapshot:
    """Counter values captured by one live statistics sample."""

    total_memory_mb: float
    free_memory_mb: float
    memory_usage_percent: float
    cpu_usage: float
    context_switches: int
    thread_count: int
    handle_count: int
    system_calls: int
    disk_read_bytes: int
    disk_write_bytes: int
    avg_disk_read_seconds: float
    avg_disk_write_seconds: float
    timestamp: datetime = field(default_factory=datetime.now)

    def render(self) -> str:
        return (
            f"Total memory size: {self.total_memory_mb:.0f} Mbytes\n"
            f"Free memory: {self.free_memory_mb:.0f} Mbytes\n"
            f"Memory usage: {self.memory_usage_percent:.2f}%\n"
            f"CPU usage: {self.cpu_usage:.2f}%\n"
            f"Context switches: {self.context_switches}\n"
            f"No. threads: {self.thread_count}\n"
            f"No. handles: {self.handle_count}\n"
            f"System calls: {self.system_calls}\n"
            f"Bytes read from the disk: {self.disk_read_bytes} bytes\n"
            f"Bytes written to the disk: {self.disk_write_bytes} bytes\n"
            f"Avg. disk reading time: {self.avg_disk_read_seconds:.4f}s\n"
            f"Avg. disk writing time: {self.avg_disk_write_seconds:.4f}s\n"
        )

    def __str__(self) -> str:
        return self.render()


def memory_usage_percent(total_mb: float, free_mb: float) -> float:
    """Used share of total memory; 0.0 when the total is unknown."""
    if total_mb <= 0:
        return 0.0
    return (total_mb - free_mb) * 100.0 / total_mb


@dataclass
class Inventory:
    """Everything one explorer run discovered."""

    platform: Optional[PlatformInfo] = None
    memory: Optional[MemoryInfo] = None
    cpus: List[CPUInfo] = field(default_factory=list)
    memory_banks: List[MemoryBankInfo] = field(default_factory=list)
    video_controllers: List[VideoControllerInfo] = field(default_factory=list)
    disk_drives: List[DiskDriveInfo] = field(default_factory=list)
    disk_partitions: List[DiskPartitionInfo] = field(default_factory=list)
    timestamp: datetime = field(default_factory=datetime.now)
    collection_duration_ms: float = 0.0
    errors: List[str] = field(default_factory=list)

    @property
    def record_count(self) -> int:
        return (
            len(self.cpus)
            + len(self.memory_banks)
            + len(self.video_controllers)
            + len(self.disk_drives)
            + len(self.disk_partitions)
        )
