"""
Record extractors for the WMI hardware classes.

Each extractor turns one property bag into one record. Field tables
list which properties are mandatory and what absent optional
properties default to.
"""

from typing import Any, Callable, Dict

from ..core.enums import (
    CpuArchitecture,
    CpuFamily,
    CpuStatus,
    CpuVoltage,
    MemoryFormFactor,
    VideoArchitecture,
    VideoMemoryType,
    disk_status_info,
)
from ..core.fields import (
    PropertyBag,
    enum_of,
    extract_record,
    optional,
    required,
    to_bool,
    to_collapsed_str,
    to_int,
    to_str,
    to_trimmed_str,
    to_wmi_datetime,
)
from ..core.models import (
    CPUInfo,
    DiskDriveInfo,
    DiskPartitionInfo,
    MemoryBankInfo,
    VideoControllerInfo,
)


def _to_status_info(value: Any) -> str:
    return disk_status_info(to_int(value))


CPU_FIELDS = (
    optional("Name", "name", to_collapsed_str, ""),
    required("AddressWidth", "address_width", to_int),
    required("CpuStatus", "cpu_status", enum_of(CpuStatus)),
    required("DataWidth", "data_width", to_int),
    required("DeviceID", "device_id", to_str),
    required("Family", "family", enum_of(CpuFamily)),
    required("Manufacturer", "manufacturer", to_str),
    required("MaxClockSpeed", "max_clock_speed", to_int),
    required("CurrentClockSpeed", "current_clock_speed", to_int),
    required("PartNumber", "part_number", to_str),
    required("SerialNumber", "serial_number", to_trimmed_str),
    optional("UniqueId", "unique_id", to_str, ""),
    required("ProcessorType", "processor_type", to_int),
    required("ProcessorId", "processor_id", to_str),
    optional("LoadPercentage", "load_percentage", to_int, -1),
    required("Architecture", "architecture", enum_of(CpuArchitecture)),
    optional("CurrentVoltage", "current_voltage", enum_of(CpuVoltage), CpuVoltage.UNKNOWN),
    required("NumberOfLogicalProcessors", "number_of_logical_processors", to_int),
    required("NumberOfCores", "number_of_cores", to_int),
    required("NumberOfEnabledCore", "number_of_enabled_core", to_int),
    required("Level", "level", to_int),
    optional("L2CacheSize", "l2_cache_size", to_int, -1),
    optional("L2CacheSpeed", "l2_cache_speed", to_int, -1),
    optional("L3CacheSize", "l3_cache_size", to_int, -1),
    optional("L3CacheSpeed", "l3_cache_speed", to_int, -1),
    optional("ThreadCount", "thread_count", to_int, -1),
    required("VirtualizationFirmwareEnabled", "virtualization_firmware_enabled", to_bool),
)

MEMORY_BANK_FIELDS = (
    required("Capacity", "capacity", to_int),
    optional("Name", "name", to_str, ""),
    optional("BankLabel", "bank_label", to_str, ""),
    optional("Description", "description", to_str, ""),
    optional("DeviceLocator", "device_locator", to_str, ""),
    optional("Manufacturer", "manufacturer", to_str, ""),
    required("SerialNumber", "serial_number", to_str),
    optional("SKU", "sku", to_str, ""),
    optional("Status", "status", to_str, ""),
    optional("Model", "model", to_str, ""),
    optional("OtherIdentifyingInfo", "other_identifying_info", to_str, ""),
    optional("PartNumber", "part_number", to_str, ""),
    required("DataWidth", "data_width", to_int),
    required("Speed", "speed", to_int),
    required("SMBIOSMemoryType", "smbios_memory_type", to_int),
    optional("Tag", "tag", to_str, ""),
    optional("Version", "version", to_str, ""),
    required("TotalWidth", "total_width", to_int),
    required("TypeDetail", "type_detail", to_int),
    optional("PositionInRow", "position_in_row", to_int, -1),
    required("FormFactor", "form_factor", enum_of(MemoryFormFactor)),
)

DISK_DRIVE_FIELDS = (
    required("Name", "name", to_str),
    required("DeviceID", "device_id", to_str),
    required("Model", "model", to_str),
    required("Manufacturer", "manufacturer", to_str),
    required("SerialNumber", "serial_number", to_trimmed_str),
    required("Status", "status", to_str),
    required("SystemCreationClassName", "system_creation_class_name", to_str),
    required("SystemName", "system_name", to_str),
    optional("TotalCylinders", "total_cylinders", to_int, -1),
    optional("TotalHeads", "total_heads", to_int, -1),
    optional("TotalSectors", "total_sectors", to_int, -1),
    optional("TotalTracks", "total_tracks", to_int, -1),
    optional("Size", "size", to_int, -1),
    optional("NumberOfMediaSupported", "number_of_media_supported", to_int, -1),
    optional("Partitions", "partitions", to_int, -1),
    optional("TracksPerCylinder", "tracks_per_cylinder", to_int, -1),
    optional("StatusInfo", "status_info", _to_status_info, ""),
)

DISK_PARTITION_FIELDS = (
    required("Name", "name", to_str),
    required("DeviceID", "device_id", to_str),
    optional("Size", "size", to_int, -1),
    optional("NumberOfBlocks", "number_of_blocks", to_int, -1),
    optional("Status", "status", to_str, ""),
    optional("StatusInfo", "status_info", _to_status_info, ""),
    required("SystemCreationClassName", "system_creation_class_name", to_str),
    required("SystemName", "system_name", to_str),
    required("Type", "type", to_str),
    optional("Bootable", "bootable", to_bool, False),
    optional("BootPartition", "boot_partition", to_bool, False),
    optional("PrimaryPartition", "primary_partition", to_bool, False),
    optional("RewritePartition", "rewrite_partition", to_bool, False),
)

VIDEO_CONTROLLER_FIELDS = (
    optional("CurrentBitsPerPixel", "current_bits_per_pixel", to_int, -1),
    optional("CurrentHorizontalResolution", "current_horizontal_resolution", to_int, -1),
    optional("CurrentNumberOfColors", "current_number_of_colors", to_int, -1),
    optional("CurrentNumberOfColumns", "current_number_of_columns", to_int, -1),
    optional("CurrentNumberOfRows", "current_number_of_rows", to_int, -1),
    optional("CurrentRefreshRate", "current_refresh_rate", to_int, -1),
    optional("CurrentScanMode", "current_scan_mode", to_int, -1),
    optional("CurrentVerticalResolution", "current_vertical_resolution", to_int, -1),
    optional("DeviceSpecificPens", "device_specific_pens", to_int, -1),
    optional("DitherType", "dither_type", to_int, -1),
    required("Name", "name", to_str),
    required("VideoModeDescription", "video_mode_description", to_str),
    required("VideoProcessor", "video_processor", to_str),
    required("SystemName", "system_name", to_str),
    required("Description", "description", to_str),
    required("Status", "status", to_str),
    optional("AdapterRAM", "adapter_ram", to_int, -1),
    optional("ColorTableEntries", "color_table_entries", to_int, -1),
    optional("AdapterDACType", "adapter_dac_type", to_str, ""),
    optional("LastErrorCode", "last_error_code", to_int, -1),
    optional("MaxMemorySupported", "max_memory_supported", to_int, -1),
    optional("MaxNumberControlled", "max_number_controlled", to_int, -1),
    optional("MaxRefreshRate", "max_refresh_rate", to_int, -1),
    optional("MinRefreshRate", "min_refresh_rate", to_int, -1),
    optional("VideoArchitecture", "video_architecture",
             enum_of(VideoArchitecture), VideoArchitecture.UNKNOWN),
    optional("VideoMemoryType", "video_memory_type",
             enum_of(VideoMemoryType), VideoMemoryType.UNKNOWN),
    optional("VideoMode", "video_mode", to_int, -1),
    optional("DriverDate", "driver_date", to_wmi_datetime, None),
)


def extract_cpu(bag: PropertyBag) -> CPUInfo:
    return extract_record(CPUInfo, CPU_FIELDS, bag)


def extract_memory_bank(bag: PropertyBag) -> MemoryBankInfo:
    return extract_record(MemoryBankInfo, MEMORY_BANK_FIELDS, bag)


def extract_disk_drive(bag: PropertyBag) -> DiskDriveInfo:
    return extract_record(DiskDriveInfo, DISK_DRIVE_FIELDS, bag)


def extract_disk_partition(bag: PropertyBag) -> DiskPartitionInfo:
    return extract_record(DiskPartitionInfo, DISK_PARTITION_FIELDS, bag)


def extract_video_controller(bag: PropertyBag) -> VideoControllerInfo:
    return extract_record(VideoControllerInfo, VIDEO_CONTROLLER_FIELDS, bag)


EXTRACTORS: Dict[str, Callable[[PropertyBag], Any]] = {
    "Win32_Processor": extract_cpu,
    "Win32_PhysicalMemory": extract_memory_bank,
    "Win32_VideoController": extract_video_controller,
    "Win32_DiskDrive": extract_disk_drive,
    "Win32_DiskPartition": extract_disk_partition,
}
