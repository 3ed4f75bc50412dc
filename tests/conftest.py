"""
Shared pytest fixtures for sysinfo-explorer tests.

Property bags mirror what the WMI package returns for a typical
desktop; the fakes stand in for WMI, PDH and the clock so that the
suite runs on any platform.
"""

from typing import Any, Dict

import pytest

from fakes import FakeClock
from sysinfo_explorer.core.models import PlatformInfo


@pytest.fixture
def cpu_bag() -> Dict[str, Any]:
    return {
        "Name": "Intel(R) Core(TM) i7-9700K   CPU @ 3.60GHz",
        "AddressWidth": 64,
        "CpuStatus": 1,
        "DataWidth": 64,
        "DeviceID": "CPU0",
        "Family": 198,
        "Manufacturer": "GenuineIntel",
        "MaxClockSpeed": 3600,
        "CurrentClockSpeed": 3600,
        "PartNumber": "To Be Filled By O.E.M.",
        "SerialNumber": "  To Be Filled By O.E.M.  ",
        "UniqueId": None,
        "ProcessorType": 3,
        "ProcessorId": "BFEBFBFF000906ED",
        "LoadPercentage": 12,
        "Architecture": 9,
        "CurrentVoltage": 2,
        "NumberOfLogicalProcessors": 8,
        "NumberOfCores": 8,
        "NumberOfEnabledCore": 8,
        "Level": 6,
        "L2CacheSize": 2048,
        "L2CacheSpeed": None,
        "L3CacheSize": 12288,
        "L3CacheSpeed": 0,
        "ThreadCount": 8,
        "VirtualizationFirmwareEnabled": True,
    }


@pytest.fixture
def memory_bag() -> Dict[str, Any]:
    return {
        "Capacity": "8589934592",
        "Name": "Physical Memory",
        "BankLabel": "BANK 0",
        "Description": "Physical Memory",
        "DeviceLocator": "ChannelA-DIMM0",
        "Manufacturer": "Kingston",
        "SerialNumber": "12345678",
        "SKU": None,
        "Status": None,
        "Model": None,
        "OtherIdentifyingInfo": None,
        "PartNumber": "KHX3200C16D4/8GX   ",
        "DataWidth": 64,
        "Speed": 3200,
        "SMBIOSMemoryType": 26,
        "Tag": "Physical Memory 0",
        "Version": None,
        "TotalWidth": 64,
        "TypeDetail": 128,
        "PositionInRow": None,
        "FormFactor": 8,
    }


@pytest.fixture
def video_bag() -> Dict[str, Any]:
    return {
        "Name": "NVIDIA GeForce RTX 2070",
        "VideoModeDescription": "2560 x 1440 x 4294967296 colors",
        "VideoProcessor": "NVIDIA GeForce RTX 2070",
        "SystemName": "DESKTOP-01",
        "Description": "NVIDIA GeForce RTX 2070",
        "Status": "OK",
        "AdapterRAM": 4293918720,
        "AdapterDACType": "Integrated RAMDAC",
        "CurrentBitsPerPixel": 32,
        "CurrentHorizontalResolution": 2560,
        "CurrentVerticalResolution": 1440,
        "CurrentNumberOfColors": "4294967296",
        "CurrentRefreshRate": 144,
        "CurrentScanMode": 4,
        "MaxRefreshRate": 165,
        "MinRefreshRate": 23,
        "VideoArchitecture": 5,
        "VideoMemoryType": 2,
        "DitherType": 0,
        "DriverDate": "20230615143022.000000-000",
    }


@pytest.fixture
def disk_drive_bag() -> Dict[str, Any]:
    return {
        "Name": "\\\\.\\PHYSICALDRIVE0",
        "DeviceID": "\\\\.\\PHYSICALDRIVE0",
        "Model": "Samsung SSD 970 EVO 500GB",
        "Manufacturer": "(Standard disk drives)",
        "SerialNumber": " 0025_3852_81B0_1234. ",
        "Status": "OK",
        "SystemCreationClassName": "Win32_ComputerSystem",
        "SystemName": "DESKTOP-01",
        "TotalCylinders": "60801",
        "TotalHeads": 255,
        "TotalSectors": "976768065",
        "TotalTracks": "15504255",
        "Size": "500105249280",
        "Partitions": 3,
        "TracksPerCylinder": 255,
        "StatusInfo": None,
    }


@pytest.fixture
def partition_bag() -> Dict[str, Any]:
    return {
        "Name": "Disk #0, Partition #1",
        "DeviceID": "Disk #0, Partition #1",
        "Size": "498999492608",
        "NumberOfBlocks": "974608384",
        "Status": None,
        "SystemCreationClassName": "Win32_ComputerSystem",
        "SystemName": "DESKTOP-01",
        "Type": "GPT: Basic Data",
        "Bootable": False,
        "BootPartition": True,
        "PrimaryPartition": True,
        "RewritePartition": None,
    }


@pytest.fixture
def counter_values() -> Dict[str, Any]:
    return {
        "% Processor Time": [0.0, 23.5],
        "Available MBytes": 4096.0,
        "Thread Count": 2450.0,
        "Context Switches/sec": 15234.7,
        "Handle Count": 98765.0,
        "System Calls/sec": 120456.9,
        "Disk Read Bytes/sec": 1048576.0,
        "Disk Write Bytes/sec": 524288.4,
        "Avg. Disk sec/Read": 0.0012,
        "Avg. Disk sec/Write": 0.0008,
    }


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def platform_info() -> PlatformInfo:
    return PlatformInfo(
        is_64bit_os=True,
        machine_name="DESKTOP-01",
        os="Windows-10-10.0.19045-SP0",
        platform="Windows",
        service_pack="SP0",
        runtime_version="3.11.4",
        version_string="10.0.19045",
        processor_count=8,
        logical_drives=["C:\\", "D:\\"],
    )
