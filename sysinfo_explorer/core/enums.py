"""
Lookup tables for WMI integer codes.

Codes follow the CIM documentation for Win32_Processor,
Win32_PhysicalMemory, Win32_DiskDrive and Win32_VideoController.
Every table is total: an unknown code maps to the table's fallback
member instead of raising.
"""

from enum import IntEnum
from typing import Dict


_FALLBACK_NAMES = ("NONE", "UNKNOWN", "OTHER")


class CodeTable(IntEnum):
    """IntEnum that resolves unknown codes to a fallback member."""

    @classmethod
    def _missing_(cls, value):
        for name in _FALLBACK_NAMES:
            if name in cls.__members__:
                return cls.__members__[name]
        return None


class CpuArchitecture(CodeTable):
    X86 = 0
    MIPS = 1
    ALPHA = 2
    POWERPC = 3
    ARM = 5
    IA64 = 6
    X64 = 9
    ARM64 = 12
    NONE = -1


class CpuStatus(CodeTable):
    UNKNOWN = 0
    ENABLED = 1
    DISABLED_USER = 2
    DISABLED_BIOS = 3
    IDLE = 4
    RESERVED = 5
    OTHER = 7
    NONE = -1

    @classmethod
    def _missing_(cls, value):
        # 6 is also documented as reserved
        if value == 6:
            return cls.RESERVED
        return cls.NONE


class CpuFamily(CodeTable):
    OTHER = 1
    UNKNOWN = 2
    I8086 = 3
    I80286 = 4
    INTEL_80386 = 5
    INTEL_80486 = 6
    I8087 = 7
    I80287 = 8
    I80387 = 9
    I80487 = 10
    PENTIUM_BRAND = 11
    PENTIUM_PRO = 12
    PENTIUM_II = 13
    PENTIUM_MMX = 14
    CELERON = 15
    PENTIUM_II_XEON = 16
    PENTIUM_III = 17
    M1_FAMILY = 18
    M2_FAMILY = 19
    K5_FAMILY = 24
    K6_FAMILY = 25
    K6_2 = 26
    K6_3 = 27
    AMD_ATHLON = 28
    AMD_DURON = 29
    AMD29000 = 30
    K6_2_PLUS = 31
    POWER_PC = 32
    POWER_PC_601 = 33
    POWER_PC_603 = 34
    POWER_PC_603_PLUS = 35
    POWER_PC_604 = 36
    POWER_PC_620 = 37
    POWER_PC_X704 = 38
    POWER_PC_750 = 39
    ALPHA = 48
    ALPHA_21064 = 49
    ALPHA_21066 = 50
    ALPHA_21164 = 51
    ALPHA_21164PC = 52
    ALPHA_21164A = 53
    ALPHA_21264 = 54
    ALPHA_21364 = 55
    MIPS = 64
    MIPS_R4000 = 65
    MIPS_R4200 = 66
    MIPS_R4400 = 67
    MIPS_R4600 = 68
    MIPS_R10000 = 69
    SPARC = 80
    SUPERSPARC = 81
    MICROSPARC_II = 82
    MICROSPARC_IIEP = 83
    ULTRASPARC = 84
    ULTRASPARC_II = 85
    ULTRASPARC_II_I = 86
    ULTRASPARC_III = 87
    ULTRASPARC_III_I = 88
    M68040 = 96
    M68XXX = 97
    M68000 = 98
    M68010 = 99
    M68020 = 100
    M68030 = 101
    HOBBIT = 112
    CRUSOE_TM5000 = 120
    CRUSOE_TM3000 = 121
    EFFICEON_TM8000 = 122
    WEITEK = 128
    ITANIUM = 130
    AMD_ATHLON_64 = 131
    AMD_OPTERON = 132
    PA_RISC = 144
    PA_RISC_8500 = 145
    PA_RISC_8000 = 146
    PA_RISC_7300LC = 147
    PA_RISC_7200 = 148
    PA_RISC_7100LC = 149
    PA_RISC_7100 = 150
    V30 = 160
    PENTIUM_III_XEON = 176
    PENTIUM_III_SPEEDSTEP = 177
    PENTIUM_4 = 178
    INTEL_XEON = 179
    AS400 = 180
    INTEL_XEON_MP = 181
    AMD_ATHLON_XP = 182
    AMD_ATHLON_MP = 183
    INTEL_ITANIUM_2 = 184
    INTEL_PENTIUM_M = 185
    K7 = 190
    IBM390 = 200
    G4 = 201
    G5 = 202
    G6 = 203
    Z_ARCHITECTURE = 204
    I860 = 250
    I960 = 251
    SH_3 = 260
    SH_4 = 261
    ARM = 280
    STRONGARM = 281
    CX6X86 = 300
    MEDIAGX = 301
    MII = 302
    WINCHIP = 320
    DSP = 350
    VIDEO_PROCESSOR = 500
    NONE = -1


class CpuType(CodeTable):
    OTHER = 1
    UNKNOWN = 2
    CENTRAL_PROCESSOR = 3
    MATH_PROCESSOR = 4
    DSP_PROCESSOR = 5
    VIDEO_PROCESSOR = 6
    NONE = -1


class CpuVoltage(CodeTable):
    UNKNOWN = 0
    V5 = 1
    V3_3 = 2
    V2_9 = 4
    NONE = -1


class MemoryFormFactor(CodeTable):
    UNKNOWN = 0
    OTHER = 1
    SIP = 2
    DIP = 3
    ZIP = 4
    SOJ = 5
    PROPRIETARY = 6
    SIMM = 7
    DIMM = 8
    TSOP = 9
    PGA = 10
    RIMM = 11
    SODIMM = 12
    SRIMM = 13
    SMD = 14
    SSMP = 15
    QFP = 16
    TQFP = 17
    SOIC = 18
    LCC = 19
    PLCC = 20
    BGA = 21
    FPBGA = 22
    LGA = 23


class VideoArchitecture(CodeTable):
    OTHER = 1
    UNKNOWN = 2
    CGA = 3
    EGA = 4
    VGA = 5
    SVGA = 6
    MDA = 7
    HGC = 8
    MCGA = 9
    IBM_8514A = 10
    XGA = 11
    LINEAR_FRAME_BUFFER = 12
    PC_98 = 160


class VideoMemoryType(CodeTable):
    OTHER = 1
    UNKNOWN = 2
    VRAM = 3
    DRAM = 4
    SRAM = 5
    WRAM = 6
    EDO_RAM = 7
    BURST_SYNCHRONOUS_DRAM = 8
    PIPELINED_BURST_SRAM = 9
    CDRAM = 10
    DRAM_3D = 11
    SDRAM = 12
    SGRAM = 13


DISK_STATUS_INFO: Dict[int, str] = {
    1: "OTHER",
    2: "UNKNOWN",
    3: "ENABLED",
    4: "DISABLED",
    5: "NOT APPLICABLE",
}


def disk_status_info(code: int) -> str:
    """Map a CIM StatusInfo code to its name, or "" when unrecognised."""
    return DISK_STATUS_INFO.get(code, "")
