"""
Hardware inventory explorer.

Queries each hardware class through a query provider, builds one record
per returned property bag and optionally streams a text rendering of
every section to a report file.
"""

import logging
import time
from dataclasses import dataclass, replace
from typing import Callable, Optional

from ..core.config import Config, ReportConfig
from ..core.errors import EmptyInputError, ExtractionError, ProviderError
from ..core.models import Inventory, PlatformInfo, aggregate_memory
from ..core.report import ReportWriter, section_banner
from .extractors import EXTRACTORS
from .platform_collector import collect_platform_info
from .wmi_provider import QueryProvider, WMIQueryProvider


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Section:
    """One hardware class and where its records land in the inventory."""

    title: str
    class_name: str
    items_label: str
    attr: str


MEMORY_CLASS = "Win32_PhysicalMemory"

# Report order
SECTIONS = (
    Section("Memory Info", MEMORY_CLASS, "memory banks", "memory_banks"),
    Section("Processor Info", "Win32_Processor", "CPUs", "cpus"),
    Section("Video Controllers", "Win32_VideoController", "video controllers", "video_controllers"),
    Section("Disk Drives", "Win32_DiskDrive", "disk drives", "disk_drives"),
    Section("Disk Partitions", "Win32_DiskPartition", "partitions", "disk_partitions"),
)


class SystemExplorer:
    """
    Builds a hardware inventory of the local machine.

    - Platform facts come from the local runtime
    - Hardware records come from the query provider, one section per class
    - A malformed record is skipped; a failed class query omits its section
    """

    def __init__(
        self,
        provider: QueryProvider,
        report_config: Optional[ReportConfig] = None,
        sink: Optional[ReportWriter] = None,
        platform_collector: Optional[Callable[[bool], PlatformInfo]] = None,
    ):
        self.provider = provider
        self.report_config = report_config or ReportConfig()
        if sink is None and self.report_config.enable_file_output:
            sink = ReportWriter(self.report_config.output_filename)
        self.sink = sink
        self.platform_collector = platform_collector or collect_platform_info

    def _emit(self, text: str):
        logger.debug(text.rstrip("\n"))
        if self.sink:
            self.sink.append(text)

    def run(self) -> Inventory:
        """Collect every section and return the inventory."""
        start_time = time.time()
        inventory = Inventory()

        if self.sink and not self.report_config.append:
            self.sink.overwrite("")

        self._collect_platform(inventory)

        for section in SECTIONS:
            self._collect_section(section, inventory)
            if section.class_name == MEMORY_CLASS:
                self._summarise_memory(inventory)

        inventory.collection_duration_ms = (time.time() - start_time) * 1000
        logger.info(
            f"Inventory complete: {inventory.record_count} records, "
            f"{len(inventory.errors)} errors in {inventory.collection_duration_ms:.0f} ms"
        )
        return inventory

    def _collect_platform(self, inventory: Inventory):
        try:
            platform_info = self.platform_collector(self.report_config.include_environment)
        except Exception as e:
            logger.error(f"Platform info: {e}")
            inventory.errors.append(f"Platform info: {e}")
            return

        inventory.platform = platform_info
        self._emit(f"{section_banner('Platform General Information')}\n{platform_info.render()}")

    def _collect_section(self, section: Section, inventory: Inventory):
        try:
            bags = self.provider.query(section.class_name)
        except ProviderError as e:
            logger.error(f"{section.title}: {e}")
            inventory.errors.append(f"{section.title}: {e}")
            return

        self._emit(f"\n{section_banner(section.title)}\n")
        self._emit(f"\nDetected {section.items_label}: {len(bags)}\n")

        extract = EXTRACTORS[section.class_name]
        records = getattr(inventory, section.attr)
        for index, bag in enumerate(bags):
            try:
                record = extract(bag)
            except ExtractionError as e:
                logger.warning(f"Skipping {section.class_name} #{index}: {e}")
                inventory.errors.append(f"{section.title} #{index}: {e}")
                continue

            records.append(record)
            self._emit(f"{record.render()}\n")

    def _summarise_memory(self, inventory: Inventory):
        try:
            inventory.memory = aggregate_memory(inventory.memory_banks)
        except EmptyInputError as e:
            logger.warning(f"Memory summary unavailable: {e}")
            inventory.errors.append(f"Memory summary: {e}")
            return

        self._emit(f"{inventory.memory.render()}\n")


def explore_system(output_filename: str, config: Optional[Config] = None) -> Inventory:
    """Explore the local machine and append the report to ``output_filename``."""
    config = config or Config()
    report = replace(config.report, output_filename=output_filename, enable_file_output=True)

    provider = WMIQueryProvider(config.wmi.namespace)
    return SystemExplorer(provider, report).run()
