"""
Configuration management for sysinfo-explorer.

Loads configuration from YAML files and environment variables.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import yaml


@dataclass
class ReportConfig:
    """Inventory report output configuration."""

    output_filename: str = "devices.txt"
    enable_file_output: bool = False
    append: bool = True  # False truncates the report once per run
    include_environment: bool = False


@dataclass
class WMIConfig:
    """WMI connection configuration."""

    namespace: str = "root\\cimv2"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_path: Optional[str] = None
    max_file_size_mb: int = 10
    backup_count: int = 5


def _env_flag(name: str) -> Optional[bool]:
    value = os.getenv(name)
    if not value:
        return None
    return value.lower() in ("1", "true", "yes", "on")


@dataclass
class Config:
    """Main configuration container."""

    report: ReportConfig = field(default_factory=ReportConfig)
    wmi: WMIConfig = field(default_factory=WMIConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: str) -> "Config":
        """Load configuration from YAML file."""
        config_path = Path(path)
        if not config_path.exists():
            config = cls()
            config._apply_env_overrides()
            return config

        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: dict) -> "Config":
        """Create config from dictionary."""
        config = cls()

        if "report" in data:
            config.report = ReportConfig(**data["report"])

        if "wmi" in data:
            config.wmi = WMIConfig(**data["wmi"])

        if "logging" in data:
            config.logging = LoggingConfig(**data["logging"])

        # Override with environment variables
        config._apply_env_overrides()

        return config

    def _apply_env_overrides(self):
        """Apply environment variable overrides."""
        # Report settings
        if os.getenv("SYSINFO_OUTPUT_FILE"):
            self.report.output_filename = os.getenv("SYSINFO_OUTPUT_FILE")
            self.report.enable_file_output = True
        append = _env_flag("SYSINFO_APPEND")
        if append is not None:
            self.report.append = append
        include_env = _env_flag("SYSINFO_INCLUDE_ENV")
        if include_env is not None:
            self.report.include_environment = include_env

        # WMI settings
        if os.getenv("SYSINFO_WMI_NAMESPACE"):
            self.wmi.namespace = os.getenv("SYSINFO_WMI_NAMESPACE")

        # Logging
        if os.getenv("LOG_LEVEL"):
            self.logging.level = os.getenv("LOG_LEVEL")
        if os.getenv("LOG_FILE"):
            self.logging.file_path = os.getenv("LOG_FILE")

    def to_yaml(self, path: str):
        """Save configuration to YAML file."""
        data = {
            "report": {
                "output_filename": self.report.output_filename,
                "enable_file_output": self.report.enable_file_output,
                "append": self.report.append,
                "include_environment": self.report.include_environment,
            },
            "wmi": {
                "namespace": self.wmi.namespace,
            },
            "logging": {
                "level": self.logging.level,
                "file_path": self.logging.file_path,
                "max_file_size_mb": self.logging.max_file_size_mb,
                "backup_count": self.logging.backup_count,
            },
        }

        with open(path, "w") as f:
            yaml.dump(data, f, default_flow_style=False)


def get_default_config_path() -> str:
    """Get the default configuration file path."""
    # Check common locations
    candidates = [
        Path("config/config.yaml"),
        Path("config.yaml"),
        Path.home() / ".sysinfo-explorer" / "config.yaml",
    ]

    for path in candidates:
        if path.exists():
            return str(path)

    # Return the first candidate as default
    return str(candidates[0])
