"""
Exception hierarchy for inventory collection and live statistics.

Library code raises these; the explorer and the CLI decide whether a
failure skips a record, omits a section or ends the run.
"""

from typing import Optional


class SysInfoError(Exception):
    """Base class for all sysinfo-explorer errors."""


class ExtractionError(SysInfoError):
    """A property bag could not be turned into a record."""

    def __init__(self, record_type: str, key: str, message: str):
        self.record_type = record_type
        self.key = key
        super().__init__(f"{record_type}.{key}: {message}")


class MissingRequiredFieldError(ExtractionError):
    """A required property is absent or null."""

    def __init__(self, record_type: str, key: str):
        super().__init__(record_type, key, "required property is missing")


class ParseFailureError(ExtractionError):
    """A property is present but cannot be converted to its field type."""

    def __init__(self, record_type: str, key: str, value: object, reason: str = ""):
        self.value = value
        message = f"cannot parse {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(record_type, key, message)


class EmptyInputError(SysInfoError):
    """Memory aggregation was asked to summarise zero banks."""


class ProviderError(SysInfoError):
    """The management query subsystem is unreachable or refused a query."""

    def __init__(self, message: str, class_name: Optional[str] = None):
        self.class_name = class_name
        super().__init__(message)


class CounterUnavailableError(SysInfoError):
    """A performance counter does not exist or cannot be read."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(message)


class SamplingError(SysInfoError):
    """A live statistics sample could not be completed."""


class InvalidArgumentError(SysInfoError):
    """Command-line usage error."""
