"""
Plain-text report sink.

Write failures are logged and swallowed so that a broken report file
never stops an inventory run.
"""

import logging
from pathlib import Path
from typing import Union


logger = logging.getLogger(__name__)

BANNER = "**********"


def section_banner(title: str) -> str:
    return f"{BANNER} {title} {BANNER}"


class ReportWriter:
    """Appends or overwrites text in a report file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def append(self, text: str):
        self._write(text, "a")

    def overwrite(self, text: str):
        self._write(text, "w")

    def _write(self, text: str, mode: str):
        try:
            with open(self.path, mode, encoding="utf-8") as f:
                f.write(text)
        except OSError as e:
            logger.error(f"Could not write report {self.path}: {e}")
