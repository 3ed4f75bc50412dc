"""
Typed field extraction from WMI property bags.

A property bag is a plain mapping of property name to a loosely typed
value (str, int, float, bool or None). Each record type declares a
tuple of ``Field`` entries; ``extract_record`` walks them and either
returns a fully populated record or raises an ``ExtractionError``.
"""

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Mapping, Sequence, Type, TypeVar

from .errors import MissingRequiredFieldError, ParseFailureError


PropertyBag = Mapping[str, Any]
Converter = Callable[[Any], Any]
R = TypeVar("R")

_WHITESPACE = re.compile(r"\s+")
_TRUE_STRINGS = {"true", "1"}
_FALSE_STRINGS = {"false", "0"}


@dataclass(frozen=True)
class Field:
    """One property lookup: bag key, record attribute, converter, default."""

    key: str
    attr: str
    convert: Converter
    required: bool = True
    default: Any = None


def required(key: str, attr: str, convert: Converter) -> Field:
    return Field(key, attr, convert, required=True)


def optional(key: str, attr: str, convert: Converter, default: Any) -> Field:
    return Field(key, attr, convert, required=False, default=default)


# Converters

def to_int(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{value!r} is not integral")
        return int(value)
    return int(str(value).strip())


def to_float(value: Any) -> float:
    return float(value)


def to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    raise ValueError(f"{value!r} is not a boolean")


def to_str(value: Any) -> str:
    return str(value)


def to_trimmed_str(value: Any) -> str:
    return str(value).strip()


def to_collapsed_str(value: Any) -> str:
    """Collapse runs of whitespace, as in padded CPU brand strings."""
    return _WHITESPACE.sub(" ", str(value))


def enum_of(table: Type) -> Converter:
    """Build a converter that maps an integer code through a lookup table."""

    def convert(value: Any):
        return table(to_int(value))

    convert.__name__ = f"to_{table.__name__}"
    return convert


def to_wmi_datetime(value: Any) -> datetime:
    """
    Parse a CIM datetime such as ``20230615143022.000000+000``.

    Only the leading 14 digits (YYYYMMDDHHMMSS) are used. They are taken
    as UTC and returned converted to the local timezone.
    """
    text = str(value).strip()
    stamp = text[:14]
    if len(stamp) != 14 or not (stamp.isascii() and stamp.isdigit()):
        raise ValueError(f"{value!r} does not start with 14 digits")
    parsed = datetime.strptime(stamp, "%Y%m%d%H%M%S")
    return parsed.replace(tzinfo=timezone.utc).astimezone()


def extract_record(record_cls: Type[R], fields: Sequence[Field], bag: PropertyBag) -> R:
    """
    Build ``record_cls`` from ``bag`` according to ``fields``.

    A key that is absent or ``None`` is treated as missing: required
    fields raise ``MissingRequiredFieldError``, optional fields take their
    default. Conversion errors raise ``ParseFailureError``. Nothing is
    returned unless every field was resolved.
    """
    record_type = record_cls.__name__
    values = {}

    for f in fields:
        raw = bag.get(f.key)
        if raw is None:
            if f.required:
                raise MissingRequiredFieldError(record_type, f.key)
            values[f.attr] = f.default
            continue

        try:
            values[f.attr] = f.convert(raw)
        except (TypeError, ValueError, OverflowError, OSError) as e:
            raise ParseFailureError(record_type, f.key, raw, str(e)) from e

    return record_cls(**values)
