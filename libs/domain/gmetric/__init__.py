from .command import SubmissionCommand, build_command
from .naming import DefaultKeyNamer
from .values import (
    FloatValue,
    IntegerValue,
    MeasurementValue,
    TextValue,
    WireType,
    classify,
    coerce,
    format_value,
    is_numeric,
)
from .writer import GmetricWriter, Measurement, WriteSummary

__all__ = [
    "GmetricWriter",
    "Measurement",
    "WriteSummary",
    "DefaultKeyNamer",
    "SubmissionCommand",
    "build_command",
    "WireType",
    "IntegerValue",
    "FloatValue",
    "TextValue",
    "MeasurementValue",
    "classify",
    "coerce",
    "format_value",
    "is_numeric",
]
