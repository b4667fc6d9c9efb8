from __future__ import annotations

import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeAlias

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class WireType(str, Enum):
    """gmetric -t tokens."""

    INT32 = "int32"
    DOUBLE = "double"
    STRING = "string"


@dataclass(frozen=True)
class IntegerValue:
    value: int


@dataclass(frozen=True)
class FloatValue:
    value: float


@dataclass(frozen=True)
class TextValue:
    text: str


MeasurementValue: TypeAlias = IntegerValue | FloatValue | TextValue


def coerce(raw: Any) -> MeasurementValue | None:
    """Pin a raw polled value to one of the three variants. None stays None."""
    if raw is None:
        return None
    # bool is an int subclass but never a measurement number
    if isinstance(raw, bool):
        return TextValue(str(raw))
    if isinstance(raw, numbers.Integral):
        return IntegerValue(int(raw))
    if isinstance(raw, numbers.Real):
        return FloatValue(float(raw))
    return TextValue(str(raw))


def _fits_int32(n: int) -> bool:
    return INT32_MIN <= n <= INT32_MAX


_NON_FINITE_WORDS = frozenset({"nan", "inf", "infinity"})


def _parse_float(text: str) -> float | None:
    """float(), minus the Python-only spellings.

    Python also takes "inf", "nan" and any-case spellings; only the exact
    "NaN" / "Infinity" words (optionally signed) count as numbers here.
    """
    if "_" in text:
        return None
    word = text.strip().lstrip("+-")
    if word.lower() in _NON_FINITE_WORDS and word not in ("NaN", "Infinity"):
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _parse_int(text: str) -> int | None:
    if "_" in text:
        return None
    try:
        return int(text, 10)
    except ValueError:
        return None


def classify(value: MeasurementValue) -> WireType:
    """Deduce the gmetric wire type. Total; first match wins.

    1. bounded (32-bit) integer            -> int32
    2. wider integer or any float          -> double
    3. text that parses as a float literal -> double
    4. text that parses as an int literal  -> int32 (double if wider)
    5. anything else                       -> string
    """
    if isinstance(value, IntegerValue):
        return WireType.INT32 if _fits_int32(value.value) else WireType.DOUBLE
    if isinstance(value, FloatValue):
        return WireType.DOUBLE

    if _parse_float(value.text) is not None:
        return WireType.DOUBLE
    n = _parse_int(value.text)
    if n is not None:
        return WireType.INT32 if _fits_int32(n) else WireType.DOUBLE
    return WireType.STRING


def is_numeric(value: MeasurementValue | None) -> bool:
    """The dispatch pre-filter. Defined via classify() so the two never disagree."""
    return value is not None and classify(value) is not WireType.STRING


def format_value(value: MeasurementValue) -> str:
    if isinstance(value, TextValue):
        return value.text
    return str(value.value)
