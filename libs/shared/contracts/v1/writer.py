from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

DEFAULT_GMETRIC_PATH = "/usr/bin/gmetric"
DEFAULT_GMOND_CONFIG = "/etc/ganglia/gmond.conf"
DEFAULT_TMAX = 60
DEFAULT_DMAX = 0


class Slope(str, Enum):
    ZERO = "ZERO"
    POSITIVE = "POSITIVE"
    NEGATIVE = "NEGATIVE"
    BOTH = "BOTH"

    @classmethod
    def from_name(cls, name: Any) -> Slope:
        """Case-insensitive lookup; anything unrecognised (or None) is BOTH."""
        if isinstance(name, Slope):
            return name
        if isinstance(name, str):
            for slope in cls:
                if name.strip().upper() == slope.name:
                    return slope
        return cls.BOTH


class WriterConfig(BaseModel):
    """Resolved gmetric writer options. Built once, never mutated."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    gmetric_path: str = Field(default=DEFAULT_GMETRIC_PATH, alias="gmetricPath")
    gmond_config: str = Field(default=DEFAULT_GMOND_CONFIG, alias="gmondConfig")
    group_name: str | None = Field(default=None, alias="groupName")
    units: str = ""
    slope: Slope = Slope.BOTH
    tmax: int = DEFAULT_TMAX
    dmax: int = DEFAULT_DMAX
    type_names: tuple[str, ...] = Field(default=(), alias="typeNames")

    @field_validator("slope", mode="before")
    @classmethod
    def _lenient_slope(cls, v: Any) -> Slope:
        return Slope.from_name(v)

    @field_validator("gmetric_path", "gmond_config", "units", "tmax", "dmax", mode="before")
    @classmethod
    def _default_when_null(cls, v: Any, info: ValidationInfo) -> Any:
        # An explicit null behaves like an absent option.
        if v is None:
            return cls.model_fields[info.field_name].default
        return v

    @field_validator("type_names", mode="before")
    @classmethod
    def _split_type_names(cls, v: Any) -> Any:
        if v is None:
            return ()
        if isinstance(v, str):
            return tuple(t.strip() for t in v.split(",") if t.strip())
        return v

    def summary(self) -> str:
        return (
            f"group: {self.group_name}, units: {self.units!r}, slope: {self.slope.name}, "
            f"tmax: {self.tmax}, dmax: {self.dmax}, config: {self.gmond_config}, "
            f"gmetric path: {self.gmetric_path}"
        )
