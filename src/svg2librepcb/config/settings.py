"""Configuration settings for svg2librepcb."""

from enum import Enum
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from svg2librepcb.domain import IdentitySlot, LayerVariant
from svg2librepcb.exceptions import ConfigurationError

# SVG user units to millimetres. Editor documents are authored in millimetre
# user units, so one user unit is one millimetre on the board.
MM_PER_USER_UNIT = 1.0

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Alignment(str, Enum):
    """Which point of the bounding box ends up at the origin."""

    NONE = "none"
    CENTER = "center"
    TOP_LEFT = "top-left"
    BOTTOM_LEFT = "bottom-left"


class MetadataConfig(BaseModel):
    """Descriptive metadata written into every generated element."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Element name")
    author: str = Field(min_length=1, description="Element author")
    version: str = Field(default="0.1.0", description="Element version")
    description: str = Field(default="", description="Element description")
    keywords: str = Field(default="", description="Comma separated keywords")

    @field_validator("name", "author")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class GeometryConfig(BaseModel):
    """Configuration for curve flattening and geometry normalization.

    The flattening tolerance is given in output units (millimetres) and is
    converted to source units with ``scale`` before flattening.
    """

    model_config = ConfigDict(frozen=True)

    flattening_tolerance: float = Field(
        default=0.15,
        gt=0.0,
        allow_inf_nan=False,
        description="Maximum deviation of flattened curves from the true curve (mm)",
    )
    align: Alignment = Field(
        default=Alignment.NONE,
        description="Bounding box anchor moved to the origin",
    )
    point_epsilon: float = Field(
        default=1e-6,
        gt=0.0,
        le=1.0,
        description="Distance under which two points are considered identical (source units)",
    )
    max_subdivision_depth: int = Field(
        default=16,
        ge=1,
        le=32,
        description="Hard cap on Bezier subdivision depth",
    )
    strict_winding: bool = Field(
        default=False,
        description="Reject self-intersecting polygons",
    )
    scale: float = Field(
        default=MM_PER_USER_UNIT,
        gt=0.0,
        description="Millimetres per SVG user unit",
    )

    def source_tolerance(self) -> float:
        """Flattening tolerance converted to source units."""
        return self.flattening_tolerance / self.scale


class LayerConfig(BaseModel):
    """Layer variants to generate footprints for."""

    model_config = ConfigDict(frozen=True)

    copper: bool = Field(default=True, description="Generate copper layer")
    placement: bool = Field(default=True, description="Generate placement layer")
    stopmask: bool = Field(default=True, description="Generate stop mask layer")

    def selected(self) -> list[LayerVariant]:
        """Selected variants in fixed layer order."""
        flags = {
            LayerVariant.COPPER: self.copper,
            LayerVariant.PLACEMENT: self.placement,
            LayerVariant.STOPMASK: self.stopmask,
        }
        return [variant for variant in LayerVariant if flags[variant]]


class UuidOverrides(BaseModel):
    """Caller-supplied UUIDs, validated by the identity allocator."""

    model_config = ConfigDict(frozen=True)

    package: str | None = None
    symbol: str | None = None
    component: str | None = None
    device: str | None = None
    package_category: str | None = None
    component_category: str | None = None

    def as_slot_map(self) -> dict[IdentitySlot, str]:
        """Supplied overrides keyed by identity slot."""
        return {
            slot: value
            for slot in IdentitySlot
            if (value := getattr(self, slot.value)) is not None
        }


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(frozen=True)

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: LogLevel = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )

    @field_validator("log_level", "file_log_level", mode="before")
    @classmethod
    def _upper_case(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


class ConversionSettings(BaseModel):
    """Main application settings."""

    model_config = ConfigDict(frozen=True)

    metadata: MetadataConfig
    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    layers: LayerConfig = Field(default_factory=LayerConfig)
    uuids: UuidOverrides = Field(default_factory=UuidOverrides)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# Flat option name -> (section, field) in ConversionSettings
_OPTION_MAP: dict[str, tuple[str, str]] = {
    "name": ("metadata", "name"),
    "author": ("metadata", "author"),
    "version": ("metadata", "version"),
    "description": ("metadata", "description"),
    "keywords": ("metadata", "keywords"),
    "flattening_tolerance": ("geometry", "flattening_tolerance"),
    "align": ("geometry", "align"),
    "strict_winding": ("geometry", "strict_winding"),
    "layer_copper": ("layers", "copper"),
    "layer_placement": ("layers", "placement"),
    "layer_stopmask": ("layers", "stopmask"),
    "uuid_pkg": ("uuids", "package"),
    "uuid_sym": ("uuids", "symbol"),
    "uuid_cmp": ("uuids", "component"),
    "uuid_dev": ("uuids", "device"),
    "uuid_pkgcat": ("uuids", "package_category"),
    "uuid_cmpcat": ("uuids", "component_category"),
    "log_file": ("logging", "log_file"),
    "log_level": ("logging", "log_level"),
}


def build_settings(**options: Any) -> ConversionSettings:
    """Build settings from flat, CLI-style options.

    Options set to None fall back to their defaults.

    Raises:
        ConfigurationError: If an option is unknown or fails validation
    """
    sections: dict[str, dict[str, Any]] = {"metadata": {}}
    for option, value in options.items():
        if option not in _OPTION_MAP:
            raise ConfigurationError(option, "unknown option")
        if value is None:
            continue
        section, key = _OPTION_MAP[option]
        sections.setdefault(section, {})[key] = value

    try:
        return ConversionSettings(**sections)
    except ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"])
        raise ConfigurationError(field, error["msg"]) from e
