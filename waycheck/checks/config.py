"""Configuration for road-network checks."""

from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..graph.tags import HighwayTag
from ..schema.loader import load_yaml


class ConfigurationError(Exception):
    """Raised when a check is configured with invalid values."""

    def __init__(self, message: str, errors: list[dict] | None = None):
        self.errors = errors or []
        super().__init__(message)


class ShortSegmentConfig(BaseModel):
    """Settings for the short segment check, keyed by their dotted names."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    maximum_length_m: float = Field(
        default=1.0, gt=0, alias="edge.length.maximum.meters"
    )
    minimum_valence: int = Field(default=3, ge=0, alias="node.valence.minimum")
    minimum_highway_priority: HighwayTag = Field(
        default=HighwayTag.SERVICE, alias="highway.priority.minimum"
    )

    @field_validator("minimum_highway_priority", mode="before")
    @classmethod
    def parse_priority(cls, value: Any) -> HighwayTag:
        """Accept enum names and tag values in any case."""
        if isinstance(value, HighwayTag):
            return value
        highway = HighwayTag.from_value(str(value))
        if highway is None:
            raise ValueError(f"Unknown highway priority '{value}'")
        return highway

    @classmethod
    def from_mapping(cls, data: dict[str, Any] | None) -> "ShortSegmentConfig":
        """Build a configuration from raw key/value settings.

        Raises:
            ConfigurationError: If any value is invalid.
        """
        known = set(cls.model_fields)
        known.update(f.alias for f in cls.model_fields.values() if f.alias)
        unknown = sorted(k for k in (data or {}) if k not in known)
        if unknown:
            logger.warning(f"Ignoring unknown short segment settings: {unknown}")

        try:
            return cls.model_validate(data or {})
        except ValidationError as e:
            errors = [
                {
                    "loc": ".".join(str(x) for x in err["loc"]),
                    "msg": err["msg"],
                    "type": err["type"],
                }
                for err in e.errors()
            ]
            messages = "; ".join(f"{err['loc']}: {err['msg']}" for err in errors)
            raise ConfigurationError(
                f"Invalid short segment configuration: {messages}", errors
            ) from e


def load_configuration(path: str | Path, check_name: str) -> dict[str, Any]:
    """Load the settings for one check from a YAML or JSON file.

    Settings may be nested under the check name or given flat at the root.

    Raises:
        SchemaLoadError: If the file cannot be read or parsed.
    """
    data = load_yaml(path)
    section = data.get(check_name)
    if isinstance(section, dict):
        return section
    return {k: v for k, v in data.items() if not isinstance(v, dict)}
