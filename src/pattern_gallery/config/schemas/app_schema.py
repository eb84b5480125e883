"""Main application configuration schema."""

from typing import Any, Dict

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from pattern_gallery.domain.base.exceptions import ConfigurationError

from .common_schema import OutputConfig, StockConfig
from .logging_schema import LoggingConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    stock: StockConfig = Field(default_factory=StockConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """Create configuration from a dictionary."""
        return validate_config(data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


def validate_config(data: Dict[str, Any]) -> AppConfig:
    """
    Validate raw configuration data.

    Raises:
        ConfigurationError: If the data does not match the schema
    """
    try:
        return AppConfig.model_validate(data)
    except PydanticValidationError as e:
        fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
        raise ConfigurationError(f"Invalid configuration: {e}", missing_fields=fields) from e
