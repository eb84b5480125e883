"""Configuration schemas for pattern scenarios and CLI output."""
from typing import Union

from pydantic import BaseModel, Field, field_validator

from pattern_gallery.config.defaults import OutputFormat


class StockConfig(BaseModel):
    """Observer scenario configuration."""

    initial_price: Union[int, float] = Field(100, description="Price a new stock starts at")

    @field_validator("initial_price")
    @classmethod
    def validate_initial_price(cls, value):
        if value < 0:
            raise ValueError("initial_price must not be negative")
        return value


class OutputConfig(BaseModel):
    """CLI output configuration."""

    format: OutputFormat = Field(OutputFormat.LIST, description="Default output format")
