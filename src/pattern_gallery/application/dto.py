"""Data transfer objects returned by the application layer."""
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict


class BaseDTO(BaseModel):
    """Base class for all DTOs - immutable, with a stable dict API."""

    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BaseDTO":
        return cls.model_validate(data)


class ScenarioInfo(BaseDTO):
    """Describes a registered usage scenario."""

    name: str
    pattern: str
    description: str


class ScenarioResult(BaseDTO):
    """Console lines produced by running a scenario."""

    name: str
    pattern: str
    lines: List[str]
