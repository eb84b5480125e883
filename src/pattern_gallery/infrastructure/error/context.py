"""Context attached to errors raised by CLI handlers."""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ExceptionContext:
    """
    Where a handler error happened.

    ``operation`` uses the CLI's ``resource.action`` naming, e.g.
    ``"vehicles.create"``; the two halves are logged as separate fields.
    """

    operation: str
    layer: str = "interface"
    handler: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def for_operation(cls, operation: str, layer: str = "interface", **extra: Any) -> "ExceptionContext":
        handler = extra.pop("handler", None)
        return cls(operation=operation, layer=layer, handler=handler, extra=extra)

    @property
    def resource(self) -> str:
        return self.operation.partition(".")[0]

    @property
    def action(self) -> Optional[str]:
        return self.operation.partition(".")[2] or None

    def to_dict(self) -> Dict[str, Any]:
        """Flatten into logging fields."""
        data: Dict[str, Any] = {
            "operation": self.operation,
            "resource": self.resource,
            "action": self.action,
            "layer": self.layer,
            "occurred_at": self.occurred_at.isoformat(),
        }
        if self.handler:
            data["handler"] = self.handler
        data.update(self.extra)
        return data
