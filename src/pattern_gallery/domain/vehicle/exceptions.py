"""Vehicle domain exceptions."""
from pattern_gallery.domain.base.exceptions import UnsupportedVariantError


class UnsupportedVehicleError(UnsupportedVariantError):
    """Raised when the vehicle factory receives an unknown tag."""

    def __init__(self, tag: str):
        super().__init__("Vehicle", tag, message="Vehicle type not supported")
