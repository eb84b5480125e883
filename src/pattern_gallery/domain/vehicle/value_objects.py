"""Vehicle value objects."""
from enum import Enum

from .exceptions import UnsupportedVehicleError


class VehicleType(str, Enum):
    """Vehicle variant tags understood by the factory."""

    CAR = "car"
    BIKE = "bike"

    @classmethod
    def from_tag(cls, tag: str) -> "VehicleType":
        """
        Resolve a tag string to a vehicle type.

        Tags are matched exactly; "Car" is not "car".

        Raises:
            UnsupportedVehicleError: If the tag names no known vehicle
        """
        for vehicle_type in cls:
            if vehicle_type.value == tag:
                return vehicle_type
        raise UnsupportedVehicleError(tag)
