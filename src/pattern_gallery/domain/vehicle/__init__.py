"""Vehicle domain - Factory pattern demonstration."""

from .exceptions import UnsupportedVehicleError
from .factory import VehicleFactory
from .value_objects import VehicleType
from .vehicles import Bike, Car, Vehicle

__all__ = [
    "Bike",
    "Car",
    "UnsupportedVehicleError",
    "Vehicle",
    "VehicleFactory",
    "VehicleType",
]
