"""Vehicle factory - selects a vehicle variant by tag."""
import logging
from typing import Dict, Type, Union

from .value_objects import VehicleType
from .vehicles import Bike, Car, Vehicle

logger = logging.getLogger(__name__)


class VehicleFactory:
    """
    Creator for vehicles.

    The mapping from tag to constructor is fixed; there is no runtime
    registration. Unknown tags fail immediately with UnsupportedVehicleError.
    """

    _VARIANTS: Dict[VehicleType, Type[Vehicle]] = {
        VehicleType.CAR: Car,
        VehicleType.BIKE: Bike,
    }

    @classmethod
    def create_vehicle(cls, vehicle_type: Union[str, VehicleType]) -> Vehicle:
        """
        Create a vehicle for the given tag.

        Args:
            vehicle_type: Tag string ("car", "bike") or VehicleType

        Returns:
            A new vehicle instance

        Raises:
            UnsupportedVehicleError: If the tag is not recognised
        """
        if not isinstance(vehicle_type, VehicleType):
            vehicle_type = VehicleType.from_tag(vehicle_type)

        vehicle = cls._VARIANTS[vehicle_type]()
        logger.debug(f"Created {vehicle!r} for tag '{vehicle_type.value}'")
        return vehicle

    @classmethod
    def supported_types(cls) -> list:
        """Tags the factory can build, in declaration order."""
        return [vehicle_type.value for vehicle_type in cls._VARIANTS]
