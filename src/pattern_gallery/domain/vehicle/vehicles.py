"""Vehicle contract and its concrete variants."""
from abc import ABC, abstractmethod

from .value_objects import VehicleType


class Vehicle(ABC):
    """Product contract - anything that can be driven."""

    vehicle_type: VehicleType

    @abstractmethod
    def drive(self) -> str:
        """Drive the vehicle and describe what happened."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class Car(Vehicle):
    vehicle_type = VehicleType.CAR

    def drive(self) -> str:
        return "Driving a car"


class Bike(Vehicle):
    vehicle_type = VehicleType.BIKE

    def drive(self) -> str:
        return "Riding a bike"
