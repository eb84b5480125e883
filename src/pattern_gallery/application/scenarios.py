"""
Usage scenarios.

Each scenario reproduces the driver script of one pattern: it builds the
variants, calls their operations through the contract and collects the lines
a console run would print. Scenarios register themselves with the
``@scenario`` decorator and are looked up by name.
"""
from __future__ import annotations

from typing import Callable, Dict, List, Optional, Tuple

from pattern_gallery.application.dispatch import bind, invoke
from pattern_gallery.application.dto import ScenarioInfo, ScenarioResult
from pattern_gallery.domain.appliance import Light, LightOffCommand, LightOnCommand, RemoteControl
from pattern_gallery.domain.base.exceptions import ScenarioNotFoundError
from pattern_gallery.domain.coffee import Coffee, Espresso, MilkDecorator, SugarDecorator
from pattern_gallery.domain.database import CREATED_MESSAGE, DatabaseConnection
from pattern_gallery.domain.stock import DEFAULT_INITIAL_PRICE, Investor, Stock
from pattern_gallery.domain.vehicle import VehicleFactory
from pattern_gallery.infrastructure.adapters import PayPalAdapter, StripeAdapter
from pattern_gallery.infrastructure.logging.logger import get_logger
from pattern_gallery.infrastructure.payment import PayPal, Stripe

logger = get_logger(__name__)

ScenarioFunc = Callable[..., List[str]]

# name -> (info, function)
_scenario_registry: Dict[str, Tuple[ScenarioInfo, ScenarioFunc]] = {}


def scenario(name: str, pattern: str, description: str):
    """
    Register a function as the usage scenario for a pattern.

    Usage:
        @scenario("factory", "Factory", "Create vehicles by tag")
        def run_factory_scenario() -> List[str]:
            ...
    """

    def decorator(func: ScenarioFunc) -> ScenarioFunc:
        _scenario_registry[name] = (
            ScenarioInfo(name=name, pattern=pattern, description=description),
            func,
        )
        return func

    return decorator


def get_registered_scenarios() -> List[ScenarioInfo]:
    """All registered scenarios in registration order."""
    return [info for info, _ in _scenario_registry.values()]


def run_scenario(name: str, **options) -> ScenarioResult:
    """
    Run a registered scenario by name.

    Args:
        name: Scenario name, e.g. "observer"
        **options: Passed through to the scenario function

    Raises:
        ScenarioNotFoundError: If no scenario has that name
    """
    if name not in _scenario_registry:
        raise ScenarioNotFoundError(name, sorted(_scenario_registry))

    info, func = _scenario_registry[name]
    logger.info("Running scenario", scenario=name, pattern=info.pattern)
    lines = func(**options)
    return ScenarioResult(name=info.name, pattern=info.pattern, lines=lines)


def run_all_scenarios(**options) -> List[ScenarioResult]:
    """Run every registered scenario in registration order."""
    return [run_scenario(name, **options) for name in _scenario_registry]


@scenario("singleton", "Singleton", "Share one database connection across the process")
def run_singleton_scenario(**_) -> List[str]:
    lines = []
    created_before = DatabaseConnection.instances_created
    db1 = DatabaseConnection.get_instance()
    if DatabaseConnection.instances_created > created_before:
        lines.append(CREATED_MESSAGE)
    lines.append(invoke(db1, "query", "SELECT * FROM users"))

    db2 = DatabaseConnection.get_instance()
    lines.append(f"Same instance: {str(db1 is db2).lower()}")
    return lines


@scenario("factory", "Factory", "Create vehicles from a type tag")
def run_factory_scenario(**_) -> List[str]:
    car = VehicleFactory.create_vehicle("car")
    bike = VehicleFactory.create_vehicle("bike")
    return [invoke(car, "drive"), invoke(bike, "drive")]


@scenario("adapter", "Adapter", "Pay through PayPal and Stripe behind one gateway interface")
def run_adapter_scenario(**_) -> List[str]:
    paypal_adapter = PayPalAdapter(PayPal())
    stripe_adapter = StripeAdapter(Stripe())
    return [
        invoke(paypal_adapter, "make_payment", 100),
        invoke(stripe_adapter, "make_payment", 200),
    ]


@scenario("decorator", "Decorator", "Add milk and sugar to an espresso")
def run_decorator_scenario(**_) -> List[str]:
    my_coffee: Coffee = Espresso()
    lines = [my_coffee.summary()]

    my_coffee = MilkDecorator(my_coffee)
    lines.append(my_coffee.summary())

    my_coffee = SugarDecorator(my_coffee)
    lines.append(my_coffee.summary())
    return lines


@scenario("observer", "Observer", "Notify investors when a stock price changes")
def run_observer_scenario(initial_price: Optional[float] = None, **_) -> List[str]:
    stock = Stock(DEFAULT_INITIAL_PRICE if initial_price is None else initial_price)
    investor1 = Investor("Investor 1")
    investor2 = Investor("Investor 2")

    stock.add_observer(investor1)
    stock.add_observer(investor2)

    return [str(message) for message in stock.set_price(105)]


@scenario("command", "Command", "Switch a light with a programmable remote control")
def run_command_scenario(**_) -> List[str]:
    light = Light()
    light_on = LightOnCommand(light)
    light_off = LightOffCommand(light)

    remote = RemoteControl()
    press = bind(remote, "press_button")

    remote.set_command(light_on)
    lines = [press.invoke()]

    remote.set_command(light_off)
    lines.append(press.invoke())
    return lines
