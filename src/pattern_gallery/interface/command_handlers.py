"""
CLI command handlers.

Every handler takes the parsed argparse namespace and returns a plain
dictionary for the formatters. Handlers are wrapped with
``with_error_handling`` so they return ``(payload, exit_code)`` and never
raise.
"""
import argparse
from typing import Any, Dict, List

from pattern_gallery.application.dispatch import bind, invoke
from pattern_gallery.application.scenarios import (
    get_registered_scenarios,
    run_all_scenarios,
    run_scenario,
)
from pattern_gallery.config.manager import get_config_manager
from pattern_gallery.domain.appliance import Light, LightOffCommand, LightOnCommand, RemoteControl
from pattern_gallery.domain.coffee import Espresso, MilkDecorator, SugarDecorator, with_extras
from pattern_gallery.domain.database import DatabaseConnection
from pattern_gallery.domain.stock import Investor, Stock
from pattern_gallery.domain.vehicle import VehicleFactory
from pattern_gallery.infrastructure.adapters import create_payment_gateway
from pattern_gallery.infrastructure.error import with_error_handling
from pattern_gallery.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

COFFEE_EXTRAS = {
    "milk": MilkDecorator,
    "sugar": SugarDecorator,
}


@with_error_handling("scenarios.list")
def handle_list_scenarios(args: argparse.Namespace) -> Dict[str, Any]:
    """List the registered usage scenarios."""
    return {"scenarios": [info.to_dict() for info in get_registered_scenarios()]}


@with_error_handling("scenarios.run")
def handle_run_scenarios(args: argparse.Namespace) -> Dict[str, Any]:
    """Run one named scenario, or all of them."""
    options = {"initial_price": get_config_manager().app_config.stock.initial_price}
    if args.name == "all":
        results = run_all_scenarios(**options)
    else:
        results = [run_scenario(args.name, **options)]
    return {"results": [result.to_dict() for result in results]}


@with_error_handling("vehicles.create")
def handle_create_vehicle(args: argparse.Namespace) -> Dict[str, Any]:
    vehicle = VehicleFactory.create_vehicle(args.vehicle_type)
    return {
        "vehicle": vehicle.vehicle_type.value,
        "lines": [invoke(vehicle, "drive")],
    }


@with_error_handling("payments.pay")
def handle_make_payment(args: argparse.Namespace) -> Dict[str, Any]:
    gateway = create_payment_gateway(args.provider)
    return {
        "provider": args.provider,
        "amount": args.amount,
        "lines": [invoke(gateway, "make_payment", args.amount)],
    }


@with_error_handling("coffee.order")
def handle_order_coffee(args: argparse.Namespace) -> Dict[str, Any]:
    """Build an espresso, wrapping one decorator per requested extra, in order."""
    extras = args.extra or []
    coffee = with_extras(Espresso(), [COFFEE_EXTRAS[extra] for extra in extras])
    return {
        "description": coffee.description(),
        "cost": coffee.cost(),
        "lines": [coffee.summary()],
    }


@with_error_handling("stock.track")
def handle_track_stock(args: argparse.Namespace) -> Dict[str, Any]:
    initial_price = get_config_manager().app_config.stock.initial_price
    stock = Stock(initial_price)
    for name in args.investor:
        stock.add_observer(Investor(name))

    lines: List[str] = []
    for price in args.price:
        lines.extend(str(message) for message in stock.set_price(price))
    return {"initial_price": initial_price, "final_price": stock.price, "lines": lines}


@with_error_handling("remote.press")
def handle_press_remote(args: argparse.Namespace) -> Dict[str, Any]:
    """Bind each requested command in turn and press the button after each binding."""
    light = Light()
    commands = {"on": LightOnCommand(light), "off": LightOffCommand(light)}
    remote = RemoteControl()
    press = bind(remote, "press_button")

    lines = []
    for action in args.actions:
        remote.set_command(commands[action])
        lines.append(press.invoke())
    return {"light_on": light.is_on, "lines": lines}


@with_error_handling("database.query")
def handle_query_database(args: argparse.Namespace) -> Dict[str, Any]:
    first = DatabaseConnection.get_instance()
    lines = []
    for sql in args.sql:
        connection = DatabaseConnection.get_instance()
        lines.append(connection.query(sql))
    lines.append(f"Same instance: {str(DatabaseConnection.get_instance() is first).lower()}")
    return {"instances_created": DatabaseConnection.instances_created, "lines": lines}
