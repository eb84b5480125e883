"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Output formatting and exit codes
"""
import argparse
import os
import sys
import traceback
from typing import Any, Dict, List, Optional, Tuple

from pattern_gallery._package import __version__
from pattern_gallery.cli.formatters import format_output
from pattern_gallery.config.defaults import LogLevel, OutputFormat
from pattern_gallery.config.manager import get_config_manager
from pattern_gallery.domain.base.exceptions import ConfigurationError
from pattern_gallery.infrastructure.logging.logger import get_logger, setup_logging

FORMAT_CHOICES = [f.value for f in OutputFormat]


def _parse_amount(value: str):
    """Parse a monetary amount, keeping whole numbers as int."""
    try:
        number = float(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid amount: {value!r}") from e
    return int(number) if number.is_integer() and "." not in value else number


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with the resource-action structure."""

    # Main parser with global options
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) or "pattern-gallery",
        description="Design Pattern Gallery - runnable object-oriented pattern demonstrations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s scenarios list                       # List all scenarios
  %(prog)s scenarios run all                    # Run every scenario
  %(prog)s vehicles create bike                 # Factory: build a bike
  %(prog)s payments pay stripe 200              # Adapter: pay through Stripe
  %(prog)s coffee order --extra milk --extra sugar
  %(prog)s stock track --investor Ann --investor Bob --price 105
        """,
    )

    # Global options
    parser.add_argument("--config", help="Configuration file path (JSON or YAML)")
    parser.add_argument("--log-level", choices=[level.value for level in LogLevel], help="Set logging level")
    parser.add_argument("--format", choices=FORMAT_CHOICES, help="Output format")
    parser.add_argument("--quiet", action="store_true", help="Suppress non-essential output")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    # Resource subparsers
    subparsers = parser.add_subparsers(dest="resource", help="Available resources")

    # Scenarios resource
    scenarios_parser = subparsers.add_parser("scenarios", help="Usage scenarios for every pattern")
    scenarios_subparsers = scenarios_parser.add_subparsers(dest="action", help="Scenario actions")
    scenarios_subparsers.add_parser("list", help="List all scenarios")
    scenarios_run = scenarios_subparsers.add_parser("run", help="Run a scenario")
    scenarios_run.add_argument("name", help="Scenario name, or 'all'")

    # Vehicles resource (Factory)
    vehicles_parser = subparsers.add_parser("vehicles", help="Factory pattern")
    vehicles_subparsers = vehicles_parser.add_subparsers(dest="action", help="Vehicle actions")
    vehicles_create = vehicles_subparsers.add_parser("create", help="Create a vehicle and drive it")
    vehicles_create.add_argument("vehicle_type", help="Vehicle tag, e.g. car or bike")

    # Payments resource (Adapter)
    payments_parser = subparsers.add_parser("payments", help="Adapter pattern")
    payments_subparsers = payments_parser.add_subparsers(dest="action", help="Payment actions")
    payments_pay = payments_subparsers.add_parser("pay", help="Make a payment through a gateway")
    payments_pay.add_argument("provider", help="Payment provider, e.g. paypal or stripe")
    payments_pay.add_argument("amount", type=_parse_amount, help="Amount to pay")

    # Coffee resource (Decorator)
    coffee_parser = subparsers.add_parser("coffee", help="Decorator pattern")
    coffee_subparsers = coffee_parser.add_subparsers(dest="action", help="Coffee actions")
    coffee_order = coffee_subparsers.add_parser("order", help="Order an espresso with extras")
    coffee_order.add_argument(
        "--extra", action="append", choices=["milk", "sugar"], help="Extra to add; repeatable, applied in order"
    )

    # Stock resource (Observer)
    stock_parser = subparsers.add_parser("stock", help="Observer pattern")
    stock_subparsers = stock_parser.add_subparsers(dest="action", help="Stock actions")
    stock_track = stock_subparsers.add_parser("track", help="Notify investors of price changes")
    stock_track.add_argument("--investor", action="append", required=True, help="Investor name; repeatable")
    stock_track.add_argument(
        "--price", action="append", type=_parse_amount, required=True, help="New price; repeatable"
    )

    # Remote resource (Command)
    remote_parser = subparsers.add_parser("remote", help="Command pattern")
    remote_subparsers = remote_parser.add_subparsers(dest="action", help="Remote actions")
    remote_press = remote_subparsers.add_parser("press", help="Bind commands and press the button")
    remote_press.add_argument("actions", nargs="+", choices=["on", "off"], help="Commands to bind, in order")

    # Database resource (Singleton)
    database_parser = subparsers.add_parser("database", help="Singleton pattern")
    database_subparsers = database_parser.add_subparsers(dest="action", help="Database actions")
    database_query = database_subparsers.add_parser("query", help="Run queries on the shared connection")
    database_query.add_argument("sql", nargs="+", help="SQL statements")

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def execute_command(args: argparse.Namespace) -> Tuple[Dict[str, Any], int]:
    """Execute the appropriate command handler."""
    from pattern_gallery.interface.command_handlers import (
        handle_create_vehicle,
        handle_list_scenarios,
        handle_make_payment,
        handle_order_coffee,
        handle_press_remote,
        handle_query_database,
        handle_run_scenarios,
        handle_track_stock,
    )

    # Command handler mapping
    COMMAND_HANDLERS = {
        ("scenarios", "list"): handle_list_scenarios,
        ("scenarios", "run"): handle_run_scenarios,
        ("vehicles", "create"): handle_create_vehicle,
        ("payments", "pay"): handle_make_payment,
        ("coffee", "order"): handle_order_coffee,
        ("stock", "track"): handle_track_stock,
        ("remote", "press"): handle_press_remote,
        ("database", "query"): handle_query_database,
    }

    handler_key = (args.resource, args.action)
    if handler_key not in COMMAND_HANDLERS:
        raise ValueError(f"Unknown command: {args.resource} {args.action}")

    return COMMAND_HANDLERS[handler_key](args)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    args = parse_args(argv)

    try:
        if not args.resource:
            print("Error: No resource specified. Use --help for usage information.")
            return 1

        if not getattr(args, "action", None):
            print(f"Error: No action specified for {args.resource}. Use --help for usage information.")
            return 1

        # Load configuration and configure logging from it
        try:
            app_config = get_config_manager(args.config).app_config
        except ConfigurationError as e:
            print(f"Error: {e}")
            return 1

        logging_config = app_config.logging.model_dump(mode="json")
        if args.log_level:
            logging_config["level"] = args.log_level
        elif args.verbose:
            logging_config["level"] = LogLevel.DEBUG.value
        setup_logging(logging_config)
        logger = get_logger(__name__)
        logger.debug("Executing command", resource=args.resource, action=args.action)

        result, exit_code = execute_command(args)

        output_format = args.format or app_config.output.format.value
        if exit_code != 0 and args.quiet:
            return exit_code
        print(format_output(result, output_format))
        return exit_code

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        return 130
    except Exception as e:
        if args.verbose:
            traceback.print_exc()
        print(f"Fatal error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
