"""Tests for the usage scenarios."""
import pytest

from pattern_gallery.application.dto import ScenarioInfo, ScenarioResult
from pattern_gallery.application.scenarios import (
    get_registered_scenarios,
    run_all_scenarios,
    run_scenario,
)
from pattern_gallery.domain.base.exceptions import ScenarioNotFoundError
from pattern_gallery.domain.database import DatabaseConnection


def test_every_pattern_has_a_scenario():
    names = [info.name for info in get_registered_scenarios()]

    assert names == ["singleton", "factory", "adapter", "decorator", "observer", "command"]
    assert all(isinstance(info, ScenarioInfo) for info in get_registered_scenarios())


@pytest.mark.parametrize(
    "name, expected",
    [
        (
            "singleton",
            [
                "New DatabaseConnection instance created.",
                "Executing query: SELECT * FROM users",
                "Same instance: true",
            ],
        ),
        ("factory", ["Driving a car", "Riding a bike"]),
        (
            "adapter",
            ["Payment of $100 made through PayPal.", "Payment of $200 made through Stripe."],
        ),
        (
            "decorator",
            ["Espresso costs $50", "Espresso, Milk costs $60", "Espresso, Milk, Sugar costs $65"],
        ),
        (
            "observer",
            [
                "Investor 1 notified: New stock price is $105",
                "Investor 2 notified: New stock price is $105",
            ],
        ),
        ("command", ["Light is ON", "Light is OFF"]),
    ],
)
def test_scenario_output(name, expected):
    result = run_scenario(name)

    assert isinstance(result, ScenarioResult)
    assert result.name == name
    assert result.lines == expected


def test_singleton_scenario_creates_one_connection():
    run_scenario("singleton")
    run_scenario("singleton")

    assert DatabaseConnection.instances_created == 1


def test_singleton_scenario_reports_construction_only_once():
    first = run_scenario("singleton")
    second = run_scenario("singleton")

    assert first.lines[0] == "New DatabaseConnection instance created."
    assert second.lines == ["Executing query: SELECT * FROM users", "Same instance: true"]


def test_observer_scenario_accepts_initial_price():
    result = run_scenario("observer", initial_price=1)

    assert len(result.lines) == 2


def test_unknown_scenario():
    with pytest.raises(ScenarioNotFoundError) as exc_info:
        run_scenario("visitor")

    assert "observer" in exc_info.value.available


def test_run_all_scenarios():
    results = run_all_scenarios()

    assert [r.pattern for r in results] == [
        "Singleton",
        "Factory",
        "Adapter",
        "Decorator",
        "Observer",
        "Command",
    ]


def test_result_serialises_to_dict():
    data = run_scenario("factory").to_dict()

    assert data == {"name": "factory", "pattern": "Factory", "lines": ["Driving a car", "Riding a bike"]}
