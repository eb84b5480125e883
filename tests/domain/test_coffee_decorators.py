"""Tests for the coffee decorator chain."""
import pytest

from pattern_gallery.domain.coffee import (
    Coffee,
    CoffeeDecorator,
    Espresso,
    MilkDecorator,
    SugarDecorator,
    with_extras,
)


def test_espresso_base_values():
    coffee = Espresso()

    assert coffee.cost() == 50
    assert coffee.description() == "Espresso"


def test_milk_then_sugar_totals_65():
    coffee = SugarDecorator(MilkDecorator(Espresso()))

    assert coffee.cost() == 65
    assert coffee.description() == "Espresso, Milk, Sugar"


def test_application_order_controls_description():
    coffee = MilkDecorator(SugarDecorator(Espresso()))

    assert coffee.cost() == 65
    assert coffee.description() == "Espresso, Sugar, Milk"


def test_base_decorator_delegates_unchanged():
    coffee = CoffeeDecorator(Espresso())

    assert coffee.cost() == 50
    assert coffee.description() == "Espresso"


def test_nesting_depth_is_unlimited():
    coffee: Coffee = Espresso()
    for _ in range(20):
        coffee = MilkDecorator(coffee)

    assert coffee.cost() == 50 + 20 * 10
    assert coffee.description().count(", Milk") == 20


def test_wrapping_does_not_change_inner_coffee():
    espresso = Espresso()
    with_milk = MilkDecorator(espresso)
    SugarDecorator(with_milk)

    assert with_milk.cost() == 60
    assert with_milk.description() == "Espresso, Milk"
    assert with_milk.coffee is espresso


def test_wrapped_coffee_is_read_only():
    coffee = MilkDecorator(Espresso())

    with pytest.raises(AttributeError):
        coffee.coffee = Espresso()


def test_with_extras_applies_first_extra_innermost():
    coffee = with_extras(Espresso(), [MilkDecorator, SugarDecorator])

    assert isinstance(coffee, SugarDecorator)
    assert coffee.description() == "Espresso, Milk, Sugar"


def test_summary_line():
    assert MilkDecorator(Espresso()).summary() == "Espresso, Milk costs $60"
