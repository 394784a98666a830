from enum import Enum

import pytest

from flyweight import CarModel, InvalidAttributes, describe_key, make_key


class Fuel(Enum):
    ELECTRIC = "Electric"
    GASOLINE = "Gasoline"


def test_equal_attributes_give_equal_keys():
    assert make_key(CarModel, ("Model S", "Tesla", "Electric")) == make_key(
        CarModel, ["Model S", "Tesla", "Electric"]
    )


def test_any_differing_attribute_changes_the_key():
    base = make_key(CarModel, ("Model S", "Tesla", "Electric"))
    assert make_key(CarModel, ("Model S", "Tesla", "Gasoline")) != base
    assert make_key(CarModel, ("Model X", "Tesla", "Electric")) != base


def test_separator_inside_values_does_not_collide():
    assert make_key(CarModel, ("A_B", "C")) != make_key(CarModel, ("A", "B_C"))


def test_lone_string_is_a_single_attribute():
    assert make_key(CarModel, "Tesla") == (CarModel, ("Tesla",))


def test_unhashable_attribute():
    with pytest.raises(InvalidAttributes) as exc_info:
        make_key(CarModel, ("Model S", {"brand": "Tesla"}))
    assert exc_info.value.context["position"] == 1
    assert exc_info.value.context["value_type"] == "dict"


def test_describe_key():
    key = make_key(CarModel, ("Model S", "Tesla", "Electric"))
    assert describe_key(key) == "Model S_Tesla_Electric"


def test_describe_key_uses_enum_values():
    key = make_key(CarModel, ("Model S", "Tesla", Fuel.ELECTRIC))
    assert describe_key(key) == "Model S_Tesla_Electric"
