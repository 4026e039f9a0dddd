"""Tests for graph_machines module"""

from pytest import raises

from geometry import Direction, Vector2
from graph_components import Item, Recipe
from graph_machines import (
    GRAPH_MACHINE_TYPES,
    GraphFurnace,
    get_recipes_for,
    get_recipes_for_machine,
)
from machines import Furnace


def test_graph_furnace_recipes():
    """the furnace should smelt iron and copper ore"""
    assert GraphFurnace.recipes() == [
        Recipe((Item("iron-ore", 1),), (Item("iron-plate", 1),), 3.2),
        Recipe((Item("copper-ore", 1),), (Item("copper-plate", 1),), 3.2),
    ]


def test_recipes_are_stable():
    """recipes should be the same list on every call"""
    first = GraphFurnace.recipes()
    first.clear()

    assert GraphFurnace.recipes() == GraphFurnace().recipes()
    assert len(GraphFurnace.recipes()) == 2


def test_to_machine_builds_mapped_kind():
    """to_machine should build a furnace at the requested place"""
    graph_furnace = GraphFurnace()
    machine = graph_furnace.to_machine(Vector2(4, 2), Direction.NORTH)

    assert isinstance(machine, Furnace)
    assert machine.name == "Furnace"
    assert machine.size == Vector2(2, 2)
    assert machine.position == Vector2(4, 2)
    assert machine.direction == Direction.NORTH


def test_to_machine_fresh_ids():
    """produced machines should have their own ids"""
    graph_furnace = GraphFurnace()
    first = graph_furnace.to_machine(Vector2(0, 0))
    second = graph_furnace.to_machine(Vector2(0, 0))

    assert first.id != graph_furnace.id
    assert second.id != graph_furnace.id
    assert first.id != second.id


def test_graph_machine_ids_unique():
    """each graph machine should get its own id"""
    assert GraphFurnace().id != GraphFurnace().id


def test_registry():
    """graph machines should be registered by machine kind name"""
    assert dict(GRAPH_MACHINE_TYPES) == {"Furnace": GraphFurnace}


def test_get_recipes_for_machine():
    """lookup by kind name should return the recipe list"""
    assert get_recipes_for_machine("furnace") == GraphFurnace.recipes()


def test_get_recipes_for_machine_unknown():
    """lookup of an unregistered kind should raise"""
    with raises(ValueError, match="Unknown graph machine 'Belt'"):
        get_recipes_for_machine("Belt")


def test_get_recipes_for_item():
    """get_recipes_for should find the recipes that output an item"""
    results = get_recipes_for("copper_plate")

    assert len(results) == 1
    graph_type, recipe = results[0]
    assert graph_type is GraphFurnace
    assert recipe.outputs == (Item("copper-plate", 1),)


def test_get_recipes_for_unknown_item():
    """get_recipes_for should return nothing for unknown items"""
    assert get_recipes_for("iron-ore") == []
    assert get_recipes_for("rocket-part") == []
