"""Graph machines: production-graph templates with fixed recipes.

A graph machine is not placed in a blueprint. It declares the recipes its
machine kind can run and builds a placeable machine on request.
"""

import uuid

from frozendict import frozendict

from geometry import Direction, Vector2
from graph_components import Recipe, create_recipe
from parsing_utils import canonical_item_name
from machines import Furnace, Machine


class GraphMachine:
    """Production-graph node mapped to a machine kind.

    Subclasses set MACHINE_TYPE and RECIPES.
    """

    MACHINE_TYPE: type[Machine] = Machine
    RECIPES: tuple[Recipe, ...] = ()

    def __init__(self) -> None:
        self._id = uuid.uuid4()

    @property
    def id(self) -> uuid.UUID:
        return self._id

    @classmethod
    def name(cls) -> str:
        """Name of the mapped machine kind"""
        return cls.MACHINE_TYPE.NAME

    @classmethod
    def recipes(cls) -> list[Recipe]:
        """Get the recipes this machine kind runs, in declaration order."""
        return list(cls.RECIPES)

    def to_machine(self, position: Vector2, direction: Direction | None = None) -> Machine:
        """Create a placeable machine of the mapped kind.

        Precondition:
            position is a Vector2

        Postcondition:
            returns a new machine of MACHINE_TYPE at position facing direction
            the machine has a fresh id, unrelated to this graph machine's id

        Args:
            position: grid position for the machine
            direction: facing, or None

        Returns:
            the new Machine
        """
        return self.MACHINE_TYPE(position, direction)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id})"


class GraphFurnace(GraphMachine):
    """smelting in a furnace"""

    MACHINE_TYPE = Furnace
    RECIPES = (
        create_recipe(3.2, "iron_ore:1", "iron_plate:1"),
        create_recipe(3.2, "copper_ore:1", "copper_plate:1"),
    )


GRAPH_MACHINE_TYPES = frozendict(
    {graph_type.name(): graph_type for graph_type in (GraphFurnace,)}
)


def get_recipes_for_machine(name: str) -> list[Recipe]:
    """Get the recipes of a graph machine by its machine kind name.

    Precondition:
        name is a non-None string

    Postcondition:
        returns the recipe list of the matching graph machine (case-insensitive)

    Args:
        name: machine kind name, e.g. "Furnace"

    Returns:
        list of Recipes in declaration order

    Raises:
        ValueError: if no graph machine maps to that kind
    """
    for kind, graph_type in GRAPH_MACHINE_TYPES.items():
        if kind.lower() == name.strip().lower():
            return graph_type.recipes()
    raise ValueError(
        f"Unknown graph machine '{name.strip()}'. "
        f"Must be one of: {', '.join(GRAPH_MACHINE_TYPES)}."
    )


def get_recipes_for(item: str) -> list[tuple[type[GraphMachine], Recipe]]:
    """Find the recipes that output an item.

    Precondition:
        item is a non-None string

    Postcondition:
        returns (graph machine type, recipe) pairs whose outputs include item
        pairs follow registry order, then recipe declaration order
        returns empty list if nothing outputs item

    Args:
        item: item name in any casing, e.g. "iron_plate" or "iron-plate"

    Returns:
        list of (graph machine type, Recipe) tuples
    """
    name = canonical_item_name(item)
    return [
        (graph_type, recipe)
        for graph_type in GRAPH_MACHINE_TYPES.values()
        for recipe in graph_type.recipes()
        if any(output.name == name for output in recipe.outputs)
    ]
