"""Graphviz diagram of graph machine recipes."""

from typing import Iterable

import graphviz

from graph_components import Item, Recipe
from graph_machines import GRAPH_MACHINE_TYPES, GraphMachine


def _item_node_id(name: str) -> str:
    return f"Item_{name}"


def _format_amount(item: Item) -> str:
    """Edge label for an item; unspecified amounts show only the name."""
    if item.amount is None:
        return item.name
    return f"{item.name}\n{item.amount}"


def _add_item_nodes(dot: graphviz.Digraph, recipes: list[Recipe], seen: set[str]) -> None:
    """Add one ellipse node per item not already in seen.

    Precondition:
        dot is graphviz.Digraph
        seen holds the item names that already have nodes

    Postcondition:
        every input and output item of recipes has a node
        seen is updated with the new item names
    """
    for recipe in recipes:
        for item in (*recipe.inputs, *recipe.outputs):
            if item.name not in seen:
                seen.add(item.name)
                dot.node(_item_node_id(item.name), item.name, shape="ellipse")


def _add_recipe_node(
    dot: graphviz.Digraph, node_id: str, machine_name: str, recipe: Recipe
) -> None:
    """Add a recipe box and its item edges.

    Precondition:
        item nodes for the recipe's inputs and outputs exist

    Postcondition:
        a box labeled with machine name and time is added
        an edge runs from each input item to the box, and from the box to each output item
    """
    dot.node(
        node_id,
        f"{machine_name}\n{recipe.time:g}",
        shape="box",
        style="filled",
        fillcolor="lightblue",
    )
    for item in recipe.inputs:
        dot.edge(_item_node_id(item.name), node_id, label=_format_amount(item))
    for item in recipe.outputs:
        dot.edge(node_id, _item_node_id(item.name), label=_format_amount(item))


def recipes_digraph(
    graph_machine_types: Iterable[type[GraphMachine]] | None = None,
) -> graphviz.Digraph:
    """Build a diagram of every recipe of the given graph machine kinds.

    Precondition:
        graph_machine_types is None or an iterable of GraphMachine subclasses

    Postcondition:
        returns a left-to-right Digraph with one ellipse node per distinct item
        and one box node per recipe, joined by edges labeled with item amounts
        no balancing or traversal is performed

    Args:
        graph_machine_types: kinds to include, or None for all registered kinds

    Returns:
        graphviz.Digraph of the recipes
    """
    if graph_machine_types is None:
        graph_machine_types = GRAPH_MACHINE_TYPES.values()

    dot = graphviz.Digraph(comment="Recipes")
    dot.attr(rankdir="LR")

    seen: set[str] = set()
    recipe_node_id = 0
    for graph_type in graph_machine_types:
        recipes = graph_type.recipes()
        _add_item_nodes(dot, recipes, seen)
        for recipe in recipes:
            _add_recipe_node(dot, f"Recipe_{recipe_node_id}", graph_type.name(), recipe)
            recipe_node_id += 1

    return dot
