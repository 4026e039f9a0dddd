"""Tests for graph_view module"""

from graph_machines import GraphFurnace
from graph_view import recipes_digraph


def test_recipes_digraph_nodes():
    """the diagram should contain item and recipe nodes"""
    source = recipes_digraph().source

    assert "digraph" in source
    for item in ("iron-ore", "iron-plate", "copper-ore", "copper-plate"):
        assert item in source
    assert "Recipe_0" in source
    assert "Recipe_1" in source
    assert "Recipe_2" not in source
    assert "Furnace" in source


def test_recipes_digraph_edges():
    """each recipe item should get one edge"""
    source = recipes_digraph([GraphFurnace]).source

    assert source.count("->") == 4
    assert "rankdir=LR" in source


def test_recipes_digraph_empty():
    """no graph machines should give an empty diagram"""
    source = recipes_digraph([]).source

    assert "->" not in source
    assert "Recipe_" not in source
