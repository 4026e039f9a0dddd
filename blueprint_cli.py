#!/usr/bin/env python3
"""Command-line interface that renders the example blueprint."""

import argparse
import logging
import sys

from blueprint import DEFAULT_OUTPUT, Blueprint
from geometry import Direction, Vector2
from graph_machines import GraphFurnace
from graph_view import recipes_digraph
from machines import Belt, Furnace, Inserter
from render import CELL_SIZE, FontLoadError, RenderConfig

_LOGGER = logging.getLogger("blueprinter")


def build_example_blueprint() -> Blueprint:
    """Build the example smelting line.

    Precondition:
        none

    Postcondition:
        returns a Blueprint with seven machines: two belts and an inserter
        feeding a furnace, then an inserter and two belts leading away, all facing east

    Returns:
        the example Blueprint
    """
    blueprint = Blueprint()
    blueprint.add_machines([
        Belt(Vector2(0, 1), Direction.EAST),
        Belt(Vector2(1, 1), Direction.EAST),
        Inserter(Vector2(2, 1), Direction.EAST),
        Furnace(Vector2(3, 0), None),
        Inserter(Vector2(5, 1), Direction.EAST),
        Belt(Vector2(6, 1), Direction.EAST),
        Belt(Vector2(7, 1), Direction.EAST),
    ])
    return blueprint


def _log_graph_conversion() -> None:
    """Convert a GraphFurnace to a placeable machine and log both."""
    graph_furnace = GraphFurnace()
    machine = graph_furnace.to_machine(Vector2(0, 0), None)
    _LOGGER.info("Graph machine %r converts to %r", graph_furnace, machine)


def _write_recipe_graph(output_file: str) -> None:
    """Write graphviz source of all graph machine recipes to output_file."""
    with open(output_file, "w", encoding="utf-8") as f:
        f.write(recipes_digraph().source)
    _LOGGER.info("Recipe graph written to %s", output_file)


def _create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the CLI argument parser.

    Precondition:
        none

    Postcondition:
        returns configured ArgumentParser with all CLI arguments defined

    Returns:
        ArgumentParser instance ready to parse command-line arguments
    """
    parser = argparse.ArgumentParser(
        description="Render the example blueprint to an image",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Render to test.png
  %(prog)s

  # Render with a custom font and smaller cells
  %(prog)s --font consolas.ttf --cell-size 64 --output-file line.png

  # Also export the recipe graph
  %(prog)s --recipe-graph recipes.gv
        """,
    )

    parser.add_argument(
        "--output-file",
        "-f",
        default=DEFAULT_OUTPUT,
        help=f"Image file to write (default: {DEFAULT_OUTPUT})",
    )

    parser.add_argument(
        "--font",
        default=None,
        help="TrueType font for labels (default: Pillow's built-in font)",
    )

    parser.add_argument(
        "--cell-size",
        type=int,
        default=CELL_SIZE,
        help=f"Pixel size of one grid cell (default: {CELL_SIZE})",
    )

    parser.add_argument(
        "--recipe-graph",
        default=None,
        help="Write graphviz source of the recipe graph to this file (optional)",
    )

    return parser


def main():
    """Main CLI function.

    Precondition:
        command-line arguments are available via sys.argv

    Postcondition:
        example blueprint is rendered and saved
        returns 0 on success, 1 on error

    Returns:
        exit code (0=success, 1=error)
    """
    parser = _create_argument_parser()
    args = parser.parse_args()

    # Setup logging to show draw order
    logging.basicConfig(level=logging.INFO, format='%(message)s')

    try:
        if args.cell_size <= 0:
            raise ValueError(f"Invalid cell size {args.cell_size}. Must be positive.")
        config = RenderConfig(cell_size=args.cell_size, font_path=args.font)

        blueprint = build_example_blueprint()
        _log_graph_conversion()
        blueprint.draw(args.output_file, config)

        if args.recipe_graph:
            _write_recipe_graph(args.recipe_graph)

        return 0

    except (ValueError, FontLoadError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
