"""Raster drawing of blueprint grids and machines on a Pillow image."""

import logging
from dataclasses import dataclass
from functools import cache

from PIL import Image, ImageDraw, ImageFont

from geometry import Direction, Vector2

_LOGGER = logging.getLogger("blueprinter")

# Pixel size of one grid cell
CELL_SIZE = 100

# Machine label layout, in pixels from the machine's top left corner
_TEXT_MARGIN = 2
_LINE_HEIGHT = 12
_MARKER_TOP = _TEXT_MARGIN + 2 * _LINE_HEIGHT

Color = tuple[int, int, int]


class FontLoadError(RuntimeError):
    """the label font could not be loaded"""


@dataclass(frozen=True)
class RenderConfig:
    """Configuration for rendering a blueprint"""
    cell_size: int = CELL_SIZE
    background_color: Color = (255, 255, 255)
    grid_color: Color = (200, 200, 200)
    text_color: Color = (0, 0, 0)
    marker_color: Color = (150, 150, 150)
    outline_color: Color = (200, 0, 0)
    font_path: str | None = None  # None = Pillow's built-in font
    font_size: int = 12


DEFAULT_CONFIG = RenderConfig()


# Triangle vertices inside the 12x12 marker box, apex toward the facing
_TRIANGLES: dict[Direction, tuple[tuple[int, int], ...]] = {
    Direction.SOUTH: ((0, 0), (12, 0), (6, 12)),
    Direction.EAST: ((0, 0), (0, 12), (12, 6)),
    Direction.NORTH: ((0, 12), (12, 12), (6, 0)),
    Direction.WEST: ((12, 0), (12, 12), (0, 6)),
}


@cache
def get_font(font_path: str | None, font_size: int):
    """Load the label font, once per (path, size).

    Precondition:
        font_path is None or a path to a TrueType/OpenType font file
        font_size is a positive int

    Postcondition:
        returns a Pillow font object usable with ImageDraw.text
        repeated calls with the same arguments return the same object

    Args:
        font_path: font file to load, or None for Pillow's default font
        font_size: font size in pixels

    Returns:
        the loaded font

    Raises:
        FontLoadError: if the font file cannot be read or parsed
    """
    if font_path is None:
        return ImageFont.load_default(size=font_size)
    try:
        return ImageFont.truetype(font_path, font_size)
    except OSError as exc:
        raise FontLoadError(f"Cannot load font '{font_path}': {exc}") from exc


def direction_triangle(direction: Direction | None) -> tuple[tuple[int, int], ...] | None:
    """Get the direction marker triangle for a facing.

    Precondition:
        direction is a Direction or None

    Postcondition:
        returns three (x, y) vertices within a 12x12 box, apex toward direction
        returns None when direction is None

    Args:
        direction: the machine's facing

    Returns:
        triangle vertices relative to the marker box, or None
    """
    if direction is None:
        return None
    return _TRIANGLES[direction]


def new_surface(size: Vector2, config: RenderConfig = DEFAULT_CONFIG) -> Image.Image:
    """Allocate a blank image covering size grid cells.

    Precondition:
        size has non-negative components

    Postcondition:
        returns an RGB image of size * cell_size pixels filled with the background color
    """
    pixels = size.scaled(config.cell_size)
    return Image.new("RGB", (pixels.x, pixels.y), config.background_color)


def draw_grid(image: Image.Image, size: Vector2, config: RenderConfig = DEFAULT_CONFIG) -> None:
    """Draw a hollow outline for every grid cell in [0, size.x) x [0, size.y)."""
    draw = ImageDraw.Draw(image)
    cell = config.cell_size
    for x in range(size.x):
        for y in range(size.y):
            draw.rectangle(
                (x * cell, y * cell, x * cell + cell - 1, y * cell + cell - 1),
                outline=config.grid_color,
            )


def draw_machine(
    image: Image.Image, machine, origin: Vector2, config: RenderConfig = DEFAULT_CONFIG
) -> None:
    """Draw a machine's labels, direction marker and outline.

    Precondition:
        machine exposes id, short_id, name, position, direction and size
        origin is the grid coordinate drawn at the image's top left corner

    Postcondition:
        short id and name are drawn in the machine's top left corner
        a direction triangle is drawn below them if machine has a direction
        the machine's footprint is outlined in the outline color
        a diagnostic line naming the machine is logged

    Args:
        image: surface to draw on
        machine: the machine to draw
        origin: grid offset of the image, normally the blueprint's minimum corner
        config: colors, cell size and font

    Raises:
        FontLoadError: if the configured font cannot be loaded
    """
    font = get_font(config.font_path, config.font_size)
    draw = ImageDraw.Draw(image)
    corner = (machine.position - origin).scaled(config.cell_size)
    left = corner.x + _TEXT_MARGIN
    top = corner.y + _TEXT_MARGIN

    draw.text((left, top), machine.short_id, fill=config.text_color, font=font)
    draw.text((left, top + _LINE_HEIGHT), machine.name, fill=config.text_color, font=font)

    triangle = direction_triangle(machine.direction)
    if triangle is not None:
        marker_top = corner.y + _MARKER_TOP
        draw.polygon(
            [(left + x, marker_top + y) for x, y in triangle], fill=config.marker_color
        )

    footprint = machine.size.scaled(config.cell_size)
    if footprint.x > 0 and footprint.y > 0:
        draw.rectangle(
            (corner.x, corner.y, corner.x + footprint.x - 1, corner.y + footprint.y - 1),
            outline=config.outline_color,
        )

    _LOGGER.info("Drawing machine: %s (%s)", machine.name, machine.id)
