"""Placeable machines and the catalog of machine kinds."""

import uuid

from frozendict import frozendict
from PIL import Image

from geometry import Direction, Vector2
from render import DEFAULT_CONFIG, RenderConfig, draw_machine


class Machine:
    """A placeable grid entity with identity, position, size and optional facing.

    Subclasses set NAME and SIZE; every kind shares the default drawing.
    """

    NAME = "Machine"
    SIZE = Vector2(1, 1)

    def __init__(self, position: Vector2, direction: Direction | None = None):
        self._id = uuid.uuid4()
        self._position = position
        self._direction = direction

    @property
    def id(self) -> uuid.UUID:
        """Identifier minted at construction"""
        return self._id

    @property
    def short_id(self) -> str:
        """First hyphen-delimited segment of the identifier"""
        return str(self._id).split("-", 1)[0]

    @property
    def name(self) -> str:
        return self.NAME

    @property
    def position(self) -> Vector2:
        return self._position

    @property
    def direction(self) -> Direction | None:
        return self._direction

    @property
    def size(self) -> Vector2:
        return self.SIZE

    def draw(
        self, image: Image.Image, origin: Vector2, config: RenderConfig = DEFAULT_CONFIG
    ) -> None:
        """Draw this machine onto image, with origin at the image's top left corner."""
        draw_machine(image, self, origin, config)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self._id}, position={self._position}, "
            f"direction={self._direction})"
        )


class Furnace(Machine):
    """a 2x2 smelting furnace"""

    NAME = "Furnace"
    SIZE = Vector2(2, 2)


class Belt(Machine):
    """a 1x1 transport belt"""

    NAME = "Belt"
    SIZE = Vector2(1, 1)


class Inserter(Machine):
    """a 1x1 inserter"""

    NAME = "Inserter"
    SIZE = Vector2(1, 1)


MACHINE_TYPES = frozendict(
    {machine_type.NAME: machine_type for machine_type in (Furnace, Belt, Inserter)}
)


def new_machine(name: str, position: Vector2, direction: Direction | None = None) -> Machine:
    """Create a machine by kind name.

    Precondition:
        name is a kind name in MACHINE_TYPES (case-insensitive)

    Postcondition:
        returns a new machine of that kind with a fresh id

    Args:
        name: machine kind, e.g. "Belt"
        position: grid position of the machine's top left corner
        direction: facing, or None

    Returns:
        the new Machine

    Raises:
        ValueError: if name is not a known machine kind
    """
    for kind, machine_type in MACHINE_TYPES.items():
        if kind.lower() == name.strip().lower():
            return machine_type(position, direction)
    raise ValueError(
        f"Unknown machine '{name.strip()}'. Must be one of: {', '.join(MACHINE_TYPES)}."
    )
