"""Blueprint: an ordered layout of machines that renders to a raster image."""

import logging
import os
import uuid
from typing import Iterable, Iterator

from PIL import Image

from geometry import Vector2
from machines import Machine
from render import DEFAULT_CONFIG, RenderConfig, draw_grid, new_surface

_LOGGER = logging.getLogger("blueprinter")

DEFAULT_OUTPUT = "test.png"


class Blueprint:
    """Ordered collection of machines; insertion order is draw order.

    Geometry is recomputed from the current contents on every call.
    """

    def __init__(self) -> None:
        self._machines: list[Machine] = []

    def __len__(self) -> int:
        return len(self._machines)

    def __iter__(self) -> Iterator[Machine]:
        return iter(self._machines)

    @property
    def machines(self) -> tuple[Machine, ...]:
        """Snapshot of the machines in draw order"""
        return tuple(self._machines)

    def add_machine(self, machine: Machine) -> None:
        """Append a machine. Overlapping positions are allowed."""
        self._machines.append(machine)

    def add_machines(self, machines: Iterable[Machine]) -> None:
        """Append machines, preserving their relative order."""
        self._machines.extend(machines)

    def remove_machine(self, machine_id: uuid.UUID) -> None:
        """Remove every machine with the given id.

        Precondition:
            machine_id is a UUID

        Postcondition:
            no machine with machine_id remains
            the remaining machines keep their relative order
            nothing changes if no machine has machine_id
        """
        self._machines = [m for m in self._machines if m.id != machine_id]

    def get_min(self) -> Vector2:
        """Get the minimum grid corner over all machines.

        Postcondition:
            returns (min position.x, min position.y)
            returns (0, 0) for an empty blueprint
        """
        if not self._machines:
            return Vector2(0, 0)
        return Vector2(
            min(m.position.x for m in self._machines),
            min(m.position.y for m in self._machines),
        )

    def get_size(self) -> Vector2:
        """Get the bounding box size in grid cells.

        Precondition:
            none

        Postcondition:
            returns (max(x + width) - min(x), max(y + height) - min(y)) over all machines
            returns (0, 0) for an empty blueprint

        Returns:
            bounding box size as a Vector2
        """
        if not self._machines:
            return Vector2(0, 0)
        low = self.get_min()
        return Vector2(
            max(m.position.x + m.size.x for m in self._machines) - low.x,
            max(m.position.y + m.size.y for m in self._machines) - low.y,
        )

    def render(self, config: RenderConfig = DEFAULT_CONFIG) -> Image.Image:
        """Render the grid background and every machine to a new image.

        Precondition:
            blueprint is not empty

        Postcondition:
            returns an image of get_size() * cell_size pixels
            every cell of the bounding box has a grid outline
            machines are drawn in insertion order, shifted so get_min() is at (0, 0)
            blueprint is not modified

        Args:
            config: colors, cell size and font

        Returns:
            the rendered image

        Raises:
            ValueError: if the blueprint has no machines
            FontLoadError: if the configured font cannot be loaded
        """
        if not self._machines:
            raise ValueError("Cannot render an empty blueprint")

        size = self.get_size()
        origin = self.get_min()
        image = new_surface(size, config)
        draw_grid(image, size, config)
        for machine in self._machines:
            machine.draw(image, origin, config)
        return image

    def draw(self, path: str = DEFAULT_OUTPUT, config: RenderConfig = DEFAULT_CONFIG) -> None:
        """Render the blueprint and save it, overwriting path.

        Raises:
            ValueError: if the blueprint has no machines
            FontLoadError: if the configured font cannot be loaded
            OSError: if the image cannot be written
        """
        image = self.render(config)
        image.save(path)
        _LOGGER.info("Blueprint saved to %s", os.path.basename(path))
