"""Grid geometry: integer vectors and cardinal directions."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Vector2:
    """an integer (x, y) pair, used both as a grid position and as a size in cells"""

    x: int
    y: int

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def scaled(self, factor: int) -> "Vector2":
        """Multiply both components by factor.

        Precondition:
            factor is an int

        Postcondition:
            returns a new Vector2, self is unchanged

        Args:
            factor: scale factor, typically the pixel size of a grid cell

        Returns:
            Vector2 of (x * factor, y * factor)
        """
        return Vector2(self.x * factor, self.y * factor)


class Direction(Enum):
    """cardinal facing of a machine"""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @classmethod
    def parse(cls, text: str) -> "Direction":
        """Parse a direction name, case-insensitively.

        Precondition:
            text is a string

        Postcondition:
            returns the matching Direction member

        Args:
            text: direction name such as "east" or "NORTH"

        Returns:
            the Direction with that name

        Raises:
            ValueError: if text does not name a direction
        """
        try:
            return cls[text.strip().upper()]
        except KeyError as exc:
            raise ValueError(
                f"Invalid direction '{text.strip()}'. Must be NORTH, EAST, SOUTH, or WEST."
            ) from exc
