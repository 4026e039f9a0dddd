"""Items and recipes for production-planning graph machines."""

from dataclasses import dataclass

from frozendict import frozendict

from parsing_utils import canonical_item_name, parse_item_list


@dataclass(frozen=True)
class Item:
    """a named item with an optional amount (None means unspecified, not zero)"""

    name: str
    amount: int | None = None

    def __post_init__(self):
        object.__setattr__(self, "name", canonical_item_name(self.name))


@dataclass(frozen=True)
class Recipe:
    """ordered input and output items plus a processing time"""

    inputs: tuple[Item, ...]
    outputs: tuple[Item, ...]
    time: float

    def __post_init__(self):
        object.__setattr__(self, "inputs", tuple(self.inputs))
        object.__setattr__(self, "outputs", tuple(self.outputs))

    def input_amounts(self) -> frozendict:
        """Get input item names mapped to their amounts (None if unspecified)"""
        return frozendict({item.name: item.amount for item in self.inputs})

    def output_amounts(self) -> frozendict:
        """Get output item names mapped to their amounts (None if unspecified)"""
        return frozendict({item.name: item.amount for item in self.outputs})


def create_recipe(time: float, inputs: str, outputs: str) -> Recipe:
    """Build a Recipe from comma-separated 'item:amount' lists.

    Precondition:
        time is a non-negative number
        inputs and outputs are strings like "iron_ore:1, coal:2"

    Postcondition:
        returns a Recipe with items in the order given
        item names are canonical (lower-case, hyphenated)

    Args:
        time: processing time in abstract time units
        inputs: input items text
        outputs: output items text

    Returns:
        the Recipe

    Raises:
        ValueError: if any item text is malformed
    """
    return Recipe(
        tuple(Item(name, amount) for name, amount in parse_item_list(inputs)),
        tuple(Item(name, amount) for name, amount in parse_item_list(outputs)),
        float(time),
    )
