"""Utility functions for parsing item and amount specifications."""


def canonical_item_name(name: str) -> str:
    """Normalize an item name to its lower-case hyphenated form.

    Precondition:
        name is a non-None string

    Postcondition:
        returns name trimmed, lower-cased, with underscores and spaces as hyphens

    Args:
        name: item name such as "iron_ore" or "Iron Ore"

    Returns:
        canonical item name, e.g. "iron-ore"
    """
    return name.strip().lower().replace("_", "-").replace(" ", "-")


def _split_item_amount_string(text: str) -> tuple[str, str | None]:
    """Split text on colon and trim whitespace from both parts.

    Precondition:
        text is a non-None string

    Postcondition:
        returns (item_name, amount_string) where both are stripped of whitespace
        amount_string is None when text has no colon

    Args:
        text: string in format "Item:Amount" or "Item"

    Returns:
        tuple of (item_name, amount_string or None)
    """
    if ":" not in text:
        return text.strip(), None
    item, amount_str = text.split(":", 1)
    return item.strip(), amount_str.strip()


def _parse_amount_value(amount_str: str, item: str) -> int:
    """Convert amount string to a non-negative int.

    Precondition:
        amount_str is a non-None string
        item is a non-None string (used for error messages)

    Postcondition:
        returns int value of amount_str

    Args:
        amount_str: string representation of a whole number
        item: item name (for error messages)

    Returns:
        int value of amount_str

    Raises:
        ValueError: if amount_str is not a non-negative whole number
    """
    try:
        amount = int(amount_str)
    except ValueError as exc:
        raise ValueError(
            f"Invalid amount '{amount_str}' for {item}. Must be a whole number."
        ) from exc
    if amount < 0:
        raise ValueError(f"Invalid amount '{amount_str}' for {item}. Must not be negative.")
    return amount


def parse_item_amount(text: str) -> tuple[str, int | None]:
    """Parse an 'Item:Amount' or 'Item' string into an (item, amount) tuple.

    Precondition:
        text is a non-None string

    Postcondition:
        returns (item_name, amount) where item_name is canonical
        amount is None when text has no ':Amount' part

    Args:
        text: String like "iron_ore:1" or "iron-plate"

    Returns:
        Tuple of (item_name, amount or None)

    Raises:
        ValueError: If the item name is empty or the amount is not a whole number
    """
    item, amount_str = _split_item_amount_string(text)
    if not item:
        raise ValueError(f"Invalid format: '{text}'. Expected 'Item:Amount'")
    name = canonical_item_name(item)
    if amount_str is None:
        return name, None
    return name, _parse_amount_value(amount_str, name)


def parse_item_list(text: str | None) -> list[tuple[str, int | None]]:
    """Parse comma-separated Item:Amount pairs into a list of tuples.

    Precondition:
        text is a string (may be empty or whitespace-only) or None

    Postcondition:
        returns list of (item_name, amount) tuples
        empty/whitespace text returns empty list
        preserves duplicates and order

    Args:
        text: String like "iron_ore:1, coal:2"

    Returns:
        list of (item_name, amount) tuples

    Raises:
        ValueError: if any item has an invalid format or amount
    """
    if not text or not text.strip():
        return []

    return [
        parse_item_amount(stripped)
        for item in text.split(",")
        if (stripped := item.strip())
    ]
