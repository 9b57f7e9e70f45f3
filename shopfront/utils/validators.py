from typing import Any


def require_positive_number(v: float, name: str = "value") -> None:
    if v <= 0:
        raise ValueError(f"{name} must be > 0")


def parse_whole_number(value: Any) -> int:
    """Parse "2", " -1 " or 4 into an int; blanks, fractions and words are rejected."""
    if isinstance(value, bool):
        raise ValueError("quantity must be a whole number")
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if not text.lstrip("-").isdigit():
        raise ValueError(f"quantity must be a whole number, got {value!r}")
    return int(text)


def parse_quantity(value: Any) -> int:
    qty = parse_whole_number(value)
    require_positive_number(qty, "quantity")
    return qty
