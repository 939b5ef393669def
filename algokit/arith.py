"""Integer division helpers that round towards negative or positive infinity."""


def floor_div(a: int, b: int) -> int:
    """Return the largest integer not greater than ``a / b``."""
    return a // b


def ceil_div(a: int, b: int) -> int:
    """Return the smallest integer not less than ``a / b``."""
    return -(-a // b)