from noughts_crosses.board import BOARD_SIZE, Coordinate
from noughts_crosses.exception import (
    CoordinateRangeError,
    InputError,
    MissingCoordinateError,
    NonNumericCoordinateError,
)


def parse_coordinates(text: str) -> Coordinate:
    """Parse console input like "2,3" into zero-based (x, y) board coordinates.

    Both numbers are 1-based, x first. Spaces anywhere in the input are ignored.
    """
    parts = text.strip().replace(" ", "").split(",")
    if len(parts) > 2:  # noqa: PLR2004
        msg = f"Expected two coordinates, got {len(parts)}"
        raise InputError(msg)

    x_str = parts[0]
    y_str = parts[1] if len(parts) > 1 else ""
    if not x_str:
        raise MissingCoordinateError("Missing x coordinate")
    if not y_str:
        raise MissingCoordinateError("Missing y coordinate")

    return _parse_axis(x_str, "x"), _parse_axis(y_str, "y")


def _parse_axis(value: str, axis: str) -> int:
    if not (value.isascii() and value.isdigit()):
        msg = f"Not a number: {axis} coordinate {value!r}"
        raise NonNumericCoordinateError(msg)

    number = int(value)
    if not (1 <= number <= BOARD_SIZE):
        msg = f"Not between 1 and {BOARD_SIZE}: {axis} coordinate {number}"
        raise CoordinateRangeError(msg)
    return number - 1
