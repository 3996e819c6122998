class GameError(Exception):
    pass


class LogicError(GameError):
    pass


class NoPlayersAvailableError(LogicError):
    pass


class SymbolUnchangedError(GameError):
    pass


class InvalidMoveError(GameError):
    pass


class OutOfBoundsError(InvalidMoveError):
    pass


class CellOccupiedError(InvalidMoveError):
    pass


class GameOverError(InvalidMoveError):
    pass


# Console input errors, separate from the GameError tree.


class InputError(ValueError):
    pass


class MissingCoordinateError(InputError):
    pass


class NonNumericCoordinateError(InputError):
    pass


class CoordinateRangeError(InputError):
    pass
