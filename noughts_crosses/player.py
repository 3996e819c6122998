from noughts_crosses.symbol import PlayerSymbol


class Player:
    def __init__(self, symbol: PlayerSymbol, seat_number: int) -> None:
        self._symbol = symbol
        self._seat_number = seat_number

    def __repr__(self) -> str:
        return f"Player(symbol={self._symbol.name}, seat_number={self._seat_number})"

    def __str__(self) -> str:
        return str(self._symbol)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Player):
            return NotImplemented
        return self._symbol is other._symbol and self._seat_number == other._seat_number

    @property
    def symbol(self) -> PlayerSymbol:
        return self._symbol

    @symbol.setter
    def symbol(self, symbol: PlayerSymbol) -> None:
        # Setup only. Keeping the two seats complementary is Game.set_player_symbol's job.
        self._symbol = symbol

    @property
    def seat_number(self) -> int:
        return self._seat_number
