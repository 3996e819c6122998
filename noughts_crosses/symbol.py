from enum import Enum


class PlayerSymbol(Enum):
    CROSS = "X"
    NOUGHT = "O"

    def __str__(self) -> str:
        return self.value

    def opposite(self) -> "PlayerSymbol":
        return PlayerSymbol.NOUGHT if self is PlayerSymbol.CROSS else PlayerSymbol.CROSS

    @classmethod
    def from_char(cls, char: str) -> "PlayerSymbol":
        try:
            return cls(char.strip().upper())
        except ValueError as e:
            msg = f"Not a symbol: {char!r}. Choose from 'X', 'O'."
            raise ValueError(msg) from e
