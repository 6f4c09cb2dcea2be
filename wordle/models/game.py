"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Dict, Optional, Tuple

from ..config.game_settings import WORD_LENGTH


class Letter(Enum):
    """One of the 26 uppercase letters a cell can hold."""
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    H = "H"
    I = "I"
    J = "J"
    K = "K"
    L = "L"
    M = "M"
    N = "N"
    O = "O"
    P = "P"
    Q = "Q"
    R = "R"
    S = "S"
    T = "T"
    U = "U"
    V = "V"
    W = "W"
    X = "X"
    Y = "Y"
    Z = "Z"

    @classmethod
    def from_key(cls, key: str) -> "Letter":
        """
        Converts a single typed character (any case) to a Letter.

        Raises:
            ValueError: If the key is not exactly one letter A-Z
        """
        if not isinstance(key, str) or len(key) != 1:
            raise ValueError(f"'{key}' is not a single letter")
        return cls(key.upper())


class CellStatus(Enum):
    """Feedback attached to a filled cell."""
    UNSUBMITTED = "UNSUBMITTED"
    CORRECT = "CORRECT"
    PARTIALLY_CORRECT = "PARTIALLY_CORRECT"
    INCORRECT = "INCORRECT"


class GameStatus(Enum):
    """Overall state of a game; both outcomes are terminal."""
    IN_PROGRESS = "IN_PROGRESS"
    PLAYER_WINS = "PLAYER_WINS"
    PLAYER_LOSES = "PLAYER_LOSES"


@dataclass(frozen=True)
class Cell:
    """One letter slot. A cell with no letter has no status."""
    letter: Optional[Letter] = None
    status: Optional[CellStatus] = None

    @property
    def is_empty(self) -> bool:
        return self.letter is None


@dataclass(frozen=True)
class Guess:
    """One row of the board: exactly WORD_LENGTH cells, left to right."""
    cells: Tuple[Cell, ...] = field(default_factory=lambda: tuple(Cell() for _ in range(WORD_LENGTH)))

    @property
    def word(self) -> str:
        """Letters typed so far in this row."""
        return "".join(cell.letter.value for cell in self.cells if cell.letter is not None)

    @property
    def is_empty(self) -> bool:
        return all(cell.is_empty for cell in self.cells)

    @property
    def is_full(self) -> bool:
        return not any(cell.is_empty for cell in self.cells)


@dataclass(frozen=True)
class GameState:
    """Snapshot of a game for rendering (the answer is hidden until game over)."""
    status: GameStatus
    current_guess: int
    current_cell: int
    guesses: Tuple[Guess, ...]
    letter_status: Dict[str, str]
    answer: Optional[str] = None  # Only included when game is over

    @property
    def game_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    @property
    def won(self) -> bool:
        return self.status == GameStatus.PLAYER_WINS

    def to_dict(self) -> Dict:
        """Plain-data form with enum members replaced by their values."""
        return asdict(self, dict_factory=_enum_values_dict)


def _enum_values_dict(items) -> Dict:
    return {key: value.value if isinstance(value, Enum) else value for key, value in items}
