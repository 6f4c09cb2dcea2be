"""
Helper Functions

Contains utility functions used by the front ends to render a game.
"""

from typing import Dict, Iterable, List, Optional

from ..models.game import CellStatus, Guess

# Text shape of a cell per feedback status; the letter goes in the middle
CELL_FORMATS: Dict[Optional[CellStatus], str] = {
    None: " _ ",
    CellStatus.UNSUBMITTED: " {} ",
    CellStatus.CORRECT: "[{}]",
    CellStatus.PARTIALLY_CORRECT: "({})",
    CellStatus.INCORRECT: "-{}-",
}


def format_guess(guess: Guess) -> str:
    """Render one row, e.g. `[W][W][C](D)-E-`."""
    return "".join(
        CELL_FORMATS[cell.status].format(cell.letter.value if cell.letter else "_")
        for cell in guess.cells
    )


def format_board(guesses: Iterable[Guess]) -> str:
    """Render the whole board, one row per line."""
    return "\n".join(format_guess(guess) for guess in guesses)


def format_keyboard(layout: List[List[str]], letter_status: Dict[str, str]) -> str:
    """Render the keyboard rows with the feedback seen so far for each letter."""
    lines = []
    for row in layout:
        keys = []
        for key in row:
            status = letter_status.get(key)
            keys.append(CELL_FORMATS[CellStatus(status)].format(key) if status else key)
        lines.append(" ".join(keys))
    return "\n".join(lines)
