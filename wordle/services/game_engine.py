"""
Game Engine

Contains the rules of a single Wordle game: filling the current guess,
scoring a submitted guess and deciding the outcome.
"""

from typing import Dict, List, Optional, Tuple
from ..config.game_settings import WORD_LENGTH, MAX_GUESSES
from ..models.game import Cell, CellStatus, GameState, GameStatus, Guess, Letter
from ..models.errors import GameOverError, IncompleteRowError, RowEmptyError, RowFullError

# Higher wins when the same letter gets different feedback in different rows
_LETTER_STATUS_PRIORITY = {
    CellStatus.INCORRECT: 0,
    CellStatus.PARTIALLY_CORRECT: 1,
    CellStatus.CORRECT: 2,
}


class WordleGame:
    """
    One game of Wordle played against a fixed target word.

    This class handles:
    - The 6 x 5 board of cells, owned exclusively by the engine
    - Adding and removing letters in the current guess
    - Scoring a full guess and advancing to the next row
    - Win/loss detection without exposing the answer while the game is on

    The board is only changed through add_letter, remove_last_letter and
    submit_guess. Every precondition is checked before anything is written,
    so a failed call leaves the game exactly as it was.
    """

    def __init__(self, target_word: str):
        self._target_word = target_word
        self._status = GameStatus.IN_PROGRESS
        self._board: List[List[Cell]] = [[Cell() for _ in range(WORD_LENGTH)] for _ in range(MAX_GUESSES)]
        self._current_guess = 0
        self._current_cell = 0

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def is_over(self) -> bool:
        return self._status != GameStatus.IN_PROGRESS

    @property
    def current_guess_index(self) -> int:
        return self._current_guess

    @property
    def current_cell_index(self) -> int:
        return self._current_cell

    @property
    def guesses(self) -> Tuple[Guess, ...]:
        """Read-only snapshot of the board, one Guess per row."""
        return tuple(Guess(cells=tuple(row)) for row in self._board)

    @property
    def letter_status(self) -> Dict[str, str]:
        """
        Best feedback seen so far for every letter of the submitted rows.

        A letter only moves up in priority: INCORRECT, then
        PARTIALLY_CORRECT, then CORRECT.
        """
        best: Dict[Letter, CellStatus] = {}
        for row in self._board[:self._current_guess]:
            for cell in row:
                current = best.get(cell.letter)
                if current is None or _LETTER_STATUS_PRIORITY[cell.status] > _LETTER_STATUS_PRIORITY[current]:
                    best[cell.letter] = cell.status
        return {letter.value: status.value for letter, status in best.items()}

    def add_letter(self, letter: Letter) -> None:
        """
        Writes a letter into the next empty cell of the current guess.

        A single character key such as "h" is accepted and converted.

        Raises:
            GameOverError: If the game has already been won or lost
            RowFullError: If the current guess already holds 5 letters
            ValueError: If the value is not a letter A-Z
        """
        self._ensure_in_progress()
        if self._current_cell == WORD_LENGTH:
            raise RowFullError()
        if not isinstance(letter, Letter):
            letter = Letter.from_key(letter)

        self._set_cell(self._current_cell, Cell(letter=letter, status=CellStatus.UNSUBMITTED))
        self._current_cell += 1

    def remove_last_letter(self) -> None:
        """
        Clears the last filled cell of the current guess.

        Raises:
            GameOverError: If the game has already been won or lost
            RowEmptyError: If the current guess holds no letters
        """
        self._ensure_in_progress()
        if self._current_cell == 0:
            raise RowEmptyError()

        self._current_cell -= 1
        self._set_cell(self._current_cell, Cell())

    def submit_guess(self) -> Optional[str]:
        """
        Scores the current guess and moves on to the next row.

        Returns:
            The target word if this guess lost the game, None otherwise.
            A win is reported through `status`, not through the return value.

        Raises:
            GameOverError: If the game has already been won or lost
            IncompleteRowError: If the current guess holds fewer than 5 letters
        """
        self._ensure_in_progress()
        if self._current_cell < WORD_LENGTH:
            raise IncompleteRowError()

        row = self._board[self._current_guess]
        statuses = self._evaluate_guess_against_target([cell.letter for cell in row])
        for position, status in enumerate(statuses):
            self._set_cell(position, Cell(letter=row[position].letter, status=status))

        if all(status == CellStatus.CORRECT for status in statuses):
            self._status = GameStatus.PLAYER_WINS
        elif self._current_guess == MAX_GUESSES - 1:
            self._status = GameStatus.PLAYER_LOSES

        # Advances past the last row too; no mutation follows a finished game
        self._current_cell = 0
        self._current_guess += 1

        return self._target_word if self._status == GameStatus.PLAYER_LOSES else None

    def get_game_state(self) -> GameState:
        """
        Returns a snapshot of the game (without revealing the answer).

        The answer is only filled in once the game is over.
        """
        return GameState(
            status=self._status,
            current_guess=self._current_guess,
            current_cell=self._current_cell,
            guesses=self.guesses,
            letter_status=self.letter_status,
            answer=self._target_word if self.is_over else None
        )

    def _evaluate_guess_against_target(self, letters: List[Letter]) -> List[CellStatus]:
        """
        Scores each position of a guess against the target word.

        A letter that is not in the right spot but appears anywhere in the
        target is PARTIALLY_CORRECT, however many times it was guessed. Letters
        already matched elsewhere are not deducted, so a guess with repeated
        letters can get more PARTIALLY_CORRECT marks than classic Wordle gives.
        """
        statuses = []
        for position, letter in enumerate(letters):
            if letter.value == self._target_word[position]:
                statuses.append(CellStatus.CORRECT)
            elif letter.value in self._target_word:
                statuses.append(CellStatus.PARTIALLY_CORRECT)
            else:
                statuses.append(CellStatus.INCORRECT)
        return statuses

    def _ensure_in_progress(self) -> None:
        if self._status != GameStatus.IN_PROGRESS:
            raise GameOverError(self._status, self._target_word)

    def _set_cell(self, position: int, cell: Cell) -> None:
        self._board[self._current_guess][position] = cell
