from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, NamedTuple, Optional, Tuple


Outcome = Literal["won", "lost", "good_guess", "bad_guess"]
GameStatus = Literal["playing", "won", "lost"]

STARTING_TURNS = 10


@dataclass(frozen=True)
class GameState:
    """
    Immutable container for one Hangman game.

    Notes
    -----
    - Every move produces a brand-new `GameState`; nothing is mutated in place.
      The caller keeps the latest state and passes it back to the engine.
    - Rule transitions live in `core.engine`; this file only defines the data
      structure and the light normalization needed to keep it immutable.
    - Guesses are kept as tuples in first-guessed order so they can be shown
      as-is by a client.
    """

    word: str
    turns_remaining: int = STARTING_TURNS
    correct_guesses: Tuple[str, ...] = ()
    incorrect_guesses: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """
        Normalize and validate fields.

        - `word` must be a non-empty string. Its content is not checked:
          casing and non-letters are taken verbatim.
        - Guess collections (lists, sets...) are frozen into tuples.
        """
        if not isinstance(self.word, str) or not self.word:
            raise ValueError("`word` must be a non-empty string.")

        # Because dataclass is frozen, use object.__setattr__ for normalization.
        object.__setattr__(self, "correct_guesses", tuple(self.correct_guesses or ()))
        object.__setattr__(self, "incorrect_guesses", tuple(self.incorrect_guesses or ()))


class MoveResult(NamedTuple):
    """Result of `make_move`; unpacks as `(state, outcome, guess)`."""
    state: GameState
    outcome: Outcome
    guess: Optional[str]  # None when the move ended the game
