from __future__ import annotations

from dataclasses import replace
from typing import Callable, List, Optional, Tuple

from .state import STARTING_TURNS, GameState, GameStatus, MoveResult
from .wordlist import pick_word


class InvalidGuess(ValueError):
    """Raised by `validate_guess` for anything but a single character."""


class GameAlreadyOver(RuntimeError):
    """Raised by `play_guess` when the game has already been won or lost."""


def new_game(word: Optional[str] = None, picker_fn: Optional[Callable[[], str]] = None) -> GameState:
    """
    Start a new game.

    Parameters
    ----------
    word : str, optional
        Force the hidden word (deterministic games, tests). Used verbatim.
    picker_fn : Callable[[], str], optional
        Word source used when `word` is not given. Defaults to the local
        word list picker; an LLM-based picker works just as well.

    Returns
    -------
    GameState
        A fresh state with 10 turns and no guesses.
    """
    if word is None:
        word = (picker_fn or pick_word)()
    return GameState(word=word, turns_remaining=STARTING_TURNS)


def _add_once(guesses: Tuple[str, ...], guess: str) -> Tuple[str, ...]:
    return guesses if guess in guesses else guesses + (guess,)


def _is_covered(word: str, guessed: Tuple[str, ...]) -> bool:
    return all(c in guessed for c in word)


def make_move(state: GameState, guess: str) -> MoveResult:
    """
    Apply one guess and return `(new_state, outcome, guess)`.

    Rules, in precedence order
    --------------------------
    1. Last turn (`turns_remaining <= 1`): the guess is recorded as incorrect,
       a turn is spent and the outcome is "lost", even if the letter is in the
       word.
    2. Letter in the word and the word is now fully revealed: "won".
    3. Letter in the word: "good_guess". Repeats cost nothing.
    4. Otherwise: "bad_guess", one turn spent. Repeated misses are charged
       again.

    The guess is neither stripped nor case-folded. It is compared against the
    individual characters of the word, so a multi-character guess never hits.
    Finished games are not guarded against; see `play_guess` for that.
    """
    if state.turns_remaining <= 1:
        lost = replace(
            state,
            turns_remaining=state.turns_remaining - 1,
            incorrect_guesses=_add_once(state.incorrect_guesses, guess),
        )
        return MoveResult(lost, "lost", None)

    if guess in set(state.word):
        correct = _add_once(state.correct_guesses, guess)
        updated = replace(state, correct_guesses=correct)
        if _is_covered(state.word, correct):
            return MoveResult(updated, "won", None)
        return MoveResult(updated, "good_guess", guess)

    missed = replace(
        state,
        turns_remaining=state.turns_remaining - 1,
        incorrect_guesses=_add_once(state.incorrect_guesses, guess),
    )
    return MoveResult(missed, "bad_guess", guess)


def word_length(state: GameState) -> int:
    return len(state.word)


def letters_used_so_far(state: GameState) -> List[str]:
    """Correct guesses then incorrect ones, as single characters."""
    return list("".join(state.correct_guesses + state.incorrect_guesses))


def turns_left(state: GameState) -> int:
    return state.turns_remaining


def render_word(state: GameState, reveal: bool = False) -> str:
    """
    Return the word with spaces between characters, e.g. '_ r e e _ e'.

    With `reveal=True` every character is shown; otherwise characters not in
    `correct_guesses` are hidden as underscores.
    """
    if reveal:
        return " ".join(state.word)
    return " ".join(c if c in state.correct_guesses else "_" for c in state.word)


def game_status(state: GameState) -> GameStatus:
    """
    Derive the status of a state (won/lost/playing).

    Rules
    -----
    - Won     : every character of `word` has been guessed correctly.
    - Lost    : no turns remain.
    - Else    : playing.
    """
    if _is_covered(state.word, state.correct_guesses):
        return "won"
    if state.turns_remaining <= 0:
        return "lost"
    return "playing"


def validate_guess(guess: str) -> str:
    """Return `guess` unchanged if it is exactly one character, else raise `InvalidGuess`."""
    if not isinstance(guess, str) or len(guess) != 1:
        raise InvalidGuess(f"A guess must be a single character, got {guess!r}.")
    return guess


def play_guess(state: GameState, guess: str) -> MoveResult:
    """
    Client-facing wrapper around `make_move`.

    Refuses finished games with `GameAlreadyOver` and malformed guesses with
    `InvalidGuess`; everything else is exactly `make_move`.
    """
    status = game_status(state)
    if status != "playing":
        raise GameAlreadyOver(f"The game is already {status}.")
    return make_move(state, validate_guess(guess))
