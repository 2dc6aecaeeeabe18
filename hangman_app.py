from __future__ import annotations

import logging
import os
import streamlit as st

from dotenv import load_dotenv
load_dotenv(override=False)  # Load .env into process env


def _log_level() -> int:
    """Resolve LOG_LEVEL to a logging level; unknown names fall back to INFO."""
    level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").strip().upper())
    return level if isinstance(level, int) else logging.INFO


logging.basicConfig(
    level=_log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("hangman_app")

# --- Core game imports ---
from hangman.core.engine import (
    GameAlreadyOver,
    InvalidGuess,
    game_status,
    letters_used_so_far,
    new_game,
    play_guess,
    render_word,
    turns_left,
    word_length,
)
from hangman.core.state import STARTING_TURNS, GameState
from hangman.core.wordlist import pick_word

# --- Optional LLM word source ---
from hangman.services.llm_picker import pick_with_llm


# =======================================
# Session-state helpers & game management
# =======================================

_FEEDBACK = {
    "won": "🎉 That letter completed the word!",
    "lost": "💀 Out of turns.",
    "good_guess": "✅ `{guess}` is in the word.",
    "bad_guess": "❌ `{guess}` is not in the word.",
}


def _init_stats() -> None:
    """Ensure a stats dict exists in session state."""
    st.session_state.setdefault("stats", {"games": 0, "wins": 0, "losses": 0})


def _init_round_state() -> None:
    """Ensure per-round transient keys exist."""
    st.session_state.setdefault("round_counted", False)
    st.session_state.setdefault("last_outcome", None)
    st.session_state.setdefault("last_guess", None)
    st.session_state.setdefault("history", [])


def _start_new_game() -> None:
    """
    Start a new game. Prefer an LLM-picked word; fall back to the local word list.
    Also records a 'word_source' tag and resets per-round flags/history.
    """
    llm_word = pick_with_llm()
    if llm_word:
        st.session_state["game"] = new_game(llm_word)
        st.session_state["word_source"] = "llm"
    else:
        st.session_state["game"] = new_game(picker_fn=pick_word)
        st.session_state["word_source"] = "local"
    logger.info("New game started (source=%s)", st.session_state["word_source"])

    # Reset per-round state
    st.session_state["round_counted"] = False
    st.session_state["last_outcome"] = None
    st.session_state["last_guess"] = None
    st.session_state["history"] = []


def _ensure_game() -> GameState:
    """Ensure there is a valid GameState in session state; create one if missing."""
    if "game" not in st.session_state or not isinstance(st.session_state["game"], GameState):
        _start_new_game()
    if "word_source" not in st.session_state:
        st.session_state["word_source"] = "unknown"
    _init_stats()
    _init_round_state()
    return st.session_state["game"]


def _apply_guess(game: GameState, guess: str) -> bool:
    """Run one guess through the engine and record it; warn on rejected input."""
    try:
        new_state, outcome, echoed = play_guess(game, guess)
    except InvalidGuess:
        st.warning("Please enter exactly one letter.")
        return False
    except GameAlreadyOver:
        st.info("This game is over. Start a new one from the sidebar.")
        return False

    st.session_state["game"] = new_state
    st.session_state["last_outcome"] = outcome
    st.session_state["last_guess"] = echoed or guess
    st.session_state["history"].append({
        "guess": guess,
        "outcome": outcome,
        "mask": render_word(new_state),
        "turns_left": turns_left(new_state),
    })
    return True


# =========
# The App
# =========

def main() -> None:
    st.set_page_config(page_title="Hangman", page_icon="🪢", layout="centered")
    st.title("🪢 Hangman")

    # ---- Sidebar ----
    with st.sidebar:
        st.header("Game")
        if st.button("🔁 New Game", use_container_width=True):
            _start_new_game()
            st.rerun()

        # Stats panel
        _init_stats()
        with st.expander("📊 Stats", expanded=True):
            s = st.session_state["stats"]
            games = s["games"]; wins = s["wins"]; losses = s["losses"]
            winrate = (wins / games * 100.0) if games else 0.0

            st.metric("Games", games)
            c1, c2 = st.columns(2); c1.metric("Wins", wins); c2.metric("Losses", losses)
            st.metric("Win rate", f"{winrate:.1f}%")

            if st.button("♻️ Reset stats"):
                st.session_state["stats"] = {"games": 0, "wins": 0, "losses": 0}
                st.success("Stats reset.")

        # Debug env
        with st.expander("Debug (env)"):
            st.write("OFFLINE_MODE:", os.getenv("OFFLINE_MODE"))
            st.write("Has OPENAI_API_KEY:", bool(os.getenv("OPENAI_API_KEY")))
            st.write("MODEL_NAME:", os.getenv("MODEL_NAME"))
            st.write("HANGMAN_WORDLIST:", os.getenv("HANGMAN_WORDLIST"))

    # Initialize / load current game
    game: GameState = _ensure_game()
    status = game_status(game)

    # ---- Board ----
    st.subheader("Board")
    st.markdown(f"**Word** ({word_length(game)} letters): `{render_word(game)}`")
    left = max(0, turns_left(game))
    st.caption(f"Turns left: {left} / {STARTING_TURNS}")
    st.progress((STARTING_TURNS - left) / STARTING_TURNS)

    used = ", ".join(letters_used_so_far(game)) or "(none)"
    st.caption(f"Letters used: {used}")

    source = st.session_state.get("word_source", "unknown")
    if source == "llm":
        st.markdown("**Source**: 🧠 LLM-picked")
    elif source == "local":
        st.markdown("**Source**: 📚 Local wordlist")
    else:
        st.markdown("**Source**: ❔ Unknown")

    # ---- Last move feedback ----
    outcome = st.session_state.get("last_outcome")
    if outcome:
        st.write(_FEEDBACK[outcome].format(guess=st.session_state.get("last_guess")))

    # ---- Move input ----
    st.subheader("Your move")
    with st.form("guess_form", clear_on_submit=True):
        guess_inp = st.text_input(
            "Enter a single letter:",
            max_chars=1,
            help="Each wrong letter costs one turn, even if you already tried it.",
        )
        submitted = st.form_submit_button("Submit")
        if submitted and status == "playing":
            g = (guess_inp or "").strip().lower()
            if g and _apply_guess(game, g):
                st.rerun()

    # ---- Outcome banner + stats update ----
    game = st.session_state["game"]
    status = game_status(game)
    if status in ("won", "lost") and not st.session_state.get("round_counted", False):
        st.session_state["stats"]["games"] += 1
        if status == "won":
            st.session_state["stats"]["wins"] += 1
        else:
            st.session_state["stats"]["losses"] += 1
        st.session_state["round_counted"] = True

    if status == "won":
        st.success("🎉 You won! Great job.")
    elif status == "lost":
        st.error(f"💀 You lost. The word was: **{render_word(game, reveal=True)}**")

    if status in ("won", "lost"):
        history = st.session_state.get("history", [])
        if history:
            with st.expander("📝 Moves"):
                for i, h in enumerate(history, start=1):
                    st.write(f"{i}) `{h['guess']}` {h['outcome']} -> `{h['mask']}` | turns={h['turns_left']}")
        st.button("Play again", on_click=_start_new_game)


if __name__ == "__main__":
    main()
