from __future__ import annotations

import logging
import os
import random
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

# Project-local word list; override with HANGMAN_WORDLIST.
_DEFAULT_PATH = Path("data/wordlists/words.txt")

_FALLBACK_WORDS = ["python", "stream", "planet", "freeze", "gallows"]


def _read_lines(path: Path) -> List[str]:
    """
    Read a text file (UTF-8) and return non-empty, stripped, lowercase lines.

    Notes
    -----
    - Returns an empty list if the file is missing.
    - Each valid line should contain exactly one word.
    """
    if not path.exists() or not path.is_file():
        logger.warning("Word list %s not found", path)
        return []
    raw = path.read_text(encoding="utf-8", errors="ignore").splitlines()
    return [ln.strip().lower() for ln in raw if ln.strip()]


def _resolve_path(path: Optional[Path | str]) -> Path:
    if path is not None:
        return Path(path)
    env_path = os.getenv("HANGMAN_WORDLIST")
    return Path(env_path) if env_path else _DEFAULT_PATH


def load_wordlist(path: Optional[Path | str] = None) -> List[str]:
    """
    Load the candidate words.

    Fallback strategy
    -----------------
    1) Use `path`, else $HANGMAN_WORDLIST, else `data/wordlists/words.txt`.
    2) If that is empty or missing, return a tiny built-in list.
    """
    resolved = _resolve_path(path)
    words = _read_lines(resolved)
    if not words:
        logger.info("Using built-in fallback word list")
        return list(_FALLBACK_WORDS)
    logger.info("Loaded %s words from %s", len(words), resolved)
    return words


def pick_word(seed: int | None = None, path: Optional[Path | str] = None) -> str:
    """
    Pick a single word from the local word list.

    Parameters
    ----------
    seed : int | None
        Optional seed for reproducible picks during tests or demos.
    path : Path | str | None
        Word list file; see `load_wordlist`.

    Returns
    -------
    str
        A lowercase word (never empty, due to the fallback list).
    """
    words = load_wordlist(path)
    rng = random.Random(seed)
    return rng.choice(words)
