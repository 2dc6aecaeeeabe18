from __future__ import annotations

import logging
import os
import re
from typing import Optional

from openai import OpenAI

logger = logging.getLogger(__name__)

# Strict validator: only lowercase a–z
_LOWER_AZ = re.compile(r"^[a-z]+$")


def pick_with_llm(retries: int = 2, model: Optional[str] = None) -> Optional[str]:
    """
    Try to pick ONE valid word via an LLM. Returns None on failure (caller should fallback).

    Safety
    ------
    - OFFLINE_MODE=true or missing OPENAI_API_KEY -> returns None immediately.
    - Prompts the model to output exactly ONE word (lowercase, a–z only).
    - Validates with a regex; retries a few times; then gives up.
    """
    api_key = os.getenv("OPENAI_API_KEY", "")
    offline = os.getenv("OFFLINE_MODE", "true").lower() == "true"
    if offline or not api_key:
        return None

    prompt = (
        "Generate a random common English noun for a game of Hangman. "
        "It should be different each time. Output only the word in lowercase."
    )

    client = OpenAI(api_key=api_key)
    mdl = model or os.getenv("MODEL_NAME", "gpt-4o-mini")

    for attempt in range(1, retries + 2):
        try:
            resp = client.chat.completions.create(
                model=mdl,
                messages=[{"role": "user", "content": prompt}],
                temperature=0.7,
                max_tokens=20,
            )
            word = (resp.choices[0].message.content or "").strip()
            # Tighten: strip quotes/spaces and force lowercase
            word = word.replace('"', "").replace("'", "").strip().lower()
        except Exception as exc:
            logger.warning("LLM word pick attempt %s failed: %s", attempt, exc)
            continue

        if _LOWER_AZ.match(word):
            return word
        logger.warning("LLM returned an unusable word: %r", word)

    return None  # let caller fallback to local picker
