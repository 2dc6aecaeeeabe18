from hangman.core.wordlist import _FALLBACK_WORDS, load_wordlist, pick_word


def test_load_wordlist_reads_and_normalizes(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("Apple\n\n  Banana  \ncherry\n", encoding="utf-8")
    assert load_wordlist(path) == ["apple", "banana", "cherry"]


def test_load_wordlist_missing_file_falls_back(tmp_path):
    assert load_wordlist(tmp_path / "nope.txt") == list(_FALLBACK_WORDS)


def test_load_wordlist_empty_file_falls_back(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("\n\n", encoding="utf-8")
    assert load_wordlist(path) == list(_FALLBACK_WORDS)


def test_load_wordlist_honours_env(monkeypatch, tmp_path):
    path = tmp_path / "env.txt"
    path.write_text("lantern\n", encoding="utf-8")
    monkeypatch.setenv("HANGMAN_WORDLIST", str(path))
    assert load_wordlist() == ["lantern"]


def test_pick_word_is_reproducible_with_seed(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(["alpha", "bravo", "charlie", "delta", "echo"]), encoding="utf-8")
    first = pick_word(seed=42, path=path)
    assert first == pick_word(seed=42, path=path)
    assert first in {"alpha", "bravo", "charlie", "delta", "echo"}
