from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Optional, Protocol, Sequence, Tuple

import yaml

logger = logging.getLogger(__name__)

DEFAULT_WORDS_FILE = Path(__file__).resolve().parent.parent / "data" / "words.yaml"


class RandomSource(Protocol):
    def choice(self, seq: Sequence[str]) -> str: ...


def generate_words(
    count: int,
    dictionary: Sequence[str],
    rng: Optional[RandomSource] = None,
) -> Tuple[str, ...]:
    """Draw *count* words from *dictionary*, uniformly and with replacement."""
    if count <= 0:
        raise ValueError(f"word count must be positive, got {count}")
    if not dictionary:
        raise ValueError("dictionary must not be empty")
    source = rng if rng is not None else random.Random()
    return tuple(source.choice(dictionary) for _ in range(count))


class WordRepository:
    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = Path(path) if path is not None else DEFAULT_WORDS_FILE
        self._words = self._load_words()

    def words(self) -> Tuple[str, ...]:
        return self._words

    def _load_words(self) -> Tuple[str, ...]:
        if not self._path.exists():
            raise FileNotFoundError(f"Words file not found: {self._path}")

        raw = yaml.safe_load(self._path.read_text(encoding="utf-8"))
        if not raw or not isinstance(raw, dict):
            raise ValueError(f"{self._path.name}: expected YAML with a 'words' list")
        content = raw.get("words")
        if content is None:
            raise ValueError(f"{self._path.name}: missing 'words'")
        if isinstance(content, list):
            words = [str(item).strip().lower() for item in content if str(item).strip()]
        else:
            # allow words as a whitespace separated string
            words = [w.lower() for w in str(content).split()]
        if not words:
            raise ValueError(f"{self._path.name}: 'words' is empty")

        logger.info("Loaded %d words from %s", len(words), self._path)
        return tuple(words)
