"""Word list loading and normalization."""

from __future__ import annotations

import re
import unicodedata
from pathlib import Path
from typing import Iterable, List

from ..core.exceptions import EmptyWordError

WORD_RE = re.compile(r"[^A-Za-z]")


def clean_word(text: str) -> str:
    """Return a normalized uppercase ASCII representation of ``text``."""

    if not text:
        return ""
    decomposed = unicodedata.normalize("NFKD", text)
    ascii_word = WORD_RE.sub("", decomposed.encode("ascii", "ignore").decode("ascii"))
    return ascii_word.upper()


def parse_words_file(path: Path) -> List[str]:
    """Read words from a file, one entry per line. Blank lines and # comments are skipped."""

    entries: List[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


def prepare_words(words: Iterable[str], clean: bool = True) -> List[str]:
    """Optionally clean ``words``, rejecting any that end up empty."""

    prepared: List[str] = []
    for raw in words:
        word = clean_word(raw) if clean else raw
        if not word:
            raise EmptyWordError(f"Word {raw!r} has no placeable letters")
        prepared.append(word)
    return prepared


__all__ = ["clean_word", "parse_words_file", "prepare_words"]
