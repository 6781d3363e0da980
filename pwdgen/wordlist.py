"""
Wordlists for passphrase mode.

The default list ships as `wordlist.txt` next to this module: one lowercase
word per line, 2052 entries.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_WORDLIST_PATH = Path(__file__).with_name("wordlist.txt")


def load_wordlist(path: str | Path) -> list[str]:
    """
    Read a newline-delimited wordlist, stripping whitespace and dropping
    blank lines. I/O errors propagate to the caller.
    """
    text = Path(path).read_text(encoding="utf-8")
    words = [line.strip() for line in text.splitlines()]
    words = [w for w in words if w]
    logger.debug("Loaded %d words from %s", len(words), path)
    return words


DEFAULT_WORDLIST: tuple[str, ...] = tuple(load_wordlist(DEFAULT_WORDLIST_PATH))
