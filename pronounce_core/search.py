"""Find every dictionary word that rhymes with a query word.

A ``RhymeFinder`` groups the index once by rhyme tail (the symbols from
the last vowel to the end, see :func:`pronounce_core.rhymes.rhyme_tail`).
A query then only has to look up the tails of its own variants, so the
result is exactly the set of words ``rhymes`` would accept.

Results are ranked with ``wordfreq`` Zipf frequencies, either most
common first or rarest first, with ties broken alphabetically so output
is deterministic.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Dict, List, Optional, Set, Tuple

from wordfreq import zipf_frequency

from .index import PronouncingIndex
from .rhymes import rhyme_tail
from .symbols import Symbol

LOGGER = logging.getLogger(__name__)

ORDERS = ("common", "rare")


@lru_cache(maxsize=100_000)
def word_frequency(word: str) -> float:
    """Zipf frequency of ``word`` in English; 0.0 for unknown words."""
    try:
        return float(zipf_frequency(word.lower(), "en"))
    except Exception:  # wordfreq rejects some tokenizations
        LOGGER.debug("No frequency for %r", word)
        return 0.0


class RhymeFinder:
    def __init__(self, index: PronouncingIndex) -> None:
        self.index = index
        by_tail: Dict[Tuple[Symbol, ...], List[str]] = {}
        for word, variants in index.items():
            seen: Set[Tuple[Symbol, ...]] = set()
            for rule in variants:
                tail = rhyme_tail(rule)
                if tail is None or tail in seen:
                    continue
                seen.add(tail)
                by_tail.setdefault(tail, []).append(word)
        self._by_tail = {tail: tuple(words) for tail, words in by_tail.items()}
        LOGGER.debug("Grouped %d words into %d rhyme tails", len(index), len(self._by_tail))

    def candidates(self, word: str) -> Set[str]:
        """Unranked rhyming words for ``word``, the word itself excluded."""
        out: Set[str] = set()
        for rule in self.index.lookup(word):
            tail = rhyme_tail(rule)
            if tail is not None:
                out.update(self._by_tail.get(tail, ()))
        out.discard(word)
        return out

    def find(self, word: str, limit: Optional[int] = None, order: str = "common") -> List[str]:
        """Rhyming words for ``word`` ranked by frequency; empty if ``word`` is unknown."""
        if order not in ORDERS:
            raise ValueError(f"order must be one of {ORDERS}, got {order!r}")
        sign = -1.0 if order == "common" else 1.0
        ranked = sorted(self.candidates(word), key=lambda w: (sign * word_frequency(w), w))
        if limit is not None and limit >= 0:
            return ranked[:limit]
        return ranked


__all__ = ["ORDERS", "RhymeFinder", "word_frequency"]
