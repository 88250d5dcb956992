"""Word -> pronunciation index built from CMU dictionary lines."""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from .errors import InvalidLineError, ParseError, RuleParseError
from .rules import Rule, parse_rule

LOGGER = logging.getLogger(__name__)

COMMENT_PREFIX = ";;"


def split_label(label: str) -> str:
    """Drop a trailing variant marker: ``every(2)`` -> ``every``.

    Everything from the rightmost ``(`` is removed, so a label that
    legitimately contains a parenthesis is cut there too.
    """
    head, sep, _ = label.rpartition("(")
    return head if sep else label


def strip_comment(line: str) -> str:
    """Return the part of ``line`` before any ``#`` comment."""
    return line.split("#", 1)[0]


class PronouncingIndex:
    """Read-only mapping from canonical word to its pronunciation variants.

    Variants are kept in file order.  Instances are never mutated once
    :func:`build_index` returns them, so one index may be shared freely
    between threads.
    """

    def __init__(self, entries: Mapping[str, Tuple[Rule, ...]]) -> None:
        self._entries: Mapping[str, Tuple[Rule, ...]] = MappingProxyType(dict(entries))

    def lookup(self, word: str) -> Tuple[Rule, ...]:
        """Every variant for ``word`` (exact, case-sensitive); empty if unknown."""
        return self._entries.get(word, ())

    def get(self, word: str) -> Optional[Rule]:
        """The first variant for ``word``, or ``None``."""
        variants = self.lookup(word)
        return variants[0] if variants else None

    def items(self) -> Iterable[Tuple[str, Tuple[Rule, ...]]]:
        return self._entries.items()

    @property
    def pronunciation_count(self) -> int:
        return sum(len(v) for v in self._entries.values())

    def __contains__(self, word: object) -> bool:
        return word in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(words={len(self)}, pronunciations={self.pronunciation_count})"


def build_index(lines: Iterable[str]) -> PronouncingIndex:
    """Parse CMU dictionary lines into a :class:`PronouncingIndex`.

    ``lines`` must already be decoded and newline-stripped.  Lines starting
    with ``;;`` are skipped but still count towards line positions.  Any
    malformed line aborts the build.
    """
    buckets: Dict[str, List[Rule]] = {}
    skipped = 0
    for position, line in enumerate(lines):
        if line.startswith(COMMENT_PREFIX):
            skipped += 1
            continue
        raw_label, sep, _ = line.partition(" ")
        if not sep:
            raise InvalidLineError(position)
        word = split_label(raw_label)
        try:
            rule = parse_rule(strip_comment(line))
        except ParseError as exc:
            raise RuleParseError(position, exc) from exc
        buckets.setdefault(word, []).append(rule)

    index = PronouncingIndex({word: tuple(rules) for word, rules in buckets.items()})
    LOGGER.info("Indexed %d words (%d pronunciations, %d comment lines skipped)",
                len(index), index.pronunciation_count, skipped)
    return index


__all__ = ["COMMENT_PREFIX", "PronouncingIndex", "build_index", "split_label", "strip_comment"]
