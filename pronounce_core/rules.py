"""Parsed dictionary entries."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .errors import UnexpectedEOFError
from .symbols import Symbol, parse_symbol


@dataclass(frozen=True)
class Rule:
    """The full pronunciation of one dictionary entry.

    ``label`` is the word exactly as written in the file, so alternate
    pronunciations keep their ``(2)``-style suffix.
    """

    label: str
    pronunciation: Tuple[Symbol, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.pronunciation, tuple):
            object.__setattr__(self, "pronunciation", tuple(self.pronunciation))

    @property
    def is_monosyllabic(self) -> bool:
        return sum(1 for s in self.pronunciation if s.is_syllable()) < 2

    def phones(self) -> Tuple[str, ...]:
        """Pronunciation as dictionary tokens, e.g. ``("AE1", "P", "AH0", "L")``."""
        return tuple(str(s) for s in self.pronunciation)

    def __str__(self) -> str:
        return " ".join((self.label,) + self.phones())


def parse_rule(line: str) -> Rule:
    """Parse ``"LABEL SYM1 SYM2 ..."`` into a :class:`Rule`.

    The first failing token aborts the whole line.
    """
    fragments = line.split()
    if not fragments:
        raise UnexpectedEOFError("label")
    label, tokens = fragments[0], fragments[1:]
    if not tokens:
        raise UnexpectedEOFError("phoneme", after=label)
    return Rule(label, tuple(parse_symbol(tok) for tok in tokens))


__all__ = ["Rule", "parse_rule"]
