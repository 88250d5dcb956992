"""Exact rhyme test over parsed pronunciations."""
from __future__ import annotations

from typing import Optional, Sequence, Tuple, Union

from .rules import Rule
from .symbols import Symbol

Variants = Union[Rule, Sequence[Rule]]


def rhyme_tail(rule: Rule) -> Optional[Tuple[Symbol, ...]]:
    """Symbols from the last syllable nucleus to the end, or ``None`` if there is no vowel."""
    pron = rule.pronunciation
    for i in range(len(pron) - 1, -1, -1):
        if pron[i].is_syllable():
            return pron[i:]
    return None


def _as_variants(value: Variants) -> Sequence[Rule]:
    if isinstance(value, Rule):
        return (value,)
    return value


def rhymes(a: Variants, b: Variants) -> bool:
    """True if any variant of ``a`` rhymes with any variant of ``b``.

    Two pronunciations rhyme when their tails from the rightmost vowel
    onward are identical, stress included.
    """
    left = [t for t in map(rhyme_tail, _as_variants(a)) if t is not None]
    if not left:
        return False
    for rule in _as_variants(b):
        tail = rhyme_tail(rule)
        if tail is not None and tail in left:
            return True
    return False


__all__ = ["rhyme_tail", "rhymes"]
