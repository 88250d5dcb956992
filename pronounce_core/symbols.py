"""ARPAbet phoneme symbols and the token grammar that recognises them.

A CMU dictionary pronunciation is a run of ARPAbet tokens such as
``AE1``, ``SH`` or ``TH``.  Vowels carry a trailing stress digit
(``0`` none, ``1`` primary, ``2`` secondary); consonants never do.

``parse_symbol`` is a small table-driven recogniser: the first letter
selects a row of ``_GRAMMAR``, the row says which second letters may
follow and whether the first letter alone is already a phoneme.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, NamedTuple, Optional

from .errors import ExpectedStressError, UnexpectedCharacterError, UnexpectedEOFError


class Stress(Enum):
    NONE = "0"
    PRIMARY = "1"
    SECONDARY = "2"


class Phoneme(Enum):
    AA = "AA"
    AE = "AE"
    AH = "AH"
    AO = "AO"
    AW = "AW"
    AY = "AY"
    B = "B"
    CH = "CH"
    D = "D"
    DH = "DH"
    EH = "EH"
    ER = "ER"
    EY = "EY"
    F = "F"
    G = "G"
    HH = "HH"
    IH = "IH"
    IY = "IY"
    JH = "JH"
    K = "K"
    L = "L"
    M = "M"
    N = "N"
    NG = "NG"
    OW = "OW"
    OY = "OY"
    P = "P"
    R = "R"
    S = "S"
    SH = "SH"
    T = "T"
    TH = "TH"
    UH = "UH"
    UW = "UW"
    V = "V"
    W = "W"
    Y = "Y"
    Z = "Z"
    ZH = "ZH"

    @property
    def is_vowel(self) -> bool:
        return self in VOWELS

    def __str__(self) -> str:
        return self.value


VOWELS = frozenset({
    Phoneme.AA, Phoneme.AE, Phoneme.AH, Phoneme.AO, Phoneme.AW, Phoneme.AY,
    Phoneme.EH, Phoneme.ER, Phoneme.EY,
    Phoneme.IH, Phoneme.IY,
    Phoneme.OW, Phoneme.OY,
    Phoneme.UH, Phoneme.UW,
})


@dataclass(frozen=True)
class Symbol:
    """One sound of a pronunciation.

    ``stress`` is set for vowels and ``None`` for consonants; mixing the two
    raises ``ValueError``.  ``str(symbol)`` gives back the dictionary token,
    e.g. ``AE1`` or ``K``.
    """

    phoneme: Phoneme
    stress: Optional[Stress] = None

    def __post_init__(self) -> None:
        if not isinstance(self.phoneme, Phoneme):
            object.__setattr__(self, "phoneme", Phoneme(self.phoneme))
        if self.phoneme.is_vowel and self.stress is None:
            raise ValueError(f"vowel {self.phoneme} requires a stress value")
        if not self.phoneme.is_vowel and self.stress is not None:
            raise ValueError(f"consonant {self.phoneme} cannot carry stress")

    def __str__(self) -> str:
        if self.stress is None:
            return self.phoneme.value
        return f"{self.phoneme.value}{self.stress.value}"

    def is_primary(self) -> bool:
        return self.stress is Stress.PRIMARY

    def is_secondary(self) -> bool:
        return self.stress is Stress.SECONDARY

    def is_unstressed(self) -> bool:
        """Consonants and ``0``-stressed vowels."""
        return self.stress is None or self.stress is Stress.NONE

    def is_syllable(self) -> bool:
        """True for any vowel (a syllable nucleus), whatever its stress."""
        return self.phoneme.is_vowel


class _Row(NamedTuple):
    expected: Optional[str]        # what may follow the first letter
    follow: Dict[str, Phoneme]     # second letter -> phoneme
    bare: Optional[Phoneme]        # phoneme when the first letter stands alone


def _vowels(expected: str, **follow: Phoneme) -> _Row:
    return _Row(expected, follow, None)


def _single(phoneme: Phoneme) -> _Row:
    return _Row(None, {}, phoneme)


_GRAMMAR: Dict[str, _Row] = {
    "A": _vowels("A, E, H, O, W, or Y", A=Phoneme.AA, E=Phoneme.AE, H=Phoneme.AH,
                 O=Phoneme.AO, W=Phoneme.AW, Y=Phoneme.AY),
    "E": _vowels("H, R, or Y", H=Phoneme.EH, R=Phoneme.ER, Y=Phoneme.EY),
    "I": _vowels("H or Y", H=Phoneme.IH, Y=Phoneme.IY),
    "O": _vowels("W or Y", W=Phoneme.OW, Y=Phoneme.OY),
    "U": _vowels("H or W", H=Phoneme.UH, W=Phoneme.UW),
    "B": _single(Phoneme.B),
    "C": _Row("H", {"H": Phoneme.CH}, None),
    "D": _Row("H or EOF", {"H": Phoneme.DH}, Phoneme.D),
    "F": _single(Phoneme.F),
    "G": _single(Phoneme.G),
    "H": _Row("H", {"H": Phoneme.HH}, None),
    "J": _Row("H", {"H": Phoneme.JH}, None),
    "K": _single(Phoneme.K),
    "L": _single(Phoneme.L),
    "M": _single(Phoneme.M),
    "N": _Row("G or EOF", {"G": Phoneme.NG}, Phoneme.N),
    "P": _single(Phoneme.P),
    "R": _single(Phoneme.R),
    "S": _Row("H or EOF", {"H": Phoneme.SH}, Phoneme.S),
    "T": _Row("H or EOF", {"H": Phoneme.TH}, Phoneme.T),
    "V": _single(Phoneme.V),
    "W": _single(Phoneme.W),
    "Y": _single(Phoneme.Y),
    "Z": _Row("H or EOF", {"H": Phoneme.ZH}, Phoneme.Z),
}

_STRESS_MARKERS = {"": Stress.NONE, "0": Stress.NONE, "1": Stress.PRIMARY, "2": Stress.SECONDARY}


def _parse_stress(marker: str) -> Stress:
    try:
        return _STRESS_MARKERS[marker]
    except KeyError:
        raise ExpectedStressError(marker) from None


def parse_symbol(token: str) -> Symbol:
    """Parse a single ARPAbet token such as ``"AE1"`` or ``"NG"``.

    Raises a :class:`~pronounce_core.errors.ParseError` subclass naming the
    expected continuation when the token is not a known phoneme.
    """
    if not token:
        raise UnexpectedEOFError("character")

    first = token[0]
    row = _GRAMMAR.get(first)
    if row is None:
        raise UnexpectedCharacterError("A-Z", first)

    if not row.follow:
        phoneme, rest = row.bare, token[1:]
    elif len(token) == 1:
        if row.bare is None:
            raise UnexpectedEOFError(row.expected, after=first)
        phoneme, rest = row.bare, ""
    elif token[1] in row.follow:
        phoneme, rest = row.follow[token[1]], token[2:]
    else:
        raise UnexpectedCharacterError(row.expected, token[1], after=first)

    stress = None
    consumed = phoneme.value
    if phoneme.is_vowel:
        stress = _parse_stress(rest[:1])
        consumed, rest = token[: len(consumed) + 1], rest[1:]

    if rest:
        raise UnexpectedCharacterError("EOF", rest[0], after=consumed)
    return Symbol(phoneme, stress)


__all__ = ["Stress", "Phoneme", "VOWELS", "Symbol", "parse_symbol"]
