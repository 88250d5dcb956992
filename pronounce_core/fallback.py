"""Built-in miniature dictionary used when no CMU dictionary file is available."""
from __future__ import annotations

from typing import Tuple

from .index import PronouncingIndex, build_index

# Entries copied from cmudict (lowercase ``cmudict.dict`` layout).
FALLBACK_LINES: Tuple[str, ...] = (
    ";;; built-in excerpt of the CMU Pronouncing Dictionary",
    "a AH0",
    "a(2) EY1",
    "apple AE1 P AH0 L",
    "bat B AE1 T",
    "bubble B AH1 B AH0 L",
    "cat K AE1 T",
    "climb K L AY1 M",
    "double D AH1 B AH0 L",
    "either IY1 DH ER0",
    "either(2) AY1 DH ER0",
    "elf EH1 L F",
    "every EH1 V ER0 IY0",
    "every(2) EH1 V R IY0",
    "fish F IH1 SH",
    "flat F L AE1 T",
    "hat HH AE1 T",
    "hello HH AH0 L OW1",
    "hello(2) HH EH0 L OW1",
    "hmm HH M",
    "neither N IY1 DH ER0",
    "neither(2) N AY1 DH ER0",
    "potato P AH0 T EY1 T OW2",
    "rhyme R AY1 M",
    "rust R AH1 S T",
    "self S EH1 L F",
    "shelf SH EH1 L F",
    "thyme T AY1 M",
    "time T AY1 M",
    "tomato T AH0 M EY1 T OW2",
    "tomato(2) T AH0 M AA1 T OW2",
    "trouble T R AH1 B AH0 L",
    "unfit AH0 N F IH1 T",
    "wish W IH1 SH",
)

FALLBACK_WORDS = tuple(sorted({line.split(" ", 1)[0].split("(")[0] for line in FALLBACK_LINES[1:]}))


def load_fallback() -> PronouncingIndex:
    return build_index(FALLBACK_LINES)


__all__ = ["FALLBACK_LINES", "FALLBACK_WORDS", "load_fallback"]
