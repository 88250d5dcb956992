from .errors import (
    DictionaryError,
    ExpectedStressError,
    InvalidLineError,
    ParseError,
    PronunciationError,
    RuleParseError,
    UnexpectedCharacterError,
    UnexpectedEOFError,
)
from .symbols import Phoneme, Stress, Symbol, parse_symbol
from .rules import Rule, parse_rule
from .index import PronouncingIndex, build_index
from .rhymes import rhyme_tail, rhymes

__all__ = [
    "DictionaryError",
    "ExpectedStressError",
    "InvalidLineError",
    "ParseError",
    "PronunciationError",
    "RuleParseError",
    "UnexpectedCharacterError",
    "UnexpectedEOFError",
    "Phoneme",
    "Stress",
    "Symbol",
    "parse_symbol",
    "Rule",
    "parse_rule",
    "PronouncingIndex",
    "build_index",
    "rhyme_tail",
    "rhymes",
]
