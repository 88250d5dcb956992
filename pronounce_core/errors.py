"""Exception types raised while parsing and indexing pronunciation data."""
from __future__ import annotations

from typing import Optional


class PronunciationError(Exception):
    """Base class for every error raised by :mod:`pronounce_core`."""


class ParseError(PronunciationError, ValueError):
    """A phoneme token or dictionary line could not be parsed."""

    expected: Optional[str] = None
    after: Optional[str] = None
    found: Optional[str] = None

    def _key(self):
        return (type(self), self.expected, self.after, self.found)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())


class ExpectedStressError(ParseError):
    def __init__(self, found: str) -> None:
        self.expected = "stress marker"
        self.found = found
        super().__init__(f"Expected stress marker '0', '1', or '2', got {found}")


class UnexpectedEOFError(ParseError):
    def __init__(self, expected: str, after: Optional[str] = None) -> None:
        self.expected = expected
        self.after = after
        if after is None:
            msg = f"Expected {expected}, got EOF"
        else:
            msg = f"Expected {expected} after {after}, got EOF"
        super().__init__(msg)


class UnexpectedCharacterError(ParseError):
    def __init__(self, expected: str, found: str, after: Optional[str] = None) -> None:
        self.expected = expected
        self.after = after
        self.found = found
        if after is None:
            msg = f"Expected {expected}, got {found}"
        else:
            msg = f"Expected {expected} after {after}, got {found}"
        super().__init__(msg)


class DictionaryError(PronunciationError):
    """A dictionary could not be loaded or indexed."""


class InvalidLineError(DictionaryError):
    def __init__(self, position: int) -> None:
        self.position = position
        super().__init__(f"line {position} is missing a space and so cannot be properly split")


class RuleParseError(DictionaryError):
    def __init__(self, position: int, cause: ParseError) -> None:
        self.position = position
        self.cause = cause
        super().__init__(f"rule parse error at line {position}: {cause}")


__all__ = [
    "PronunciationError",
    "ParseError",
    "ExpectedStressError",
    "UnexpectedEOFError",
    "UnexpectedCharacterError",
    "DictionaryError",
    "InvalidLineError",
    "RuleParseError",
]
