"""Runtime configuration flags for the pronouncing dictionary tools.

Flags are read from environment variables so the CLI and the UI can be
pointed at a different dictionary without code changes.  Every flag has a
safe default (bundled path, built-in fallback allowed, INFO logging).
"""
from __future__ import annotations

import os
from typing import Any, Dict


def _env_bool(name: str, default: str = "0") -> bool:
    return os.getenv(name, default) == "1"


def _env_int(name: str, default: str) -> int:
    try:
        return int(os.getenv(name, default))
    except ValueError:
        return int(default)


def _env_choice(name: str, default: str, choices: tuple) -> str:
    value = os.getenv(name, default).strip().lower()
    return value if value in choices else default


class _Flags(dict):
    def __getattr__(self, name: str) -> Any:
        try:
            return self[name]
        except KeyError as exc:
            raise AttributeError(name) from exc


FLAGS: Dict[str, Any] = _Flags({
    "CMUDICT_PATH": os.getenv("CMUDICT_PATH", "data/cmudict.dict"),
    "LOG_LEVEL": os.getenv("LOG_LEVEL", "INFO"),
    "TOP_K": _env_int("TOP_K", "20"),
    "ALLOW_FALLBACK": _env_bool("ALLOW_FALLBACK", "1"),
    "RHYME_ORDER": _env_choice("RHYME_ORDER", "common", ("common", "rare")),
    "QUERY_CASE": _env_choice("QUERY_CASE", "lower", ("lower", "upper", "keep")),
})

__all__ = ["FLAGS"]
