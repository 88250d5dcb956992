from __future__ import annotations

from typing import List

from .rules import Rule


def syllable_count(rule: Rule) -> int:
    return sum(1 for s in rule.pronunciation if s.is_syllable())


def stress_digits(rule: Rule) -> List[int]:
    return [int(s.stress.value) for s in rule.pronunciation if s.stress is not None]


def stress_pattern_str(rule: Rule) -> str:
    digs = stress_digits(rule)
    if not digs:
        return ""
    # normalize 2→1 so pattern is binary
    return "-".join("1" if d > 0 else "0" for d in digs)


def metrical_name(pattern: str) -> str:
    mapping = {
        "1-0": "Trochee",
        "0-1": "Iamb",
        "1-0-0": "Dactyl",
        "0-0-1": "Anapest",
        "1-1": "Spondee",
        "0-1-0": "Amphibrach",
        "1-0-1": "Cretic",
        "0-1-1": "Bacchius",
        "1-1-0": "Antibacchius",
    }
    return mapping.get(pattern, "—")


def describe(rule: Rule) -> str:
    """``"2 • 1-0 • Trochee"`` style summary used by the CLI and UI."""
    stress = stress_pattern_str(rule)
    meter = metrical_name(stress) if stress else "—"
    return f"{syllable_count(rule)} • {stress or '—'} • {meter}"


__all__ = ["syllable_count", "stress_digits", "stress_pattern_str", "metrical_name", "describe"]
