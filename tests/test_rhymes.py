import pytest

from pronounce_core.fallback import load_fallback
from pronounce_core.rhymes import rhyme_tail, rhymes
from pronounce_core.rules import Rule, parse_rule
from pronounce_core.symbols import Phoneme, Stress, Symbol


@pytest.fixture(scope="module")
def index():
    return load_fallback()


def test_rhyming(index):
    elf = index.lookup("elf")
    assert rhymes(elf, index.lookup("shelf"))
    assert not rhymes(elf, index.lookup("fish"))


def test_single_rules_accepted(index):
    assert rhymes(index.get("time"), index.get("rhyme"))
    assert not rhymes(index.get("time"), index.get("rust"))


def test_stress_must_match(index):
    # OW1 vs OW2
    assert not rhymes(index.lookup("hello"), index.lookup("tomato"))
    assert rhymes(index.lookup("tomato"), index.lookup("potato"))


def test_any_variant_pair_counts():
    a = [parse_rule("a AH0"), parse_rule("a(2) EY1")]
    say = [parse_rule("say S EY1")]
    assert rhymes(a, say)
    assert rhymes(say, a)
    assert not rhymes(a[:1], say)


def test_no_syllable_nucleus_never_rhymes(index):
    hmm = index.lookup("hmm")
    assert not rhymes(hmm, hmm)
    assert not rhymes(hmm, index.lookup("elf"))


def test_empty_variants(index):
    assert not rhymes([], index.lookup("elf"))
    assert not rhymes(index.lookup("elf"), index.lookup("abf"))


def test_rhyme_tail_starts_at_last_vowel(index):
    assert rhyme_tail(index.get("apple")) == (Symbol(Phoneme.AH, Stress.NONE), Symbol(Phoneme.L))
    assert rhyme_tail(index.get("hmm")) is None


def test_tail_is_from_last_vowel_not_last_stress():
    bubble = parse_rule("bubble B AH1 B AH0 L")
    apple = parse_rule("apple AE1 P AH0 L")
    assert rhymes(bubble, apple)


def test_rule_equality_used_for_tail():
    assert rhymes(Rule("x", (Symbol("EH", Stress.PRIMARY), Symbol("L"))), parse_rule("bell B EH1 L"))
