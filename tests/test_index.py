import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from pronounce_core.errors import InvalidLineError, RuleParseError, UnexpectedCharacterError
from pronounce_core.index import PronouncingIndex, build_index, split_label, strip_comment
from pronounce_core.rules import parse_rule

LINES = [
    ";;; comment header",
    "apple AE1 P AH0 L",
    "every EH1 V ER0 IY0",
    "every(2) EH1 V R IY0",
    "read R IY1 D # present tense",
    "read(2) R EH1 D # past tense",
]


@pytest.fixture
def index():
    return build_index(LINES)


def test_variants_accumulate_in_file_order(index):
    every = index.lookup("every")
    assert [r.label for r in every] == ["every", "every(2)"]
    assert every[0] == parse_rule("every EH1 V ER0 IY0")
    assert every[1] == parse_rule("every(2) EH1 V R IY0")


def test_variant_label_is_not_a_key(index):
    assert index.lookup("every(2)") == ()


def test_unknown_word_is_empty(index):
    assert index.lookup("abf") == ()
    assert index.get("abf") is None
    assert "abf" not in index


def test_lookup_is_case_sensitive(index):
    assert index.lookup("Apple") == ()
    assert index.get("apple").phones() == ("AE1", "P", "AH0", "L")


def test_trailing_comment_ignored(index):
    assert [r.phones() for r in index.lookup("read")] == [("R", "IY1", "D"), ("R", "EH1", "D")]


def test_counts(index):
    assert len(index) == 3
    assert index.pronunciation_count == 5
    assert list(index) == ["apple", "every", "read"]
    assert repr(index) == "PronouncingIndex(words=3, pronunciations=5)"


def test_missing_space_reports_position_including_comments():
    with pytest.raises(InvalidLineError) as excinfo:
        build_index([";;; header", "apple AE1 P AH0 L", "apple"])
    assert excinfo.value.position == 2
    assert str(excinfo.value) == "line 2 is missing a space and so cannot be properly split"


def test_bad_rule_aborts_build():
    with pytest.raises(RuleParseError) as excinfo:
        build_index(["apple AE1 P AH0 L", "bogus QQ1"])
    err = excinfo.value
    assert err.position == 1
    assert isinstance(err.cause, UnexpectedCharacterError)
    assert err.__cause__ is err.cause


def test_label_without_phonemes_aborts_build():
    with pytest.raises(RuleParseError):
        build_index(["apple #no pronunciation"])


def test_comment_lines_only():
    assert len(build_index([";; one", ";;; two"])) == 0


def test_summary_log_counts_skipped_comments(caplog):
    with caplog.at_level(logging.INFO, logger="pronounce_core.index"):
        build_index([";; header", ";;; more", "a AH0"])
    assert "Indexed 1 words (1 pronunciations, 2 comment lines skipped)" in caplog.text


def test_index_is_read_only(index):
    assert isinstance(index.lookup("every"), tuple)
    with pytest.raises(TypeError):
        index._entries["new"] = ()


def test_concurrent_readers(index):
    words = ["apple", "every", "read"] * 50
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(index.lookup, words))
    assert all(results)
    assert [len(r) for r in results[:3]] == [1, 2, 2]


def test_entries_are_copied_on_construction():
    entries = {"apple": (parse_rule("apple AE1 P AH0 L"),)}
    index = PronouncingIndex(entries)
    entries["pear"] = ()
    assert "pear" not in index


@pytest.mark.parametrize("label,expected", [
    ("every(2)", "every"),
    ("every", "every"),
    ("a(b(1)", "a(b"),
    ("(2)", ""),
])
def test_split_label(label, expected):
    assert split_label(label) == expected


def test_strip_comment():
    assert strip_comment("read R EH1 D # past") == "read R EH1 D "
    assert strip_comment("read R EH1 D") == "read R EH1 D"
