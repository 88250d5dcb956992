"""Environment flag parsing."""
from __future__ import annotations

import importlib

import pytest

import config


@pytest.fixture
def reload_config(monkeypatch: pytest.MonkeyPatch):
    def _reload(**env: str):
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return importlib.reload(config).FLAGS

    yield _reload
    monkeypatch.undo()
    importlib.reload(config)


def test_defaults(reload_config, monkeypatch: pytest.MonkeyPatch):
    for key in ("CMUDICT_PATH", "TOP_K", "ALLOW_FALLBACK", "RHYME_ORDER", "QUERY_CASE"):
        monkeypatch.delenv(key, raising=False)
    flags = reload_config()
    assert flags["CMUDICT_PATH"] == "data/cmudict.dict"
    assert flags["TOP_K"] == 20
    assert flags["ALLOW_FALLBACK"] is True
    assert flags.RHYME_ORDER == "common"
    assert flags.QUERY_CASE == "lower"


def test_overrides(reload_config):
    flags = reload_config(TOP_K="5", ALLOW_FALLBACK="0", RHYME_ORDER="Rare", QUERY_CASE="upper")
    assert flags.TOP_K == 5
    assert flags.ALLOW_FALLBACK is False
    assert flags.RHYME_ORDER == "rare"
    assert flags.QUERY_CASE == "upper"


def test_invalid_values_fall_back_to_defaults(reload_config):
    flags = reload_config(TOP_K="many", RHYME_ORDER="loud", QUERY_CASE="title")
    assert flags.TOP_K == 20
    assert flags.RHYME_ORDER == "common"
    assert flags.QUERY_CASE == "lower"


def test_unknown_flag_attribute(reload_config):
    flags = reload_config()
    with pytest.raises(AttributeError):
        flags.NOT_A_FLAG
