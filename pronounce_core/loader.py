"""Read a CMU dictionary file from disk and index it."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List, Optional, Union

import config

from .errors import DictionaryError
from .fallback import load_fallback
from .index import PronouncingIndex, build_index

LOGGER = logging.getLogger(__name__)

_LFS_POINTER_PREFIX = "version https://git-lfs.github.com/spec/v1"

PathLike = Union[str, Path]


def looks_like_lfs_pointer(path: Path) -> bool:
    if not path.is_file():
        return False
    try:
        with path.open("r", encoding="utf-8", errors="replace") as handle:
            first_lines = [handle.readline().strip() for _ in range(3)]
    except OSError:
        return False
    return any(_LFS_POINTER_PREFIX in line for line in first_lines)


def iter_dictionary_lines(path: PathLike) -> Iterator[str]:
    """Yield newline-stripped lines, decoding UTF-8 with a Latin-1 fallback.

    cmudict-0.7b mixes in a few Latin-1 bytes, so decoding is per line.
    """
    with open(path, "rb") as fh:
        for bline in fh:
            try:
                line = bline.decode("utf-8")
            except UnicodeDecodeError:
                line = bline.decode("latin-1")
            yield line.rstrip("\r\n")


def _missing_reason(path: Path) -> Optional[str]:
    if not path.exists():
        return f"{path} missing"
    if looks_like_lfs_pointer(path):
        return f"{path} is a Git LFS pointer"
    return None


def load_dictionary(path: Optional[PathLike] = None,
                    allow_fallback: Optional[bool] = None) -> PronouncingIndex:
    """Load and index the dictionary at ``path`` (default ``FLAGS["CMUDICT_PATH"]``).

    A missing file (or an LFS pointer in its place) falls back to the
    built-in excerpt when ``allow_fallback`` is true.  Malformed content is
    always an error.
    """
    flags = config.FLAGS
    dict_path = Path(path if path is not None else flags["CMUDICT_PATH"])
    if allow_fallback is None:
        allow_fallback = bool(flags.get("ALLOW_FALLBACK", True))

    reason = _missing_reason(dict_path)
    if reason is not None:
        if not allow_fallback:
            raise DictionaryError(f"dictionary unavailable: {reason}")
        LOGGER.warning("%s; falling back to built-in dictionary", reason)
        return load_fallback()

    LOGGER.info("Loading pronouncing dictionary from %s", dict_path)
    try:
        lines: List[str] = list(iter_dictionary_lines(dict_path))
    except OSError as exc:
        raise DictionaryError(f"io error: {exc}") from exc
    return build_index(lines)


__all__ = ["looks_like_lfs_pointer", "iter_dictionary_lines", "load_dictionary"]
