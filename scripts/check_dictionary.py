#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Parse a CMU dictionary file end to end and log simple stats."""

import argparse
import logging
import sys
from collections import Counter

from config import FLAGS
from pronounce_core.errors import DictionaryError
from pronounce_core.loader import load_dictionary
from pronounce_core.logging_utils import setup_logging

setup_logging()
log = logging.getLogger(__name__)


def main(argv=None) -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("path", nargs="?", default=FLAGS["CMUDICT_PATH"])
    args = ap.parse_args(argv)

    try:
        index = load_dictionary(args.path, allow_fallback=False)
    except DictionaryError as exc:
        log.error("%s: %s", args.path, exc)
        return 1

    variants = Counter(len(rules) for _, rules in index.items())
    mono = sum(1 for _, rules in index.items() for r in rules if r.is_monosyllabic)
    log.info("Words: %s", len(index))
    log.info("Pronunciations: %s (monosyllabic: %s)", index.pronunciation_count, mono)
    for n, count in sorted(variants.items()):
        log.info(" - %s variant(s): %s words", n, count)
    return 0


if __name__ == "__main__":
    sys.exit(main())
