import argparse
import logging
import sys
from typing import List, Optional

from .config import load_rules
from .languages import Language
from .pipeline import Metaphone, construct_engine


def _build_engine(lang: Language, rules_path: Optional[str]) -> Metaphone:
    if rules_path:
        try:
            return Metaphone(load_rules(rules_path))
        except (OSError, ValueError) as e:
            raise SystemExit(f"Cannot load rules from {rules_path}: {e}")
    return construct_engine(lang)


def main(words: List[str], lang: Language = Language.RUSSIAN, rules_path: Optional[str] = None, out=None):
    out = out or sys.stdout
    engine = _build_engine(lang, rules_path)
    for w in words:
        out.write(f"{w}\t{engine.encode(w)}\n")


def run(argv: Optional[List[str]] = None):
    p = argparse.ArgumentParser(description="Cyrillic metaphone: print the phonetic code of each word")
    p.add_argument("words", nargs="+", help="Words to encode")
    p.add_argument(
        "--lang",
        default=Language.RUSSIAN,
        type=Language.parse,
        help="Rule set to use: ru, uk (ua) or russian, ukrainian (default: ru)",
    )
    p.add_argument(
        "--rules", dest="rules_path", default=None, help="YAML rule table (overrides --lang)"
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")
    a = p.parse_args(argv)
    if a.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    main(a.words, a.lang, a.rules_path)


if __name__ == "__main__":
    run()
