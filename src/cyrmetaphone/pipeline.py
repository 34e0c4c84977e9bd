# src/cyrmetaphone/pipeline.py
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Dict, Union

from .languages import Language
from .preprocess import uppercase
from .rules import RUSSIAN, UKRAINIAN, RuleSet

logger = logging.getLogger(__name__)

RULE_TABLES: Dict[Language, RuleSet] = {
    Language.RUSSIAN: RUSSIAN,
    Language.UKRAINIAN: UKRAINIAN,
}


class Metaphone:
    """
    Phonetic encoder over one fixed rule set.

    Holds no mutable state, so a single instance can be shared between
    threads and reused for any number of words.
    """

    __slots__ = ("_rules",)

    def __init__(self, rules: RuleSet):
        self._rules = rules

    @property
    def rules(self) -> RuleSet:
        return self._rules

    @classmethod
    def for_language(cls, language: Union[Language, str]) -> "Metaphone":
        return construct_engine(language)

    def encode(self, word: str) -> str:
        """
        Uppercase `word`, then run every rule over the accumulated result.

        Never raises for text input; characters outside the Cyrillic
        alphabet are dropped, so the result may be empty.
        """
        return self._rules.apply(uppercase(word))

    get = encode

    def __repr__(self) -> str:
        return f"Metaphone(rules={self.rules.name!r}, size={len(self.rules)})"


@lru_cache(maxsize=None)
def _engine(language: Language) -> Metaphone:
    rules = RULE_TABLES[language]
    logger.debug("Building %s engine with %d rules", language.name.lower(), len(rules))
    return Metaphone(rules)


def construct_engine(language: Union[Language, str] = Language.RUSSIAN) -> Metaphone:
    return _engine(Language.parse(language))


def encode(word: str, language: Union[Language, str] = Language.RUSSIAN) -> str:
    return construct_engine(language).encode(word)
