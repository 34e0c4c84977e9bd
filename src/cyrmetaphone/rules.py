from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Tuple, Union

import regex as re

from .preprocess import remove_duplicate_characters

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PatternRule:
    pattern: re.Pattern
    replacement: str

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


@dataclass(frozen=True)
class FunctionRule:
    function: Callable[[str], str]

    def apply(self, text: str) -> str:
        return self.function(text)


Rule = Union[PatternRule, FunctionRule]


def rule_re(pattern: str, replacement: str) -> PatternRule:
    # compiled eagerly: a bad pattern in a fixed table must fail at import
    return PatternRule(re.compile(pattern), replacement)


def rule_fn(function: Callable[[str], str]) -> FunctionRule:
    return FunctionRule(function)


@dataclass(frozen=True)
class RuleSet:
    """
    Ordered, immutable sequence of rules. Order matters: every rule sees
    the output of the one before it.
    """

    name: str
    rules: Tuple[Rule, ...]

    def __post_init__(self):
        if not self.rules:
            raise ValueError(f"Rule set {self.name!r} must contain at least one rule.")

    def __len__(self) -> int:
        return len(self.rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    def apply(self, text: str) -> str:
        for rule in self.rules:
            text = rule.apply(text)
        return text

    def prefixed(self, name: str, rules: Iterable[Rule]) -> "RuleSet":
        """New flattened set: `rules` first, then every rule of this set."""
        return RuleSet(name, tuple(rules) + self.rules)


def _devoice(voiced: str, voiceless: str) -> Tuple[PatternRule, PatternRule]:
    return (
        rule_re(voiced + _CONSONANTS, voiceless + r"\1"),
        rule_re(voiced + "$", voiceless),
    )


_CONSONANTS = "(Б|В|Г|Д|Ж|З|Й|К|П|С|Т|Ф|Х|Ц|Ч|Ш|Щ)"

RUSSIAN = RuleSet(
    "russian",
    (
        rule_re("[ЪЬ]", ""),
        # А-Я is U+0410..U+042F, so Ё is stripped here too
        rule_re("[^А-Я]", ""),
        rule_fn(remove_duplicate_characters),
        rule_re("ЙО|ИО|ЙЕ|ИЕ", "И"),
        rule_re("[ОЫЯ]", "А"),
        rule_re("[ЕЁЭ]", "И"),
        rule_re("Ю", "У"),
        *_devoice("Б", "П"),
        *_devoice("З", "С"),
        *_devoice("Д", "Т"),
        *_devoice("В", "Ф"),
        *_devoice("Г", "К"),
        rule_re("ТС|ДС", "Ц"),
        rule_fn(remove_duplicate_characters),
    ),
)

UKRAINIAN = RUSSIAN.prefixed(
    "ukrainian",
    (rule_re("[ІЇ]", "И"),),
)

logger.debug("Compiled rule tables: %s=%d rules, %s=%d rules",
             RUSSIAN.name, len(RUSSIAN), UKRAINIAN.name, len(UKRAINIAN))
