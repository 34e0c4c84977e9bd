from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

import regex as re
import yaml

from .languages import Language
from .pipeline import RULE_TABLES
from .preprocess import FUNCTIONS
from .rules import FunctionRule, PatternRule, Rule, RuleSet

logger = logging.getLogger(__name__)


@dataclass
class RuleEntry:
    # exactly one of pattern / function is set
    pattern: Optional[str] = None
    replace: str = ""
    function: Optional[str] = None


@dataclass
class RulesConfig:
    name: str = "custom"
    extends: Optional[Language] = None
    rules: List[RuleEntry] = field(default_factory=list)


def _parse_entry(e: Any, i: int) -> RuleEntry:
    if not isinstance(e, dict):
        raise ValueError(f"Config error: rule #{i} must be a mapping (dict), got {type(e).__name__}.")

    pattern = e.get("pattern")
    function = e.get("function")
    if (pattern is None) == (function is None):
        raise ValueError(
            f"Config error: rule #{i} needs exactly one of 'pattern' or 'function'. "
            f"Problematic entry: {e}"
        )

    if function is not None:
        if str(function) not in FUNCTIONS:
            raise ValueError(
                f"Config error: rule #{i} uses unknown function {function!r} "
                f"(known: {', '.join(sorted(FUNCTIONS))})."
            )
        return RuleEntry(function=str(function))

    # `replace` may be omitted or null to mean deletion
    replace = e.get("replace", "")
    return RuleEntry(pattern=str(pattern), replace="" if replace is None else str(replace))


def parse_config(raw: Any) -> RulesConfig:
    if not isinstance(raw, dict):
        raise ValueError("Config error: top-level YAML must be a mapping (dict).")

    extends = raw.get("extends")
    if extends is not None:
        try:
            extends = Language.parse(extends)
        except ValueError as e:
            raise ValueError(f"Config error: 'extends' must be a supported language. {e}") from e

    rules_raw = raw.get("rules", []) or []
    if not isinstance(rules_raw, list):
        raise ValueError("Config error: 'rules' must be a list.")

    entries = [_parse_entry(e, i) for i, e in enumerate(rules_raw, start=1)]
    if not entries and extends is None:
        raise ValueError("Config error: a rule table needs a non-empty 'rules' list or 'extends'.")

    return RulesConfig(name=str(raw.get("name") or "custom"), extends=extends, rules=entries)


def _compile(entry: RuleEntry, i: int) -> Rule:
    if entry.function is not None:
        return FunctionRule(FUNCTIONS[entry.function])
    try:
        compiled = re.compile(entry.pattern)
    except re.error as e:
        raise ValueError(f"Config error: rule #{i} has an invalid pattern {entry.pattern!r}: {e}") from e
    try:
        # sub parses the template even when nothing matches
        compiled.sub(entry.replace, "")
    except (re.error, IndexError) as e:
        raise ValueError(f"Config error: rule #{i} has an invalid replacement {entry.replace!r}: {e}") from e
    return PatternRule(compiled, entry.replace)


def build_rules(cfg: RulesConfig) -> RuleSet:
    """Compile a parsed config; `extends` appends that language's table after the custom rules."""
    rules = tuple(_compile(e, i) for i, e in enumerate(cfg.rules, start=1))
    if cfg.extends is None:
        return RuleSet(cfg.name, rules)
    return RULE_TABLES[cfg.extends].prefixed(cfg.name, rules)


def parse_rules(raw: Any) -> RuleSet:
    return build_rules(parse_config(raw))


def load_rules(path: str) -> RuleSet:
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    rules = parse_rules(raw)
    logger.debug("Loaded rule table %r from %s (%d rules)", rules.name, path, len(rules))
    return rules
