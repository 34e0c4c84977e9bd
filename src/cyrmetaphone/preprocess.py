from itertools import groupby
from typing import Callable, Dict


def uppercase(s: str) -> str:
    # str.upper is locale-independent; Cyrillic has no special casing rules
    return (s or "").upper()


def remove_duplicate_characters(s: str) -> str:
    """Collapse runs of identical consecutive characters: "ССОО" -> "СО"."""
    return "".join(ch for ch, _ in groupby(s or ""))


# names usable as `function:` entries in YAML rule tables
FUNCTIONS: Dict[str, Callable[[str], str]] = {
    "remove_duplicate_characters": remove_duplicate_characters,
    "dedup": remove_duplicate_characters,
}
