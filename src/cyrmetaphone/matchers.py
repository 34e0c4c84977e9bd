from dataclasses import dataclass
from typing import Iterable, Optional, Union

from rapidfuzz import fuzz, process

from .languages import Language
from .pipeline import construct_engine


@dataclass
class Match:
    word: str
    code: str
    score: float


def sounds_alike(a: str, b: str, language: Union[Language, str] = Language.RUSSIAN) -> bool:
    engine = construct_engine(language)
    code = engine.encode(a)
    # two words that lose every letter are not "alike"
    return bool(code) and code == engine.encode(b)


def phonetic_ratio(a: str, b: str, language: Union[Language, str] = Language.RUSSIAN) -> float:
    engine = construct_engine(language)
    return fuzz.ratio(engine.encode(a), engine.encode(b))


def best_match(
    word: str,
    candidates: Iterable[str],
    language: Union[Language, str] = Language.RUSSIAN,
    threshold: int = 80,
) -> Optional[Match]:
    """
    Candidate whose code is closest to the code of `word`, scored with
    fuzz.ratio; None when nothing reaches `threshold`.
    """
    engine = construct_engine(language)
    words = list(candidates)
    codes = [engine.encode(w) for w in words]
    code = engine.encode(word)
    if not code or not words:
        return None
    found = process.extractOne(code, codes, scorer=fuzz.ratio, score_cutoff=threshold)
    if found is None:
        return None
    _, score, idx = found
    return Match(words[idx], codes[idx], score)
