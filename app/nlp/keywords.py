# app/nlp/keywords.py
from __future__ import annotations

from typing import Iterable, List

from app.nlp.tokenizer import tokenize
from app.nlp.vocab import DEFAULT_SCORING_CONFIG, ScoringConfig


def keywords_from_tokens(tokens: Iterable[str], config: ScoringConfig = DEFAULT_SCORING_CONFIG) -> List[str]:
    """Unique tokens long enough to count as keywords, in first-seen order."""
    long_enough = (t for t in tokens if len(t) >= config.min_keyword_len)
    return list(dict.fromkeys(long_enough))


def extract_keywords(jd_text: str, config: ScoringConfig = DEFAULT_SCORING_CONFIG) -> List[str]:
    return keywords_from_tokens(tokenize(jd_text, config), config)
