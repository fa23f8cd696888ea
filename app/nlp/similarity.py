# app/nlp/similarity.py
from __future__ import annotations

from typing import Iterable, Set


def jaccard(a: Set[str], b: Set[str]) -> float:
    if not a and not b:
        return 0.0
    return len(a & b) / len(a | b)


def keyword_jaccard(keywords: Iterable[str], tokens: Set[str]) -> float:
    # union spans the whole resume vocabulary, not just keyword-length tokens
    return jaccard(set(keywords), tokens)
