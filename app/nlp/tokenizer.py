# app/nlp/tokenizer.py
from __future__ import annotations

import re
from typing import List

from app.nlp.vocab import DEFAULT_SCORING_CONFIG, ScoringConfig

# Keep lowercase alphanumerics plus '+' and '#' (c++, c#).
_NON_TOKEN = re.compile(r"[^a-z0-9+#]+")


def tokenize(text: str, config: ScoringConfig = DEFAULT_SCORING_CONFIG) -> List[str]:
    """Lower-cased word tokens of ``text`` with stopwords removed, in order."""
    body = _NON_TOKEN.sub(" ", (text or "").lower())
    return [t for t in body.split() if t and t not in config.stopwords]

