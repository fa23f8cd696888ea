# app/utils/llm_json.py
from __future__ import annotations

import json
import re
from typing import Any, Dict, Optional

# a fence wrapping the whole reply, never one inside it
_FENCE = re.compile(r"^\s*```(?:json)?\s*|\s*```\s*$", re.IGNORECASE)


def strip_code_fences(text: str) -> str:
    return _FENCE.sub("", text or "").strip()


def loads_object(text: str) -> Optional[Dict[str, Any]]:
    """Parse a JSON object out of model output; None when it is not one."""
    try:
        data = json.loads(text or "")
    except json.JSONDecodeError:
        try:
            data = json.loads(strip_code_fences(text))
        except json.JSONDecodeError:
            return None
    return data if isinstance(data, dict) else None
