from __future__ import annotations

import re
from types import MappingProxyType

from app.schemas.scoring import OverusedWord

OVERUSED_PHRASES = MappingProxyType(
    {
        "responsible for": ("Spearheaded", "Directed", "Oversaw", "Owned", "Championed"),
        "led": ("Orchestrated", "Headed", "Steered", "Guided", "Mobilized"),
        "managed": ("Supervised", "Coordinated", "Administered", "Optimized"),
        "helped": ("Facilitated", "Enabled", "Supported", "Contributed to", "Accelerated"),
        "worked on": ("Developed", "Executed", "Engineered", "Delivered"),
        "did": ("Completed", "Accomplished", "Performed", "Achieved"),
    }
)
MIN_REPEATS = 2

_PHRASE_PATTERNS = MappingProxyType(
    {
        phrase: re.compile(r"\b" + r"\s+".join(re.escape(part) for part in phrase.split()) + r"\b", re.IGNORECASE)
        for phrase in OVERUSED_PHRASES
    }
)


def detect_overused_words(text: str) -> list[OverusedWord]:
    if not text:
        return []

    found: list[OverusedWord] = []
    for phrase, suggestions in OVERUSED_PHRASES.items():
        count = len(_PHRASE_PATTERNS[phrase].findall(text))
        if count >= MIN_REPEATS:
            found.append(OverusedWord(word=phrase, count=count, suggestions=list(suggestions)))
    return found
