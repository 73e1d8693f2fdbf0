from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

SCORING_CONFIG_PATH = Path(__file__).resolve().parents[3] / "config" / "scoring.yaml"


@lru_cache(maxsize=1)
def get_scoring_config() -> dict[str, Any]:
    """Presentation tables from config/scoring.yaml (score bands, report limits), read once."""
    try:
        raw = SCORING_CONFIG_PATH.read_text(encoding="utf-8")
    except OSError as exc:
        raise RuntimeError(f"Scoring config unreadable at '{SCORING_CONFIG_PATH}': {exc}") from exc

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"Invalid YAML in scoring config '{SCORING_CONFIG_PATH}': {exc}") from exc

    if not isinstance(parsed, dict):
        raise RuntimeError(f"Invalid scoring config '{SCORING_CONFIG_PATH}': expected a top-level mapping.")
    return parsed


def get_scoring_value(path: str, default: Any = None) -> Any:
    """Dot-path lookup, e.g. 'report.missing_skills_limit'."""
    if not path:
        return default

    current: Any = get_scoring_config()
    for key in path.split("."):
        if not isinstance(current, dict) or key not in current:
            return default
        current = current[key]
    return current


def get_score_bands() -> tuple[tuple[str, int], ...]:
    """(name, minimum) pairs, highest minimum first. Malformed entries are skipped."""
    raw = get_scoring_value("bands", None)
    if not isinstance(raw, list):
        return ()
    bands = [
        (str(item["name"]), int(item["min"]))
        for item in raw
        if isinstance(item, dict) and "name" in item and "min" in item
    ]
    return tuple(sorted(bands, key=lambda band: band[1], reverse=True))
