from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

_TRUE_VALUES = frozenset({"1", "true", "yes", "y", "on"})
_DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
)


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def _get_env_str(name: str, default: str) -> str:
    return _get_env(name, default) or default


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name)
    return default if raw is None else raw.lower() in _TRUE_VALUES


def _get_env_number(name: str, default, cast):
    raw = _get_env(name)
    if raw is None:
        return default
    try:
        return cast(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    raw = _get_env(name)
    if raw is None:
        return default
    clean = tuple(item.strip() for item in raw.split(",") if item.strip())
    return clean or default


@dataclass(frozen=True)
class Settings:
    api_key: str | None
    rate_limit: str
    ai_rate_limit: str
    rate_limit_enabled: bool
    log_level: str
    sentry_dsn: str | None
    cors_allowed_origins: tuple[str, ...]
    cors_allow_origin_regex: str | None
    cors_allow_credentials: bool
    analysis_records_enabled: bool
    analysis_db_path: str
    analysis_retention_days: int
    hf_api_key: str | None
    ai_base_url: str
    ai_model: str
    ai_timeout_s: float
    ai_max_tokens: int
    ai_temperature: float
    ai_loading_retry_delay_s: float

    @classmethod
    def from_env(cls) -> Settings:
        loaded = cls(
            api_key=_get_env("API_KEY"),
            rate_limit=_get_env_str("RATE_LIMIT", "60/minute"),
            ai_rate_limit=_get_env_str("AI_RATE_LIMIT", "10/minute"),
            rate_limit_enabled=_get_env_bool("RATE_LIMIT_ENABLED", True),
            log_level=_get_env_str("LOG_LEVEL", "INFO").upper(),
            sentry_dsn=_get_env("SENTRY_DSN"),
            cors_allowed_origins=_get_env_list("CORS_ALLOWED_ORIGINS", _DEFAULT_CORS_ORIGINS),
            cors_allow_origin_regex=_get_env("CORS_ALLOW_ORIGIN_REGEX"),
            cors_allow_credentials=_get_env_bool("CORS_ALLOW_CREDENTIALS", False),
            analysis_records_enabled=_get_env_bool("ANALYSIS_RECORDS_ENABLED", True),
            analysis_db_path=_get_env_str("ANALYSIS_DB_PATH", "data/analysis_records.db"),
            analysis_retention_days=_get_env_number("ANALYSIS_RETENTION_DAYS", 365, int),
            hf_api_key=_get_env("HF_API_KEY") or _get_env("HUGGINGFACE_API_KEY"),
            ai_base_url=_get_env_str("AI_BASE_URL", "https://router.huggingface.co/v1"),
            ai_model=_get_env_str("AI_MODEL", "meta-llama/Meta-Llama-3-8B-Instruct"),
            ai_timeout_s=_get_env_number("AI_TIMEOUT_S", 60.0, float),
            ai_max_tokens=_get_env_number("AI_MAX_TOKENS", 2000, int),
            ai_temperature=_get_env_number("AI_TEMPERATURE", 0.7, float),
            ai_loading_retry_delay_s=_get_env_number("AI_LOADING_RETRY_DELAY_S", 10.0, float),
        )
        if loaded.analysis_retention_days < 1:
            raise RuntimeError("ANALYSIS_RETENTION_DAYS must be at least 1.")
        return loaded


settings = Settings.from_env()
