from __future__ import annotations

import json
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from app.core.config import settings
from app.schemas.scoring import AnalysisRecord

_LIST_COLUMNS = ("missing_skills", "overused_words")


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _get_db_path() -> Path:
    return Path(settings.analysis_db_path)


def init_db() -> None:
    if not settings.analysis_records_enabled:
        return
    db_path = _get_db_path()
    db_path.parent.mkdir(parents=True, exist_ok=True)
    with sqlite3.connect(db_path) as conn:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS analysis_records (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                analyzed_at TEXT NOT NULL,
                full_name TEXT,
                email TEXT,
                job_title TEXT,
                company_name TEXT,
                job_description TEXT,
                overall_score INTEGER NOT NULL,
                keyword_match INTEGER NOT NULL,
                ats_compatibility INTEGER NOT NULL,
                content_strength INTEGER NOT NULL,
                length_score REAL NOT NULL,
                missing_skills TEXT NOT NULL,
                overused_words TEXT NOT NULL
            )
            """
        )
        conn.execute(
            """
            CREATE INDEX IF NOT EXISTS idx_analysis_records_analyzed_at
            ON analysis_records (analyzed_at)
            """
        )
        conn.commit()


def save_analysis_record(record: AnalysisRecord) -> AnalysisRecord:
    if not settings.analysis_records_enabled:
        return record
    init_db()
    analyzed_at = record.analyzed_at or _utc_now()
    with sqlite3.connect(_get_db_path()) as conn:
        conn.execute(
            """
            INSERT INTO analysis_records (
                analyzed_at, full_name, email, job_title, company_name, job_description,
                overall_score, keyword_match, ats_compatibility, content_strength, length_score,
                missing_skills, overused_words
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                analyzed_at,
                record.full_name,
                record.email,
                record.job_title,
                record.company_name,
                record.job_description,
                record.overall_score,
                record.keyword_match,
                record.ats_compatibility,
                record.content_strength,
                record.length_score,
                json.dumps(record.missing_skills, ensure_ascii=False),
                json.dumps(record.overused_words, ensure_ascii=False),
            ),
        )
        conn.commit()
    return record.model_copy(update={"analyzed_at": analyzed_at})


def purge_old_records() -> int:
    if not settings.analysis_records_enabled:
        return 0
    init_db()
    retention = max(1, int(settings.analysis_retention_days))
    cutoff = datetime.now(timezone.utc).timestamp() - retention * 86400
    cutoff_iso = datetime.fromtimestamp(cutoff, tz=timezone.utc).isoformat()
    with sqlite3.connect(_get_db_path()) as conn:
        cur = conn.execute("DELETE FROM analysis_records WHERE analyzed_at < ?", (cutoff_iso,))
        conn.commit()
        return int(cur.rowcount or 0)


def _row_to_record(cursor: sqlite3.Cursor, row: tuple) -> AnalysisRecord:
    data: dict[str, Any] = {col[0]: row[idx] for idx, col in enumerate(cursor.description)}
    data.pop("id", None)
    for column in _LIST_COLUMNS:
        try:
            data[column] = json.loads(data.get(column) or "[]")
        except ValueError:
            data[column] = []
    return AnalysisRecord.model_validate(data)


def get_latest(limit: int = 20) -> list[AnalysisRecord]:
    if not settings.analysis_records_enabled:
        return []
    init_db()
    with sqlite3.connect(_get_db_path()) as conn:
        cur = conn.execute(
            """
            SELECT *
            FROM analysis_records
            ORDER BY id DESC
            LIMIT ?
            """,
            (limit,),
        )
        rows = cur.fetchall()
        return [_row_to_record(cur, row) for row in rows]


def get_summary() -> dict[str, Any]:
    if not settings.analysis_records_enabled:
        return {"enabled": False}
    init_db()
    week_ago = datetime.fromtimestamp(
        datetime.now(timezone.utc).timestamp() - 7 * 86400, tz=timezone.utc
    ).isoformat()
    with sqlite3.connect(_get_db_path()) as conn:
        total, average = conn.execute(
            "SELECT COUNT(*), AVG(overall_score) FROM analysis_records"
        ).fetchone()
        total_7d = conn.execute(
            "SELECT COUNT(*) FROM analysis_records WHERE analyzed_at >= ?",
            (week_ago,),
        ).fetchone()[0]
    return {
        "enabled": True,
        "total": int(total or 0),
        "total_7d": int(total_7d or 0),
        "average_overall": round(float(average), 1) if average is not None else None,
    }
