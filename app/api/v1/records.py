from fastapi import APIRouter, Depends, Header, Query

from app.analytics import records as records_db
from app.core.security import check_api_key
from app.schemas.scoring import AnalysisRecord

router = APIRouter()


def _auth(x_api_key: str | None = Header(default=None, alias="X-API-Key")):
    check_api_key(x_api_key)


@router.get("/records/summary")
def summary(_: None = Depends(_auth)):
    return records_db.get_summary()


@router.get("/records/latest", response_model=list[AnalysisRecord])
def latest(
    limit: int = Query(default=20, ge=1, le=200),
    _: None = Depends(_auth),
):
    return records_db.get_latest(limit=limit)
