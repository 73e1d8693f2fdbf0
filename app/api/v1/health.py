from fastapi import APIRouter

from app.core.config import settings

router = APIRouter()


@router.get("/health", summary="Health Check", description="Check the health status of the scoring API.")
async def health_check():
    return {
        "status": "healthy",
        "records_enabled": settings.analysis_records_enabled,
        "ai_configured": bool(settings.hf_api_key),
    }
