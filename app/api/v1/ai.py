from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException, Request, status

from app.ai import service as ai_service
from app.ai.client import AITextClient, AITextError
from app.core.config import settings
from app.core.rate_limit import rate_limit
from app.schemas.api import (
    BulletsRequest,
    BulletsResponse,
    CoverLetterRequest,
    ResumeRequest,
    TextRequest,
    TextResponse,
)
from app.schemas.resume import ResumeDocument

router = APIRouter()


@lru_cache(maxsize=1)
def _default_client() -> AITextClient:
    return AITextClient()


def get_ai_client() -> AITextClient:
    try:
        return _default_client()
    except AITextError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc


def _raise_ai_http_error(exc: AITextError) -> None:
    raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc


@router.post("/ai/summary", response_model=TextResponse)
@rate_limit(settings.ai_rate_limit)
async def ai_summary(request: Request, payload: ResumeRequest, client: AITextClient = Depends(get_ai_client)):
    _ = request
    try:
        return TextResponse(text=await ai_service.generate_summary(client, payload.resume))
    except AITextError as exc:
        _raise_ai_http_error(exc)


@router.post("/ai/bullets", response_model=BulletsResponse)
@rate_limit(settings.ai_rate_limit)
async def ai_bullets(request: Request, payload: BulletsRequest, client: AITextClient = Depends(get_ai_client)):
    _ = request
    try:
        bullets = await ai_service.generate_bullet_points(client, payload.position, payload.company, payload.bullets)
        return BulletsResponse(bullets=bullets)
    except AITextError as exc:
        _raise_ai_http_error(exc)


@router.post("/ai/cover-letter", response_model=TextResponse)
@rate_limit(settings.ai_rate_limit)
async def ai_cover_letter(
    request: Request,
    payload: CoverLetterRequest,
    client: AITextClient = Depends(get_ai_client),
):
    _ = request
    try:
        letter = await ai_service.generate_cover_letter(client, payload.resume, payload.job_description)
        return TextResponse(text=letter)
    except AITextError as exc:
        _raise_ai_http_error(exc)


@router.post("/ai/improve", response_model=TextResponse)
@rate_limit(settings.ai_rate_limit)
async def ai_improve(request: Request, payload: TextRequest, client: AITextClient = Depends(get_ai_client)):
    _ = request
    try:
        return TextResponse(text=await ai_service.improve_text(client, payload.text))
    except AITextError as exc:
        _raise_ai_http_error(exc)


@router.post("/ai/quantify", response_model=TextResponse)
@rate_limit(settings.ai_rate_limit)
async def ai_quantify(request: Request, payload: TextRequest, client: AITextClient = Depends(get_ai_client)):
    _ = request
    try:
        return TextResponse(text=await ai_service.quantify_achievement(client, payload.text))
    except AITextError as exc:
        _raise_ai_http_error(exc)


@router.post("/ai/parse", response_model=ResumeDocument)
@rate_limit(settings.ai_rate_limit)
async def ai_parse(request: Request, payload: TextRequest, client: AITextClient = Depends(get_ai_client)):
    _ = request
    try:
        return await ai_service.parse_resume_text(client, payload.text)
    except AITextError as exc:
        _raise_ai_http_error(exc)
