import logging

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from app.api.v1.ai import router as ai_router
from app.api.v1.analysis import router as analysis_router
from app.api.v1.health import router as health_router
from app.api.v1.records import router as records_router
from app.core.config import settings
from app.core.lifespan import lifespan
from app.core.rate_limit import limiter

logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s %(message)s")
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    if settings.sentry_dsn:
        sentry_sdk.init(dsn=settings.sentry_dsn)

    api = FastAPI(title="Resume Score Engine API", version="0.1.0", lifespan=lifespan)
    api.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allowed_origins),
        allow_origin_regex=settings.cors_allow_origin_regex,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    # slowapi reads the limiter from app.state
    api.state.limiter = limiter
    api.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    api.add_middleware(SlowAPIMiddleware)

    for router, tag in (
        (health_router, "Health"),
        (analysis_router, "Analysis"),
        (records_router, "Records"),
        (ai_router, "AI"),
    ):
        api.include_router(router, prefix="/v1", tags=[tag])

    logger.info(
        "app_started records_enabled=%s ai_configured=%s rate_limit=%s",
        settings.analysis_records_enabled,
        bool(settings.hf_api_key),
        settings.rate_limit if settings.rate_limit_enabled else "off",
    )
    return api


app = create_app()
