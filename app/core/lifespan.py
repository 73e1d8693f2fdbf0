import asyncio
import contextlib
import logging
from contextlib import asynccontextmanager

from app.analytics.records import init_db, purge_old_records

logger = logging.getLogger(__name__)

PURGE_INTERVAL_S = 3600


async def _purge_until(stop_event: asyncio.Event) -> None:
    while not stop_event.is_set():
        try:
            deleted = purge_old_records()
        except Exception as exc:  # pragma: no cover - sqlite failures only
            logger.warning("analysis_records_purge_failed: %s", exc)
        else:
            if deleted:
                logger.info("analysis_records_purge deleted=%s", deleted)
        with contextlib.suppress(asyncio.TimeoutError):
            await asyncio.wait_for(stop_event.wait(), timeout=PURGE_INTERVAL_S)


@asynccontextmanager
async def lifespan(app):
    init_db()
    stop_event = asyncio.Event()
    purge_task = asyncio.create_task(_purge_until(stop_event))
    try:
        yield
    finally:
        stop_event.set()
        purge_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await purge_task
