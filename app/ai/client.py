from __future__ import annotations

import asyncio
import logging
from typing import Any

from openai import APIConnectionError, APIStatusError, AsyncOpenAI

from app.core.config import settings

logger = logging.getLogger(__name__)


class AITextError(RuntimeError):
    def __init__(self, message: str, *, code: str = "provider_error"):
        super().__init__(message)
        self.code = code


def _is_model_loading(exc: APIStatusError) -> bool:
    if exc.status_code != 503:
        return False
    detail = f"{exc.message} {exc.body if exc.body is not None else ''}"
    return "loading" in detail.lower()


class AITextClient:
    """Chat-completions client for an OpenAI-compatible text provider.

    The SDK's own retries are switched off. A provider that is still loading
    the model (HTTP 503 mentioning "loading") gets exactly one retry after a
    fixed delay; any other failure is raised as ``AITextError``.
    """

    def __init__(
        self,
        *,
        model: str | None = None,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout_s: float | None = None,
        max_tokens: int | None = None,
        temperature: float | None = None,
        loading_retry_delay_s: float | None = None,
        client: Any | None = None,
    ) -> None:
        self._model = model or settings.ai_model
        self._max_tokens = max_tokens if max_tokens is not None else settings.ai_max_tokens
        self._temperature = temperature if temperature is not None else settings.ai_temperature
        self._retry_delay_s = (
            loading_retry_delay_s if loading_retry_delay_s is not None else settings.ai_loading_retry_delay_s
        )
        if client is not None:
            self._client = client
            return

        key = (api_key or settings.hf_api_key or "").strip()
        if not key:
            raise AITextError("AI text provider is not configured (HF_API_KEY is missing).", code="not_configured")
        self._client = AsyncOpenAI(
            api_key=key,
            base_url=base_url or settings.ai_base_url,
            timeout=timeout_s if timeout_s is not None else settings.ai_timeout_s,
            max_retries=0,
        )

    @property
    def model(self) -> str:
        return self._model

    async def _create(self, prompt: str) -> Any:
        return await self._client.chat.completions.create(
            model=self._model,
            messages=[{"role": "user", "content": prompt}],
            max_tokens=self._max_tokens,
            temperature=self._temperature,
        )

    async def complete(self, prompt: str) -> str:
        if not prompt or not prompt.strip():
            raise AITextError("Prompt is required.", code="empty_prompt")

        try:
            try:
                response = await self._create(prompt)
            except APIStatusError as exc:
                if not _is_model_loading(exc):
                    raise
                logger.info("ai_model_loading model=%s retry_in_s=%s", self._model, self._retry_delay_s)
                await asyncio.sleep(self._retry_delay_s)
                response = await self._create(prompt)
        except APIStatusError as exc:
            code = "model_loading" if _is_model_loading(exc) else "provider_error"
            logger.warning("ai_completion_failed model=%s status=%s", self._model, exc.status_code)
            raise AITextError(f"AI provider error ({exc.status_code}): {exc.message}", code=code) from exc
        except APIConnectionError as exc:
            logger.warning("ai_completion_unreachable model=%s: %s", self._model, exc)
            raise AITextError("AI provider could not be reached. Try again.", code="provider_error") from exc

        text = ""
        if getattr(response, "choices", None):
            message = getattr(response.choices[0], "message", None)
            text = (getattr(message, "content", None) or "").strip()
        if not text:
            raise AITextError("AI provider returned an empty response. Try again.", code="empty_response")
        return text
