from typing import Protocol

import httpx
from loguru import logger

from app.core.base_client import BaseClient
from app.core.config import settings
from app.core.exceptions import ModelQueryError
from app.core.security import redact_secret
from app.models.completion import ChatCompletion, ProviderError, classify_completion


class ModelQueryClient(Protocol):
    async def query(self, prompt: str, temperature: float = 0.7, system_prompt: str = "") -> str: ...


class OpenRouterClient(BaseClient):
    """
    Chat-completion client for one model on an OpenRouter-compatible API.

    Each call is a single stateless request: no conversation history, no retries.
    """

    def __init__(
        self,
        api_key: str | None,
        model: str,
        base_url: str = settings.OPENROUTER_BASE_URL,
        timeout: float = settings.OPENROUTER_TIMEOUT_SECONDS,
        max_tokens: int = settings.OPENROUTER_MAX_TOKENS,
    ):
        headers = {
            "Content-Type": "application/json",
            "HTTP-Referer": settings.HOST_NAME,
            "X-Title": settings.APP_TITLE,
        }
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"
        super().__init__(base_url=base_url, timeout=timeout, headers=headers)
        self.api_key = api_key
        self.model = model
        self.max_tokens = max_tokens
        logger.info(f"OpenRouterClient initialized for model {model} (key {redact_secret(api_key)})")

    async def query(
        self, prompt: str, temperature: float = settings.DEFAULT_TEMPERATURE, system_prompt: str = ""
    ) -> str:
        if not self.api_key:
            raise ModelQueryError("OpenRouter API key is not configured")

        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        payload = {
            "model": self.model,
            "messages": messages,
            "temperature": temperature,
            "max_tokens": self.max_tokens,
        }
        try:
            body = await self.post("/chat/completions", json=payload)
        except httpx.HTTPStatusError as e:
            raise ModelQueryError(f"OpenRouter API error: {e.response.status_code} - {e.response.text[:200]}") from e
        except (httpx.HTTPError, ValueError) as e:
            raise ModelQueryError(f"OpenRouter request failed: {e!r}") from e

        completion = classify_completion(body)
        if isinstance(completion, ChatCompletion) and completion.content:
            return completion.content
        if isinstance(completion, ProviderError):
            raise ModelQueryError(f"OpenRouter provider error ({completion.code}): {completion.message}")
        raise ModelQueryError(f"Unrecognized completion payload: {str(body)[:200]}")
