"""Client for an OpenAI-compatible chat-completions endpoint."""
from __future__ import annotations
import logging
import time
from typing import Any

import httpx

from product_copy.common.config import ProviderSettings
from product_copy.common.schema import ProviderReply

LOGGER = logging.getLogger("productcopy.provider")

class ProviderCallFailed(Exception):
    """Raised for any failure of a provider call (network, auth, quota, malformed reply)."""

class ChatProvider:
    def __init__(self, settings: ProviderSettings) -> None:
        self.settings = settings

    def _payload(self, prompt: str) -> dict[str, Any]:
        return {
            "model": self.settings.model_id,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": self.settings.temperature,
            "max_tokens": self.settings.max_tokens,
            "stream": False,
        }

    def complete(self, prompt: str) -> ProviderReply:
        """
        Send one prompt and return the reply with usage metadata.

        Raises:
            ProviderCallFailed: on transport errors, non-2xx status, or a
                reply without message content.
        """
        url = self.settings.endpoint
        headers = {"Authorization": f"Bearer {self.settings.api_key}"}

        start = time.perf_counter()
        try:
            with httpx.Client(timeout=self.settings.timeout_s) as client:
                r = client.post(url, headers=headers, json=self._payload(prompt))
                r.raise_for_status()
                data = r.json()
        except Exception as e:
            raise ProviderCallFailed(f"Provider request failed: {e}") from e

        latency = int((time.perf_counter() - start) * 1000)
        try:
            content = data["choices"][0]["message"]["content"]
            usage = data.get("usage") or {}
        except Exception as e:
            raise ProviderCallFailed(f"Malformed provider response: {e}") from e
        if not isinstance(content, str) or not content.strip():
            raise ProviderCallFailed("Provider returned empty content")

        return ProviderReply(
            text=content.strip(),
            prompt_tokens=usage.get("prompt_tokens"),
            completion_tokens=usage.get("completion_tokens"),
            latency_ms=latency,
        )

    def generate(self, prompt: str) -> str:
        reply = self.complete(prompt)
        LOGGER.info(
            "Provider reply in %sms | in=%s out=%s",
            reply.latency_ms,
            reply.prompt_tokens,
            reply.completion_tokens,
        )
        return reply.text
