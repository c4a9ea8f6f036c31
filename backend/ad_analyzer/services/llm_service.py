"""
Thin wrapper around the OpenAI chat completions API.
Used by the ad review step; one request per call, no retries, no streaming.
"""

import logging
from typing import Dict, Optional

import httpx
from openai import OpenAI

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o-mini"


class LLMService:
    """Executes a system + user prompt pair against an OpenAI chat model."""

    def __init__(
        self,
        openai_api_key: Optional[str] = None,
        model: str = DEFAULT_MODEL,
        timeout_seconds: float = 60.0,
        temperature: Optional[float] = 0.7,
    ):
        self.openai_api_key = (openai_api_key or "").strip() or None
        self.model = model or DEFAULT_MODEL
        self.timeout_seconds = timeout_seconds
        self.temperature = temperature
        self._client: Optional[OpenAI] = None

    def is_configured(self) -> bool:
        """Return True when an API key is available."""
        return bool(self.openai_api_key)

    def _get_client(self) -> OpenAI:
        if self._client is None:
            self._client = OpenAI(
                api_key=self.openai_api_key,
                http_client=httpx.Client(timeout=self.timeout_seconds),
                max_retries=0,
            )
        return self._client

    def execute_prompt(
        self,
        system_message: str,
        user_message: str,
        model: Optional[str] = None,
    ) -> Dict:
        """
        Execute a prompt with system and user messages.

        Args:
            system_message: The system prompt message
            user_message: The user input message
            model: Optional model override (defaults to the configured model)

        Returns:
            Dict with content, tokens_used, and model

        Raises:
            RuntimeError: When no API key is configured or the request fails
        """
        if not self.is_configured():
            raise RuntimeError("OpenAI service is not configured. Set OPENAI_API_KEY.")

        model_to_use = model or self.model
        request_params = {
            "model": model_to_use,
            "messages": [
                {
                    "role": "system",
                    "content": system_message
                },
                {
                    "role": "user",
                    "content": user_message
                }
            ]
        }
        if self.temperature is not None:
            request_params["temperature"] = self.temperature

        logger.info(f"Executing prompt with OpenAI model: {model_to_use}")
        try:
            response = self._get_client().chat.completions.create(**request_params)
        except Exception as e:
            logger.error(f"Failed to execute prompt with OpenAI: {e}")
            raise RuntimeError(f"Failed to execute prompt: {str(e)}") from e

        content = ""
        if response.choices:
            content = response.choices[0].message.content or ""
        tokens_used = response.usage.total_tokens if response.usage else None

        return {
            "content": content,
            "tokens_used": tokens_used,
            "model": model_to_use
        }
