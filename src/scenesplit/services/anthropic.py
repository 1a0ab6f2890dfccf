"""Anthropic Claude API client wrapper."""

import logging
import time
from typing import Optional

from anthropic import Anthropic, APIError, APIConnectionError, RateLimitError

from ..config import config

logger = logging.getLogger(__name__)


class AnthropicClient:
    """Client wrapper for the Claude messages API.

    Rate-limit and connection errors are retried with exponential backoff;
    any other API error is raised immediately.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        max_retries: int = 3,
        retry_delay: float = 1.0,
    ) -> None:
        """Initialize the Anthropic client.

        Args:
            api_key: Anthropic API key. Defaults to ANTHROPIC_API_KEY env var.
            model: Model to use. Defaults to config.default_model.
            max_retries: Maximum number of attempts per request.
            retry_delay: Base delay between retries in seconds.

        Raises:
            ValueError: If no API key is available.
        """
        self._api_key = api_key or config.anthropic_api_key
        if not self._api_key:
            raise ValueError(
                "Anthropic API key not provided. Set ANTHROPIC_API_KEY env var."
            )

        self._client = Anthropic(api_key=self._api_key)
        self._model = model or config.default_model
        self._max_retries = max_retries
        self._retry_delay = retry_delay

    @property
    def model(self) -> str:
        """Return the model being used."""
        return self._model

    def create_message(
        self,
        prompt: str,
        max_tokens: int = 4096,
        system: Optional[str] = None,
        temperature: float = 0.3,
    ) -> str:
        """Send a single-turn prompt and return the response text.

        Raises:
            APIError: If the request fails after all retries.
        """
        kwargs = {
            "model": self._model,
            "max_tokens": max_tokens,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": temperature,
        }
        if system:
            kwargs["system"] = system

        response = self._send_with_retry(kwargs)

        text_blocks = [block.text for block in response.content if hasattr(block, "text")]
        if not text_blocks:
            raise ValueError("Claude response contained no text")
        return "".join(text_blocks)

    def _send_with_retry(self, kwargs: dict):
        for attempt in range(1, self._max_retries + 1):
            try:
                logger.debug(f"Sending request to Claude (attempt {attempt}/{self._max_retries})")
                return self._client.messages.create(**kwargs)

            except (RateLimitError, APIConnectionError) as e:
                if attempt == self._max_retries:
                    raise
                delay = self._retry_delay * (2 ** (attempt - 1))
                logger.warning(f"{type(e).__name__}: retrying in {delay:.1f}s...")
                time.sleep(delay)

            except APIError as e:
                logger.error(f"API error: {e}")
                raise
