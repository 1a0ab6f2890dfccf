"""Base agent abstraction."""

import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar, Optional

from ..services.anthropic import AnthropicClient
from ..config import config

logger = logging.getLogger(__name__)

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


def extract_json(response: str) -> str:
    """Return the JSON payload of a response that may be wrapped in prose or code fences."""
    for fence in ("```json", "```"):
        start = response.find(fence)
        if start != -1:
            start += len(fence)
            end = response.find("```", start)
            if end > start:
                return response[start:end].strip()

    # First balanced object or array
    starts = [i for i in (response.find("{"), response.find("[")) if i != -1]
    if starts:
        start = min(starts)
        open_char = response[start]
        close_char = "}" if open_char == "{" else "]"
        depth = 0
        for i in range(start, len(response)):
            if response[i] == open_char:
                depth += 1
            elif response[i] == close_char:
                depth -= 1
                if depth == 0:
                    return response[start:i + 1]

    return response.strip()


class BaseAgent(ABC, Generic[InputT, OutputT]):
    """Abstract base class for Claude-backed agents.

    Subclasses implement `run` and provide a name and system prompt.
    """

    def __init__(
        self,
        client: Optional[AnthropicClient] = None,
        model: Optional[str] = None,
    ) -> None:
        """Initialize the agent.

        Args:
            client: AnthropicClient instance. Created if not provided.
            model: Model to use. Defaults to config.default_model.
        """
        self._model = model or config.default_model
        self._client = client or AnthropicClient(model=self._model)
        self._logger = logging.getLogger(f"{__name__}.{self.name}")

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the agent's name."""
        ...

    @property
    @abstractmethod
    def system_prompt(self) -> str:
        """Return the system prompt for this agent."""
        ...

    @property
    def model(self) -> str:
        """Return the model being used."""
        return self._model

    @abstractmethod
    def run(self, input_data: InputT) -> OutputT:
        """Execute the agent's main task."""
        ...

    def _create_message(
        self,
        prompt: str,
        max_tokens: int = 4096,
        temperature: float = 0.3,
    ) -> str:
        """Send `prompt` with the agent's system prompt."""
        self._logger.debug(f"Creating message with prompt length: {len(prompt)}")

        try:
            response = self._client.create_message(
                prompt=prompt,
                max_tokens=max_tokens,
                system=self.system_prompt,
                temperature=temperature,
            )
        except Exception as e:
            self._logger.error(f"Error creating message: {e}")
            raise

        self._logger.debug(f"Received response of length: {len(response)}")
        return response

    def _parse_json(self, response: str) -> Any:
        """Parse the JSON payload of a response.

        Raises:
            ValueError: If no valid JSON can be found.
        """
        try:
            return json.loads(extract_json(response))
        except json.JSONDecodeError as e:
            self._logger.error(f"Failed to parse JSON: {e}")
            self._logger.debug(f"Raw response: {response}")
            raise ValueError(f"Invalid JSON in response: {e}")
