"""Base agent abstraction."""

import logging
from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Optional

from ..services.base import TextGenerator

logger = logging.getLogger(__name__)

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


class BaseAgent(ABC, Generic[InputT, OutputT]):
    """Abstract base class for prompt-driven agents.

    Provides shared functionality for agents that call a text generator with a
    fixed system prompt. Subclasses must implement the `run` method and define
    their prompts.
    """

    def __init__(self, client: TextGenerator) -> None:
        """Initialize the agent.

        Args:
            client: Text generation capability used for every request.
        """
        self._client = client
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

    @abstractmethod
    def run(self, input_data: InputT) -> OutputT:
        """Execute the agent's main task.

        Args:
            input_data: Input data for the agent.

        Returns:
            Structured output from the agent.
        """
        ...

    def _create_message(self, prompt: str, temperature: Optional[float] = None) -> str:
        """Send a prompt with the agent's system prompt.

        Args:
            prompt: The user prompt to send.
            temperature: Sampling temperature. Provider default when None.

        Returns:
            The generated text.
        """
        self._logger.debug(f"Creating message with prompt length: {len(prompt)}")

        try:
            response = self._client.generate_text(
                system=self.system_prompt,
                prompt=prompt,
                temperature=temperature,
            )
        except Exception as e:
            self._logger.error(f"Error creating message: {e}")
            raise

        if isinstance(response, str):
            self._logger.debug(f"Received response of length: {len(response)}")
        return response
