import logging
from abc import ABC, abstractmethod
from typing import Optional

import openai
from openai import AsyncOpenAI

from travel_advisor.core.config import settings
from travel_advisor.core.errors import GenerationError, TransportError

logger = logging.getLogger(__name__)


class GenerationService(ABC):
    """
    A single request/response call to a text generation backend.
    Implementations return the raw JSON text of the reply, or None when the reply is empty.
    """

    @abstractmethod
    async def complete_json(self, system_prompt: str, user_prompt: str) -> Optional[str]:
        ...


class OpenAIGenerationService(GenerationService):
    """Chat completions in JSON mode."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        client: Optional[AsyncOpenAI] = None,
    ):
        self.model = model or settings.OPENAI_MODEL
        self.temperature = temperature if temperature is not None else settings.OPENAI_TEMPERATURE
        self._api_key = api_key or settings.OPENAI_API_KEY
        self._client = client

    @property
    def client(self) -> AsyncOpenAI:
        # Built on first use: AsyncOpenAI refuses to start without a key
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self._api_key)
        return self._client

    async def complete_json(self, system_prompt: str, user_prompt: str) -> Optional[str]:
        kwargs = {}
        if self.temperature is not None:
            kwargs["temperature"] = self.temperature
        try:
            completion = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                response_format={"type": "json_object"},
                **kwargs,
            )
        except (openai.APIConnectionError, openai.APITimeoutError) as e:
            logger.error("Could not reach the generation service: %s", e)
            raise TransportError("Generation service unreachable") from e
        except openai.OpenAIError as e:
            logger.error("Generation service rejected the request: %s", e)
            raise GenerationError("Generation service request failed") from e

        if not completion.choices:
            return None
        return completion.choices[0].message.content
