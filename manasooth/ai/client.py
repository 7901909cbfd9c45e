# manasooth/ai/client.py
import json
import logging
import re
from functools import lru_cache
from typing import Optional

from openai import AsyncOpenAI, OpenAIError

from manasooth.config import settings

logger = logging.getLogger(__name__)

_JSON_BLOB = re.compile(r"\{[\s\S]+\}")


class AIServiceError(RuntimeError):
    """The hosted model could not produce a usable answer."""


def parse_json_reply(content: str) -> dict:
    # Models sometimes wrap the object in ```json fences or add chatter around it
    match = _JSON_BLOB.search(content or "")
    if not match:
        raise AIServiceError("Response not JSON-formatted")
    try:
        data = json.loads(match.group(0))
    except ValueError as e:
        raise AIServiceError(f"Response JSON could not be parsed: {e}") from e
    if not isinstance(data, dict):
        raise AIServiceError("Response JSON is not an object")
    return data


class LLMClient:
    def __init__(
        self,
        api_key: Optional[str],
        model: str,
        base_url: Optional[str] = None,
        temperature: float = 0.7,
        timeout: float = 30.0,
    ):
        self.model = model
        self.temperature = temperature
        self._client = (
            AsyncOpenAI(api_key=api_key, base_url=base_url, timeout=timeout, max_retries=0)
            if api_key else None
        )

    async def complete_json(self, system: str, prompt: str) -> dict:
        """Send one templated prompt and return the model's JSON object."""
        if self._client is None:
            raise AIServiceError("OPENAI_API_KEY is not configured")
        try:
            response = await self._client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": prompt},
                ],
                temperature=self.temperature,
                response_format={"type": "json_object"},
            )
        except OpenAIError as e:
            raise AIServiceError(str(e)) from e

        content = (response.choices[0].message.content or "").strip()
        logger.debug("Model response: %s", content)
        return parse_json_reply(content)


@lru_cache
def get_llm() -> LLMClient:
    return LLMClient(
        api_key=settings.OPENAI_API_KEY,
        model=settings.AI_MODEL,
        base_url=settings.OPENAI_BASE_URL,
        temperature=settings.AI_TEMPERATURE,
        timeout=settings.AI_TIMEOUT_SECONDS,
    )
