"""
OpenAI-compatible text generation via langchain-openai.
The chat model is built on first use, so a missing API key only matters to
requests that actually ask for an AI-written message.
"""
import logging

from langchain_core.messages import HumanMessage
from langchain_openai import ChatOpenAI
from ia_console.config import settings

logger = logging.getLogger(__name__)


class OpenAITextGenerator:
    def __init__(
        self,
        model: str,
        api_key: str | None = None,
        base_url: str | None = None,
        max_tokens: int = 512,
        timeout: float | None = None,
    ):
        self.model = model
        self.api_key = api_key
        self.base_url = base_url
        self.max_tokens = max_tokens
        self.timeout = timeout
        self._llm: ChatOpenAI | None = None

    def _chat_model(self) -> ChatOpenAI:
        if self._llm is None:
            self._llm = ChatOpenAI(
                model=self.model,
                api_key=self.api_key,
                base_url=self.base_url,
                max_tokens=self.max_tokens,
                timeout=self.timeout,
                max_retries=0,  # one attempt; failures surface to the caller
            )
        return self._llm

    def __call__(self, prompt: str) -> str | None:
        response = self._chat_model().invoke([HumanMessage(content=prompt)])
        content = response.content
        if isinstance(content, list):
            # Content blocks: keep the text parts only
            content = "".join(
                part if isinstance(part, str) else part.get("text", "")
                for part in content
            )
        logger.debug("Text generation (%s) returned %d chars", self.model, len(content or ""))
        return content or None


_default_generator: OpenAITextGenerator | None = None


def get_text_generator() -> OpenAITextGenerator:
    """FastAPI dependency — process-wide generator built from settings."""
    global _default_generator
    if _default_generator is None:
        _default_generator = OpenAITextGenerator(
            model=settings.ai_model,
            api_key=settings.openai_api_key,
            base_url=settings.openai_base_url,
            max_tokens=settings.ai_max_tokens,
            timeout=settings.ai_timeout_seconds,
        )
    return _default_generator
