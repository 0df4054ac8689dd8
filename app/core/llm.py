import logging

from langchain_openai import ChatOpenAI
from app.core.config import Settings

logger = logging.getLogger(__name__)


def build_llm(settings: Settings) -> ChatOpenAI:
    """Chat model used by the AI gateway, configured from settings."""
    if not settings.OPENAI_API_KEY:
        logger.warning("OPENAI_API_KEY is not set, AI requests will be rejected by the provider")

    return ChatOpenAI(
        model=settings.OPENAI_MODEL,
        temperature=settings.LLM_TEMPERATURE,
        max_tokens=settings.LLM_MAX_TOKENS,
        max_retries=0,
        base_url=settings.OPENAI_BASE_URL,
        # The OpenAI client refuses to start without a key
        api_key=settings.OPENAI_API_KEY or "not-configured",
    )
