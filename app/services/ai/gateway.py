import logging
from typing import Any, Dict, List

from langchain_core.language_models import BaseChatModel

from app.core.exceptions import LLMGenerationError
from app.core.prompt.prompts import SYSTEM_PROMPTS

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Failed to get AI response"


def upstream_error_message(exc: Exception) -> str:
    """
    Best human readable message for a failed completion call.

    OpenAI API errors carry the provider's error object in `body`
    (`{"message": ..., "type": ..., "code": ...}`); transport errors only
    have their text.
    """
    body = getattr(exc, "body", None)
    if isinstance(body, dict):
        message = body.get("message")
        if not message and isinstance(body.get("error"), dict):
            message = body["error"].get("message")
        if message:
            return str(message)
    return str(exc) or DEFAULT_ERROR_MESSAGE


class AIGateway:
    """
    Turns a teaching-assistant request into one chat-completion call:
    fixed system prompt for the purpose tag + the caller's content.
    """

    def __init__(self, llm: BaseChatModel):
        self.llm = llm

    @staticmethod
    def build_messages(purpose: str, user_content: str) -> List[Dict[str, Any]]:
        if purpose not in SYSTEM_PROMPTS:
            raise ValueError(f"Unknown prompt purpose: {purpose!r}")
        return [
            {"role": "system", "content": SYSTEM_PROMPTS[purpose]},
            {"role": "user", "content": user_content},
        ]

    async def ask(self, purpose: str, user_content: str) -> str:
        """Return the text of the first completion choice."""
        messages = self.build_messages(purpose, user_content)
        logger.info(f"AI request: purpose={purpose}, chars={len(user_content)}")

        try:
            result = await self.llm.ainvoke(messages)
        except Exception as e:
            logger.error(f"AI API Error ({purpose}): {e}")
            raise LLMGenerationError(upstream_error_message(e)) from e

        content = result.content
        if isinstance(content, list):
            # Content blocks: keep the text parts
            content = "".join(
                block.get("text", "") if isinstance(block, dict) else str(block)
                for block in content
            )
        return content
