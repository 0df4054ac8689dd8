from typing import Any, Dict, Optional
from fastapi import status

class BaseAPIException(Exception):
    """
    Parent class for every custom error raised by the application.
    Keeps the error format returned to the client uniform.
    """
    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)

# =========================================================
# 1. COMMON ERRORS
# =========================================================

class BadRequestException(BaseAPIException):
    """400: missing or invalid input"""
    def __init__(self, message: str = "Bad Request", details: dict = None):
        super().__init__(
            message=message,
            code="BAD_REQUEST",
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details
        )

class NotFoundException(BaseAPIException):
    """404: resource not found"""
    def __init__(self, message: str = "Resource not found"):
        super().__init__(
            message=message,
            code="NOT_FOUND",
            status_code=status.HTTP_404_NOT_FOUND
        )

# =========================================================
# 2. AI PROVIDER ERRORS
# =========================================================

class LLMGenerationError(BaseAPIException):
    """
    500: the chat-completion call failed
    (no credit, timeout, wrong API key, provider outage...).
    The provider's own message is surfaced when available.
    """
    def __init__(self, message: str = "Failed to get AI response", provider: str = "openai"):
        super().__init__(
            message=message,
            code="AI_REQUEST_FAILED",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details={"provider": provider}
        )
