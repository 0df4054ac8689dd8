from fastapi import APIRouter, Depends

from app.api.deps import get_ai_gateway
from app.core.exceptions import BadRequestException
from app.schemas.chat import ChatRequest, ChatResponse
from app.services.ai.gateway import AIGateway

router = APIRouter()


@router.post("/general", response_model=ChatResponse, summary="General Q&A with the assistant")
async def chat_general(body: ChatRequest, gateway: AIGateway = Depends(get_ai_gateway)):
    if not body.message:
        raise BadRequestException("Message is required")

    response = await gateway.ask("general", body.message)
    return ChatResponse(response=response)
