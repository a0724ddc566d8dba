"""
AI Assistant Routes

GET /assistant/greeting - Opening message of the chat widget
POST /assistant/chat - Send a message with the conversation so far
"""

from fastapi import APIRouter, Depends

from jobportal.schemas.schemas import AiTextResponse, ChatRequest
from jobportal.services.ai_client import ASSISTANT_GREETING, AssistantClient, get_assistant_client

router = APIRouter(prefix="/assistant", tags=["AI Assistant"])


@router.get("/greeting", response_model=AiTextResponse)
async def greeting():
    return AiTextResponse(text=ASSISTANT_GREETING)


@router.post("/chat", response_model=AiTextResponse)
async def chat(request: ChatRequest, ai: AssistantClient = Depends(get_assistant_client)):
    """
    Career assistant chat.

    The client keeps the conversation; send earlier turns in `history`
    (roles "user" and "model"). Errors come back as a friendly reply,
    never as an HTTP error.
    """
    return AiTextResponse(text=ai.chat_with_assistant(request.message, request.history))
