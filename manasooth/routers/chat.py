# manasooth/routers/chat.py
import logging
from fastapi import APIRouter, Depends

from manasooth.ai.client import AIServiceError, LLMClient, get_llm
from manasooth.ai.flows import chat_reply
from manasooth.schemas.ai import ChatbotInput, ChatbotOutput

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])

FALLBACK_REPLY = "I'm having a little trouble connecting right now. Please try again in a moment."


@router.post("", response_model=ChatbotOutput)
async def send_chat_message(message_in: ChatbotInput, llm: LLMClient = Depends(get_llm)):
    """
    Supportive reply to the user's message.
    History is optional and trimmed to the most recent messages.
    """
    try:
        return await chat_reply(llm, message_in)
    except AIServiceError as e:
        logger.error("Chatbot error: %s", e, exc_info=True)
        return ChatbotOutput(response=FALLBACK_REPLY)
