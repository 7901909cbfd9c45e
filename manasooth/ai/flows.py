"""Prompt-backed flows.

Each flow builds a prompt, sends it to the hosted model and validates the
JSON answer. Failures surface as ``AIServiceError``; callers decide on the
fallback text.
"""
import logging
import random
import string
import time

from pydantic import ValidationError

from manasooth.ai.client import AIServiceError, LLMClient
from manasooth.ai.prompts import JSON_SYSTEM, build_analyze_prompt, build_chatbot_prompt
from manasooth.config import settings
from manasooth.schemas.ai import (
    AnalyzeAssessmentInput, AnalyzeAssessmentOutput,
    ChatbotInput, ChatbotOutput,
    BookConsultationInput, BookConsultationOutput,
)

logger = logging.getLogger(__name__)

BOOKING_SUCCESS_RATE = 0.9
_BASE36 = string.digits + string.ascii_uppercase


async def analyze_assessment(llm: LLMClient, data: AnalyzeAssessmentInput) -> AnalyzeAssessmentOutput:
    prompt = build_analyze_prompt(data.model_dump())
    reply = await llm.complete_json(JSON_SYSTEM, prompt)
    try:
        return AnalyzeAssessmentOutput.model_validate(reply)
    except ValidationError as e:
        raise AIServiceError(f"Unexpected analysis format: {e}") from e


async def chat_reply(llm: LLMClient, data: ChatbotInput) -> ChatbotOutput:
    payload = data.model_dump()
    history = payload.pop("history")
    limit = settings.CHAT_HISTORY_LIMIT
    payload["chat_history"] = history[-limit:] if limit > 0 else []
    reply = await llm.complete_json(JSON_SYSTEM, build_chatbot_prompt(payload))
    try:
        output = ChatbotOutput.model_validate(reply)
    except ValidationError as e:
        raise AIServiceError(f"Unexpected chatbot format: {e}") from e
    if not output.response.strip():
        raise AIServiceError("Empty chatbot response")
    return output


def _base36(number: int) -> str:
    digits = ""
    while number:
        number, rem = divmod(number, 36)
        digits = _BASE36[rem] + digits
    return digits or "0"


def make_booking_id() -> str:
    suffix = "".join(random.choices(_BASE36, k=5))
    return f"MANA-{_base36(int(time.time() * 1000))}-{suffix}"


async def book_consultation(data: BookConsultationInput) -> BookConsultationOutput:
    """Simulated booking; no calendar behind it."""
    logger.info(
        "Attempting to book consultation for %s on %s at %s",
        data.user_name or "Anonymous User", data.date, data.time,
    )
    if random.random() >= BOOKING_SUCCESS_RATE:
        return BookConsultationOutput(
            success=False,
            message=(
                "Sorry, we were unable to book the consultation at this time due to high demand. "
                "Please try selecting a different slot or try again later."
            ),
        )

    booking_id = make_booking_id()
    return BookConsultationOutput(
        success=True,
        message=(
            f"Consultation successfully booked for {data.date} at {data.time}. "
            f"Your Booking ID is {booking_id}. Please check your email for confirmation (simulated)."
        ),
        booking_id=booking_id,
    )
