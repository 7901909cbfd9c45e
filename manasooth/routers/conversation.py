from fastapi import APIRouter, Depends

from manasooth.schemas.conversation import ConversationMessage, ConversationReply
from manasooth.services.conversation import (
    GREETING, QUESTION, ConversationSession, handle_message, start_session
)
from manasooth.services.storage import LocalStore, get_store

router = APIRouter(prefix="/assessments/conversation", tags=["conversation"])


def _reply(text: str, session: ConversationSession) -> ConversationReply:
    return ConversationReply(
        reply=text,
        stage=session.stage,
        assessment_type=session.assessment_type,
        question_index=session.question_index if session.stage == QUESTION else None,
        score=session.score,
    )


@router.post("/start", response_model=ConversationReply)
async def start_conversation(store: LocalStore = Depends(get_store)):
    session = start_session(store.client_id)
    return _reply(GREETING, session)


@router.post("/message", response_model=ConversationReply)
async def send_conversation_message(
    message_in: ConversationMessage, store: LocalStore = Depends(get_store)
):
    text, session = await handle_message(store, message_in.text)
    return _reply(text, session)
