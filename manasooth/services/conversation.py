"""Chat-style walk through one questionnaire.

Three stages, always in order: choose an assessment, answer its questions one
by one, done. Sessions live in process memory only; a restart forgets them.
"""
import logging
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from manasooth.config import settings
from manasooth.data.assessments import ASSESSMENTS, ASSESSMENT_NAMES, WHO5, GAD7, PHQ9
from manasooth.services.assessment import record_score
from manasooth.services.storage import LocalStore

logger = logging.getLogger(__name__)

AWAITING_CHOICE = "awaiting_assessment_choice"
QUESTION = "assessment_question"
CONCLUSION = "conclusion"

ASSESSMENT_CHOICES = {
    "who-5": WHO5, "who5": WHO5, "wellbeing": WHO5,
    "gad-7": GAD7, "gad7": GAD7, "anxiety": GAD7,
    "phq-9": PHQ9, "phq9": PHQ9, "depression": PHQ9,
}

GREETING = (
    "Hello! I'm Manasooth's assessment assistant. I can guide you through one of the "
    "following questionnaires:\n\n"
    "- WHO-5 Well-being Index\n"
    "- GAD-7 Anxiety Assessment\n"
    "- PHQ-9 Depression Screening\n\n"
    "Which one would you like to take today? Please type its name "
    "(e.g., 'WHO-5', 'Anxiety', or 'PHQ-9')."
)
UNRECOGNIZED_CHOICE = (
    "I'm sorry, I didn't recognize that assessment. Please choose from WHO-5, GAD-7, "
    "or PHQ-9. For example, type 'GAD-7'."
)
ALREADY_DONE = (
    "You've already completed this assessment session. If you'd like to take another "
    "assessment, you can start a new session from the assessment page."
)


@dataclass
class ConversationSession:
    stage: str = AWAITING_CHOICE
    assessment_type: Optional[str] = None
    question_index: int = 0
    answers: List[int] = field(default_factory=list)
    score: Optional[int] = None


# client_id -> session, least recently used first
_sessions: "OrderedDict[str, ConversationSession]" = OrderedDict()


def format_question(question: dict) -> str:
    options = "\n".join(f"{opt['value']}: {opt['text']}" for opt in question["options"])
    return f"{question['text']}\n\nOptions (reply with the number corresponding to your choice):\n{options}"


def start_session(client_id: str) -> ConversationSession:
    session = ConversationSession()
    _sessions[client_id] = session
    _sessions.move_to_end(client_id)
    while len(_sessions) > settings.CONVERSATION_SESSION_LIMIT:
        evicted, _ = _sessions.popitem(last=False)
        logger.info("Evicted conversation session for client %s", evicted)
    return session


def get_session(client_id: str) -> ConversationSession:
    session = _sessions.get(client_id)
    if session is None:
        return start_session(client_id)
    _sessions.move_to_end(client_id)
    return session


def _parse_option(text: str) -> Optional[int]:
    try:
        return int(text.strip())
    except ValueError:
        return None


def _choose(session: ConversationSession, text: str) -> str:
    key = "".join(text.lower().split())
    chosen = ASSESSMENT_CHOICES.get(key)
    if not chosen:
        return UNRECOGNIZED_CHOICE

    questions = ASSESSMENTS[chosen]["questions"]
    session.stage = QUESTION
    session.assessment_type = chosen
    session.question_index = 0
    session.answers = []
    return (
        f"Great! Let's start with the {ASSESSMENT_NAMES[chosen]}. It has {len(questions)} questions."
        f"\n\nQuestion 1: {format_question(questions[0])}"
    )


async def _answer(session: ConversationSession, store: LocalStore, text: str) -> str:
    assessment = ASSESSMENTS[session.assessment_type]
    questions = assessment["questions"]
    question = questions[session.question_index]

    value = _parse_option(text)
    if value is None or value not in {opt["value"] for opt in question["options"]}:
        return (
            "I'm sorry, I didn't quite catch that. Please select one of the numbered options "
            f"for the question. Let's try again:\n\nQuestion {session.question_index + 1}: "
            f"{format_question(question)}"
        )

    session.answers.append(value)
    session.question_index += 1
    name = ASSESSMENT_NAMES[session.assessment_type]

    if session.question_index < len(questions):
        return (
            f"Okay. Question {session.question_index + 1} for {name}:\n"
            f"{format_question(questions[session.question_index])}"
        )

    session.score = sum(session.answers) * assessment["multiplier"]
    session.stage = CONCLUSION
    await record_score(store, session.assessment_type, session.score)
    logger.info("Conversational %s finished for client %s with score %s",
                session.assessment_type, store.client_id, session.score)
    return (
        f"Excellent! You've completed the {name}. Your score is {session.score}. "
        "You can view your results and AI insights on the results page. Thank you for your time!"
    )


async def handle_message(store: LocalStore, text: str) -> Tuple[str, ConversationSession]:
    """Advance the client's session by one user message."""
    session = get_session(store.client_id)
    if session.stage == AWAITING_CHOICE:
        reply = _choose(session, text)
    elif session.stage == QUESTION:
        reply = await _answer(session, store, text)
    else:
        reply = ALREADY_DONE
    return reply, session
