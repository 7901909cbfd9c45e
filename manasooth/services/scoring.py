from typing import Dict, Optional
from manasooth.data.assessments import ASSESSMENTS, WHO5, GAD7, PHQ9


class UnknownAssessmentError(ValueError):
    pass


class InvalidAnswersError(ValueError):
    pass


def get_assessment(assessment_type: str) -> dict:
    try:
        return ASSESSMENTS[assessment_type]
    except KeyError:
        raise UnknownAssessmentError(f"Invalid assessment type: {assessment_type}")


def higher_is_better(assessment_type: str) -> bool:
    """Only WHO-5 improves upward; GAD-7 and PHQ-9 improve as the score falls."""
    return get_assessment(assessment_type)["higher_is_better"]


def score_answers(assessment_type: str, answers: Dict[str, int]) -> int:
    """Sum of the selected option values, times the assessment multiplier.

    Every question must be answered with one of its own option values.
    """
    assessment = get_assessment(assessment_type)
    questions = {q["id"]: q for q in assessment["questions"]}

    unknown = set(answers) - set(questions)
    if unknown:
        raise InvalidAnswersError(f"Unknown question ids: {', '.join(sorted(unknown))}")
    missing = [qid for qid in questions if qid not in answers]
    if missing:
        raise InvalidAnswersError(f"Please answer every question. Missing: {', '.join(missing)}")

    total = 0
    for qid, value in answers.items():
        allowed = {opt["value"] for opt in questions[qid]["options"]}
        if value not in allowed:
            raise InvalidAnswersError(f"Invalid option {value} for question {qid}")
        total += value
    return total * assessment["multiplier"]


def interpret_score(assessment_type: str, score: Optional[int]) -> str:
    if score is None:
        return "Not taken"
    bands = get_assessment(assessment_type).get("interpretation")
    if not bands:
        return f"Score: {score}"
    for low, high, label in bands:
        if low <= score <= high:
            return f"{label} (Score: {score})"
    return f"Score: {score}"


def requires_consultation(
    who5: Optional[int], gad7: Optional[int], phq9: Optional[int]
) -> bool:
    """Moderate-or-worse depression or anxiety, or poor well-being."""
    if phq9 is not None and phq9 >= 10:
        return True
    if gad7 is not None and gad7 >= 10:
        return True
    if who5 is not None and who5 < 50:
        return True
    return False


def interpretations(scores: dict) -> Dict[str, str]:
    return {t: interpret_score(t, scores.get(t)) for t in (WHO5, GAD7, PHQ9)}
