# manasooth/data/assessments.py
# Question sets and published scoring bands for the three questionnaires.

WHO5 = "who5"
GAD7 = "gad7"
PHQ9 = "phq9"

ASSESSMENT_NAMES = {
    WHO5: "WHO-5 Well-being Index",
    GAD7: "GAD-7 Anxiety Assessment",
    PHQ9: "PHQ-9 Depression Screening",
}

# Default order when several assessments are taken in one sitting.
ASSESSMENT_FLOW = [WHO5, GAD7, PHQ9]

_WHO5_OPTIONS = [
    {"text": "At no time", "value": 0},
    {"text": "Some of the time", "value": 1},
    {"text": "Less than half of the time", "value": 2},
    {"text": "More than half of the time", "value": 3},
    {"text": "Most of the time", "value": 4},
    {"text": "All of the time", "value": 5},
]

_FREQUENCY_OPTIONS = [
    {"text": "Not at all", "value": 0},
    {"text": "Several days", "value": 1},
    {"text": "More than half the days", "value": 2},
    {"text": "Nearly every day", "value": 3},
]

_GAD7_STEMS = [
    "feeling nervous, anxious, or on edge",
    "not being able to stop or control worrying",
    "worrying too much about different things",
    "trouble relaxing",
    "being so restless that it is hard to sit still",
    "becoming easily annoyed or irritable",
    "feeling afraid as if something awful might happen",
]

_PHQ9_STEMS = [
    "little interest or pleasure in doing things",
    "feeling down, depressed, or hopeless",
    "trouble falling or staying asleep, or sleeping too much",
    "feeling tired or having little energy",
    "poor appetite or overeating",
    "feeling bad about yourself - or that you are a failure or have let yourself or your family down",
    "trouble concentrating on things, such as reading the newspaper or watching television",
    "moving or speaking so slowly that other people could have noticed? Or the opposite - "
    "being so fidgety or restless that you have been moving around a lot more than usual",
    "thoughts that you would be better off dead, or of hurting yourself in some way",
]


def _two_week_questions(prefix, stems):
    return [
        {
            "id": f"{prefix}_{i}",
            "text": f"Over the last 2 weeks, how often have you been bothered by {stem}?",
            "options": _FREQUENCY_OPTIONS,
        }
        for i, stem in enumerate(stems, start=1)
    ]


ASSESSMENTS = {
    WHO5: {
        "type": WHO5,
        "name": ASSESSMENT_NAMES[WHO5],
        "scoring_note": (
            "Each question is scored from 0 (Not present) to 5 (Constantly present). "
            "The raw score is multiplied by 4 to get the final score (0-100). "
            "A score below 50 suggests poor well-being."
        ),
        "multiplier": 4,
        "higher_is_better": True,
        "max_score": 100,
        "questions": [
            {"id": f"who5_{i}", "text": text, "options": _WHO5_OPTIONS}
            for i, text in enumerate([
                "Over the last two weeks, I have felt cheerful and in good spirits.",
                "Over the last two weeks, I have felt calm and relaxed.",
                "Over the last two weeks, I have felt active and vigorous.",
                "Over the last two weeks, I woke up feeling fresh and rested.",
                "Over the last two weeks, my daily life has been filled with things that interest me.",
            ], start=1)
        ],
        # (min, max, label), inclusive
        "interpretation": [
            (70, 100, "Excellent well-being"),
            (50, 69, "Moderate well-being"),
            (0, 49, "Poor well-being, consider seeking support"),
        ],
    },
    GAD7: {
        "type": GAD7,
        "name": ASSESSMENT_NAMES[GAD7],
        "scoring_note": (
            "Scores for each item range from 0 (Not at all) to 3 (Nearly every day). "
            "Total score ranges from 0 to 21."
        ),
        "multiplier": 1,
        "higher_is_better": False,
        "max_score": 21,
        "questions": _two_week_questions("gad7", _GAD7_STEMS),
        "interpretation": [
            (0, 4, "Minimal anxiety"),
            (5, 9, "Mild anxiety"),
            (10, 14, "Moderate anxiety"),
            (15, 21, "Severe anxiety"),
        ],
    },
    PHQ9: {
        "type": PHQ9,
        "name": ASSESSMENT_NAMES[PHQ9],
        "scoring_note": (
            "Scores for each item range from 0 (Not at all) to 3 (Nearly every day). "
            "Total score ranges from 0 to 27."
        ),
        "multiplier": 1,
        "higher_is_better": False,
        "max_score": 27,
        "questions": _two_week_questions("phq9", _PHQ9_STEMS),
        "interpretation": [
            (0, 4, "Minimal depression"),
            (5, 9, "Mild depression"),
            (10, 14, "Moderate depression"),
            (15, 19, "Moderately severe depression"),
            (20, 27, "Severe depression"),
        ],
    },
}
