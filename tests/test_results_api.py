from manasooth.ai.client import AIServiceError
from manasooth.services.storage import StorageKeys
from conftest import answers_for


def analysis_reply(consult=False):
    return {
        "feedback": "You are doing well overall.",
        "recommendations": "Keep a regular sleep schedule.",
        "requiresConsultation": consult,
    }


async def test_analyze_without_scores_is_404(client):
    response = await client.post("/results/analyze", json={})
    assert response.status_code == 404


async def test_analyze_saves_history(client, llm):
    llm.replies.append(analysis_reply())
    await client.post("/assessments/who5/submit", json={"answers": answers_for("who5", 4)})

    response = await client.post("/results/analyze", json={
        "user_context": "Busy month at work",
        "preferred_recommendation_types": ["Mindfulness"],
    })
    assert response.status_code == 200
    data = response.json()
    assert data["who5_score"] == 80
    assert data["gad7_score"] == 0
    assert data["interpretations"]["who5"] == "Excellent well-being (Score: 80)"
    assert data["interpretations"]["gad7"] == "Not taken"
    assert data["feedback"] == "You are doing well overall."
    assert data["requires_consultation"] is False
    assert data["saved"] is True

    assert "Busy month at work" in llm.prompts[0]
    assert "Mindfulness" in llm.prompts[0]

    progress = (await client.get("/progress")).json()
    assert len(progress["history"]) == 1
    assert progress["history"][0]["ai_recommendations"] == "Keep a regular sleep schedule."


async def test_threshold_rule_forces_consultation(client, llm):
    llm.replies.append(analysis_reply(consult=False))
    await client.post("/assessments/phq9/submit", json={"answers": answers_for("phq9", 2)})

    data = (await client.post("/results/analyze", json={})).json()
    assert data["phq9_score"] == 18
    assert data["requires_consultation"] is True


async def test_ai_failure_falls_back_and_does_not_save(client, llm):
    llm.error = AIServiceError("model unavailable")
    await client.post("/assessments/gad7/submit", json={"answers": answers_for("gad7", 0)})

    response = await client.post("/results/analyze", json={})
    assert response.status_code == 200
    data = response.json()
    assert data["feedback"] == "Could not load AI feedback."
    assert data["recommendations"] == "Could not load AI recommendations."
    assert data["requires_consultation"] is False
    assert data["saved"] is False
    assert data["notices"] == ["Could not retrieve AI insights. Please try again later."]

    progress = (await client.get("/progress")).json()
    assert progress["history"] == []


async def test_malformed_ai_reply_falls_back(client, llm):
    llm.replies.append({"feedback": "only half an answer"})
    await client.post("/assessments/gad7/submit", json={"answers": answers_for("gad7", 0)})

    data = (await client.post("/results/analyze", json={})).json()
    assert data["saved"] is False


async def test_active_goals_reach_the_prompt(client, llm):
    await client.post("/goals", json={
        "assessment_type": "gad7", "goal_definition_type": "reach_specific_score", "target_value": 5,
    })
    llm.replies.append(analysis_reply())
    await client.post("/assessments/gad7/submit", json={"answers": answers_for("gad7", 0)})
    await client.post("/results/analyze", json={})

    assert "Reach a score of 5 for GAD-7 Anxiety Assessment." in llm.prompts[0]


async def test_report_from_scores_only(client):
    await client.post("/assessments/gad7/submit", json={"answers": answers_for("gad7", 1)})

    data = (await client.get("/results/report")).json()
    assert data["gad7_score"] == 7
    assert data["interpretations"]["gad7"] == "Mild anxiety (Score: 7)"
    assert data["ai_feedback"] is None
    assert data["date"] is None


async def test_report_uses_saved_analysis(client, llm):
    llm.replies.append(analysis_reply())
    await client.post("/assessments/who5/submit", json={"answers": answers_for("who5", 4)})
    await client.post("/results/analyze", json={})

    data = (await client.get("/results/report")).json()
    assert data["who5_score"] == 80
    assert data["ai_feedback"] == "You are doing well overall."
    assert data["date"] is not None


async def test_report_without_anything_is_404(client):
    response = await client.get("/results/report")
    assert response.status_code == 404


async def test_progress_settles_goals(client, llm):
    await client.post("/goals", json={
        "assessment_type": "gad7", "goal_definition_type": "reach_specific_score", "target_value": 5,
    })
    llm.replies.append(analysis_reply())
    await client.post("/assessments/gad7/submit", json={"answers": answers_for("gad7", 0)})
    await client.post("/results/analyze", json={})

    data = (await client.get("/progress")).json()
    goal = data["goals"][0]
    assert goal["status"] == "achieved"
    assert goal["current_score"] == 0
    assert goal["progress"] == 100.0
    assert data["notices"] == ["Congrats on achieving your goal for GAD-7 Anxiety Assessment!"]


async def test_export_csv(client, llm):
    llm.replies.append(analysis_reply())
    await client.post("/assessments/phq9/submit", json={"answers": answers_for("phq9", 2)})
    await client.post("/results/analyze", json={})

    response = await client.get("/results/export")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    lines = response.text.strip().splitlines()
    assert lines[0] == "date,who5_score,gad7_score,phq9_score,requires_consultation"
    assert lines[1].endswith(",0,0,18,true")


async def test_corrupted_history_is_reported(client, store):
    await store.set_item(StorageKeys.PROGRESS_DATA, "[{")

    data = (await client.get("/progress")).json()
    assert data["history"] == []
    assert data["notices"] == ["Stored data for assessment history was corrupted and has been reset."]


async def test_report_falls_back_to_latest_with_notice(client, llm):
    llm.replies.append(analysis_reply())
    await client.post("/assessments/gad7/submit", json={"answers": answers_for("gad7", 1)})
    await client.post("/results/analyze", json={})

    data = (await client.get("/results/report")).json()
    assert data["gad7_score"] == 7
    assert data["notices"] == [
        "Displaying the most recent historical report as current scores didn't match a specific entry."
    ]


async def test_report_matching_current_scores_has_no_notice(client, llm):
    llm.replies.append(analysis_reply())
    for assessment_type in ("who5", "gad7", "phq9"):
        await client.post(f"/assessments/{assessment_type}/submit",
                          json={"answers": answers_for(assessment_type, 1)})
    await client.post("/results/analyze", json={})

    data = (await client.get("/results/report")).json()
    assert data["who5_score"] == 20
    assert data["ai_feedback"] == "You are doing well overall."
    assert data["notices"] == []
