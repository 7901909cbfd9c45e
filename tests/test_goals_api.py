from conftest import answers_for


async def complete_analysis(client, llm, assessment_type, value):
    llm.replies.append({"feedback": "f", "recommendations": "r", "requiresConsultation": False})
    await client.post(f"/assessments/{assessment_type}/submit", json={"answers": answers_for(assessment_type, value)})
    await client.post("/results/analyze", json={})


async def test_create_reach_goal(client):
    response = await client.post("/goals", json={
        "assessment_type": "who5",
        "goal_definition_type": "reach_specific_score",
        "target_value": 72,
        "target_date": "2030-06-01",
        "notes": "Walk every morning",
    })
    assert response.status_code == 200
    goal = response.json()
    assert goal["status"] == "active"
    assert goal["start_score"] == 0
    assert goal["progress"] == 0.0
    assert goal["overdue"] is False
    assert goal["description"] == "Reach a score of 72 for WHO-5 Well-being Index. By June 1, 2030."


async def test_improvement_goal_needs_a_baseline(client):
    response = await client.post("/goals", json={
        "assessment_type": "phq9", "goal_definition_type": "improve_current_score", "target_value": 4,
    })
    assert response.status_code == 400
    assert "complete a PHQ-9 Depression Screening assessment first" in response.json()["detail"]


async def test_improvement_goal_starts_from_latest_score(client, llm):
    await complete_analysis(client, llm, "phq9", 2)

    response = await client.post("/goals", json={
        "assessment_type": "phq9", "goal_definition_type": "improve_current_score", "target_value": 4,
    })
    assert response.status_code == 200
    assert response.json()["start_score"] == 18


async def test_target_above_maximum_rejected(client):
    response = await client.post("/goals", json={"assessment_type": "gad7", "target_value": 22})
    assert response.status_code == 400


async def test_dashboard_groups_by_status(client):
    ids = []
    for target in (3, 4, 5):
        response = await client.post("/goals", json={"assessment_type": "gad7", "target_value": target})
        ids.append(response.json()["id"])

    await client.patch(f"/goals/{ids[1]}/status", json={"status": "archived"})
    await client.patch(f"/goals/{ids[2]}/status", json={"status": "missed"})

    data = (await client.get("/goals")).json()
    assert [g["id"] for g in data["active"]] == [ids[0]]
    assert [g["id"] for g in data["archived"]] == [ids[1]]
    assert [g["id"] for g in data["completed"]] == [ids[2]]


async def test_edit_keeps_identity(client):
    created = (await client.post("/goals", json={"assessment_type": "gad7", "target_value": 5})).json()

    response = await client.put(f"/goals/{created['id']}", json={
        "assessment_type": "gad7", "target_value": 3, "notes": "Breathing exercises",
    })
    assert response.status_code == 200
    goal = response.json()
    assert goal["id"] == created["id"]
    assert goal["start_date"] == created["start_date"]
    assert goal["target_value"] == 3
    assert goal["description"] == "Reach a score of 3 for GAD-7 Anxiety Assessment."


async def test_overdue_flag(client):
    response = await client.post("/goals", json={
        "assessment_type": "gad7", "target_value": 5, "target_date": "2020-01-01",
    })
    assert response.json()["overdue"] is True


async def test_delete_goal(client):
    created = (await client.post("/goals", json={"assessment_type": "gad7", "target_value": 5})).json()

    response = await client.delete(f"/goals/{created['id']}")
    assert response.json() == {"message": "The goal has been removed."}
    assert (await client.get("/goals")).json()["active"] == []


async def test_unknown_goal_is_404(client):
    assert (await client.delete("/goals/nope")).status_code == 404
    assert (await client.patch("/goals/nope/status", json={"status": "archived"})).status_code == 404
    response = await client.put("/goals/nope", json={"assessment_type": "gad7", "target_value": 5})
    assert response.status_code == 404
