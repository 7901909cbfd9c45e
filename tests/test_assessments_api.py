from conftest import answers_for


async def test_list_assessments(client):
    response = await client.get("/assessments")
    assert response.status_code == 200
    data = response.json()
    assert [a["type"] for a in data] == ["who5", "gad7", "phq9"]
    assert [len(a["questions"]) for a in data] == [5, 7, 9]
    assert data[0]["higher_is_better"] is True
    assert data[0]["max_score"] == 100


async def test_unknown_assessment_is_404(client):
    response = await client.get("/assessments/pcl5")
    assert response.status_code == 404


async def test_missing_client_id_is_400(client):
    del client.headers["X-Client-Id"]
    response = await client.get("/assessments/flow")
    assert response.status_code == 400
    assert response.json()["detail"] == "Missing X-Client-Id header"


async def test_flow_is_ordered_canonically(client):
    response = await client.post("/assessments/flow", json={"types": ["phq9", "who5"]})
    assert response.status_code == 200
    assert response.json() == {"flow": ["who5", "phq9"], "next": "who5"}

    response = await client.get("/assessments/flow")
    assert response.json()["flow"] == ["who5", "phq9"]


async def test_empty_flow_rejected(client):
    response = await client.post("/assessments/flow", json={"types": []})
    assert response.status_code == 422


async def test_submit_walks_through_flow(client):
    await client.post("/assessments/flow", json={"types": ["gad7", "who5"]})

    response = await client.post("/assessments/who5/submit", json={"answers": answers_for("who5", 3)})
    assert response.status_code == 200
    data = response.json()
    assert data["score"] == 60
    assert data["interpretation"] == "Moderate well-being (Score: 60)"
    assert data["next"] == "gad7"
    assert data["is_last_in_flow"] is False

    response = await client.post("/assessments/gad7/submit", json={"answers": answers_for("gad7", 2)})
    data = response.json()
    assert data["score"] == 14
    assert data["next"] == "results"
    assert data["is_last_in_flow"] is True

    response = await client.get("/assessments/scores/current")
    assert response.json() == {"who5": 60, "gad7": 14, "phq9": None, "notices": []}

    response = await client.get("/assessments/flow")
    assert response.json() == {"flow": [], "next": None}


async def test_submit_without_flow_goes_to_results(client):
    response = await client.post("/assessments/phq9/submit", json={"answers": answers_for("phq9", 1)})
    assert response.json()["next"] == "results"


async def test_new_flow_clears_current_scores(client):
    await client.post("/assessments/phq9/submit", json={"answers": answers_for("phq9", 1)})
    await client.post("/assessments/flow", json={"types": ["gad7"]})

    response = await client.get("/assessments/scores/current")
    assert response.json()["phq9"] is None


async def test_incomplete_answers_rejected(client):
    answers = answers_for("gad7", 1)
    del answers["gad7_7"]
    response = await client.post("/assessments/gad7/submit", json={"answers": answers})
    assert response.status_code == 400
    assert "gad7_7" in response.json()["detail"]


async def test_submit_unknown_assessment(client):
    response = await client.post("/assessments/pcl5/submit", json={"answers": {}})
    assert response.status_code == 404
