from datetime import date, timedelta

import pytest

from manasooth.ai import flows
from manasooth.ai.client import AIServiceError, parse_json_reply
from manasooth.config import settings


async def test_chat_reply(client, llm):
    llm.replies.append({"response": "That sounds hard. I'm here to listen."})

    response = await client.post("/chat", json={"message": "I feel low today", "preferred_tone": "calm"})
    assert response.status_code == 200
    assert response.json() == {"response": "That sounds hard. I'm here to listen."}
    assert "I feel low today" in llm.prompts[0]
    assert "preferred tone of: calm" in llm.prompts[0]


async def test_chat_history_is_truncated(client, llm):
    llm.replies.append({"response": "ok"})
    history = [{"sender": "user" if i % 2 else "ai", "text": f"message-{i:02d}"} for i in range(14)]

    await client.post("/chat", json={"message": "hi", "history": history})
    prompt = llm.prompts[0]
    assert "message-03" not in prompt
    assert "message-04" in prompt
    assert "message-13" in prompt


async def test_chat_falls_back_on_ai_error(client, llm):
    llm.error = AIServiceError("timeout")
    response = await client.post("/chat", json={"message": "hello"})
    assert response.json()["response"].startswith("I'm having a little trouble connecting")


async def test_chat_empty_response_falls_back(client, llm):
    llm.replies.append({"response": "   "})
    response = await client.post("/chat", json={"message": "hello"})
    assert response.json()["response"].startswith("I'm having a little trouble connecting")


async def test_chat_rejects_empty_message(client):
    assert (await client.post("/chat", json={"message": ""})).status_code == 422


def test_parse_json_reply_strips_fences():
    assert parse_json_reply('```json\n{"response": "hi"}\n```') == {"response": "hi"}
    with pytest.raises(AIServiceError):
        parse_json_reply("no json here")
    with pytest.raises(AIServiceError):
        parse_json_reply("{not: valid}")


async def test_slots(client):
    slots = (await client.get("/consultation/slots")).json()
    assert slots[0] == "09:00 AM"
    assert slots[-1] == "04:00 PM"
    assert len(slots) == 13


def tomorrow():
    return (date.today() + timedelta(days=1)).isoformat()


async def test_booking_succeeds(client, monkeypatch):
    monkeypatch.setattr(flows.random, "random", lambda: 0.1)

    response = await client.post("/consultation/book", json={
        "date": tomorrow(), "time": "10:30 AM", "user_name": "Asha",
    })
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["booking_id"].startswith("MANA-")
    assert data["booking_id"] in data["message"]


async def test_booking_can_fail(client, monkeypatch):
    monkeypatch.setattr(flows.random, "random", lambda: 0.95)

    data = (await client.post("/consultation/book", json={"date": tomorrow(), "time": "10:30 AM"})).json()
    assert data["success"] is False
    assert data["booking_id"] is None
    assert "high demand" in data["message"]


@pytest.mark.parametrize("payload,detail", [
    ({"date": "2000-01-01", "time": "10:30 AM"}, "Please select a date that is not in the past."),
    ({"date": "tomorrow", "time": "10:30 AM"}, "Date must be in YYYY-MM-DD format"),
    (None, "Please select one of the available time slots."),
])
async def test_booking_validation(client, payload, detail):
    payload = payload or {"date": tomorrow(), "time": "10:45 AM"}
    response = await client.post("/consultation/book", json=payload)
    assert response.status_code == 400
    assert response.json()["detail"] == detail


def test_booking_id_shape():
    booking_id = flows.make_booking_id()
    prefix, stamp, suffix = booking_id.split("-")
    assert prefix == "MANA"
    assert stamp.isalnum() and stamp == stamp.upper()
    assert len(suffix) == 5


async def test_chat_history_limit_zero_sends_no_history(client, llm, monkeypatch):
    monkeypatch.setattr(settings, "CHAT_HISTORY_LIMIT", 0)
    llm.replies.append({"response": "ok"})
    history = [{"sender": "user", "text": f"old-{i}"} for i in range(3)]

    await client.post("/chat", json={"message": "hi", "history": history})
    assert "old-" not in llm.prompts[0]
    assert "recent chat history" not in llm.prompts[0]
