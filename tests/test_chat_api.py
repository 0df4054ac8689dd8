"""POST /api/chat/general."""
from app.core.prompt.prompts import GENERAL_SYSTEM_PROMPT


def test_chat_returns_ai_text(client, fake_llm):
    fake_llm.responses.append("Try a think-pair-share activity.")
    res = client.post("/api/chat/general", json={"message": "Ideas for a first lecture?"})
    assert res.status_code == 200
    assert res.json() == {"response": "Try a think-pair-share activity."}
    assert fake_llm.calls == [[
        {"role": "system", "content": GENERAL_SYSTEM_PROMPT},
        {"role": "user", "content": "Ideas for a first lecture?"},
    ]]


def test_missing_message_is_400_without_ai_call(client, fake_llm):
    for body in ({}, {"message": ""}, {"message": None}):
        res = client.post("/api/chat/general", json=body)
        assert res.status_code == 400
        assert res.json()["error"] == "Message is required"
    assert fake_llm.calls == []


def test_ai_failure_surfaces_provider_message(client, fake_llm, provider_error):
    fake_llm.error = provider_error("Error code: 429", body={"message": "Rate limit reached"})
    res = client.post("/api/chat/general", json={"message": "hi"})
    assert res.status_code == 500
    assert res.json()["error"] == "Rate limit reached"


def test_ai_transport_failure_uses_exception_text(client, fake_llm):
    fake_llm.error = ConnectionError("Connection refused")
    res = client.post("/api/chat/general", json={"message": "hi"})
    assert res.status_code == 500
    assert res.json()["error"] == "Connection refused"
