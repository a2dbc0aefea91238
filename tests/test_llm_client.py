from types import SimpleNamespace

from src.app.services import llm_client


def test_client_targets_together_without_helicone(monkeypatch):
    monkeypatch.setattr(llm_client.settings, "HELICONE_API_KEY", None)

    client = llm_client.get_llm_client(session_id="chat-1")

    assert str(client.base_url).startswith("https://api.together.xyz/v1")
    assert "Helicone-Auth" not in client.default_headers


def test_client_routes_through_helicone(monkeypatch):
    monkeypatch.setattr(llm_client.settings, "HELICONE_API_KEY", "hk-123")

    client = llm_client.get_llm_client(session_id="chat-1")

    assert str(client.base_url).startswith("https://together.helicone.ai/v1")
    headers = client.default_headers
    assert headers["Helicone-Auth"] == "Bearer hk-123"
    assert headers["Helicone-Property-appname"] == "LlamaCoder"
    assert headers["Helicone-Session-Id"] == "chat-1"
    assert headers["Helicone-Session-Name"] == "LlamaCoder Chat"


def test_first_choice_content():
    response = SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content="hi"))])

    assert llm_client.first_choice_content(response) == "hi"
    assert llm_client.first_choice_content(SimpleNamespace(choices=[])) is None
    assert llm_client.first_choice_content(SimpleNamespace(choices=[SimpleNamespace(message=None)])) is None
