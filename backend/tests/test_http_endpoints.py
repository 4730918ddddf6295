"""HTTP routes: health, readiness, answer and root descriptor."""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from book_expert.config import Settings
from book_expert.container import build_container
from book_expert.data.answers import FOUNDATION
from book_expert.main import create_app
from book_expert.router.answer import get_service


@pytest.fixture
def client(settings):
    app = create_app(settings=settings, container=build_container(settings))
    return TestClient(app)


def test_health_reports_identity(client, settings):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {
        "status": "ok",
        "name": settings.server_name,
        "version": settings.server_version,
    }


def test_readiness_reports_corpus(client):
    response = client.get("/health/ready")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ready"
    assert body["answers"] == 12
    assert body["citations"] == 22


def test_answer_returns_verbatim_text(client, corpus):
    response = client.post("/answer", json={"question": "How does Neuromancer compare to Dune?"})
    assert response.status_code == 200
    body = response.json()
    expected = corpus.get("dune-vs-neuromancer")
    assert body["id"] == expected.id
    assert body["text"] == expected.text
    assert [c["uri"] for c in body["citations"]] == [c.uri for c in expected.citations]


def test_answer_empty_question_gets_fallback(client):
    response = client.post("/answer", json={"question": ""})
    assert response.status_code == 200
    assert response.json()["id"] == "fallback"


@pytest.mark.parametrize("payload", [{}, {"question": 42}, {"query": "dune"}])
def test_answer_rejects_malformed_payload(client, payload):
    response = client.post("/answer", json=payload)
    assert response.status_code == 422


def test_root_lists_endpoints(client):
    body = client.get("/").json()
    assert body["endpoints"]["mcp"] == "/mcp"
    assert body["answers"] == 12


def test_custom_corpus_injected(settings, make_answer, make_corpus):
    corpus = make_corpus(make_answer("culture", ["culture"]))
    app = create_app(settings=settings, container=build_container(settings, corpus=corpus))
    client = TestClient(app)

    assert client.post("/answer", json={"question": "The Culture"}).json()["id"] == "culture"
    assert client.get("/health/ready").json()["answers"] == 1


def test_corpus_path_setting_loads_file(tmp_path):
    path = tmp_path / "corpus.json"
    path.write_text(
        '{"answers": [{"id": "a", "keywords": ["alpha"], "text": "Alpha.", "verbatim_check": "Alpha"}],'
        ' "fallback": {"id": "fallback", "keywords": [], "text": "None.", "verbatim_check": "None"}}',
        encoding="utf-8",
    )
    settings = Settings(corpus_path=str(path))
    container = build_container(settings)
    assert [a.id for a in container.corpus] == ["a"]


def test_answer_uses_service_dependency(client):
    class StubService:
        def __init__(self, answer):
            self.calls = []
            self._answer = answer

        def answer(self, question):
            self.calls.append(question)
            return self._answer

    stub = StubService(FOUNDATION)
    client.app.dependency_overrides[get_service] = lambda: stub
    try:
        body = client.post("/answer", json={"question": "anything"}).json()
    finally:
        client.app.dependency_overrides.pop(get_service, None)

    assert stub.calls == ["anything"]
    assert body["id"] == "foundation"
    assert body["text"] == FOUNDATION.text
