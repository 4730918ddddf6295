"""Shared fixtures for book expert tests."""
from __future__ import annotations

import pytest

from book_expert.config import Settings
from book_expert.core.entities import Answer, Citation
from book_expert.data.answers import build_default_corpus
from book_expert.models.corpus.static_corpus import StaticAnswerCorpus

FALLBACK = Answer(id="fallback", keywords=(), text="Ask me about books.", verbatim_check="books")


def _make_answer(answer_id: str, keywords, citations=()) -> Answer:
    return Answer(
        id=answer_id,
        keywords=tuple(keywords),
        text=f"Answer text for {answer_id}.",
        verbatim_check=f"for {answer_id}",
        citations=tuple(citations),
    )


@pytest.fixture
def corpus():
    return build_default_corpus()


@pytest.fixture
def fallback():
    return FALLBACK


@pytest.fixture
def make_answer():
    return _make_answer


@pytest.fixture
def make_corpus():
    def _make(*answers: Answer) -> StaticAnswerCorpus:
        return StaticAnswerCorpus(answers, fallback=FALLBACK)

    return _make


@pytest.fixture
def settings():
    return Settings(corpus_path=None, enable_citation_links=False)


@pytest.fixture
def sample_citation():
    return Citation(uri="https://example.org/a", name="Example A", description="first")
