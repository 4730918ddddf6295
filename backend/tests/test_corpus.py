"""Corpus invariants: validation on load, immutability and lookup."""
from __future__ import annotations

import dataclasses

import pytest

from book_expert.core.entities import Answer, Citation
from book_expert.core.errors import CorpusValidationError
from book_expert.core.ports.corpus import IAnswerCorpus
from book_expert.core.services.matcher import match
from book_expert.data.answers import ANSWERS, FALLBACK_ANSWER
from book_expert.models.corpus.static_corpus import StaticAnswerCorpus


def test_built_in_corpus_keeps_registration_order(corpus):
    ids = [a.id for a in corpus]
    assert ids == [
        "dune",
        "bene-gesserit",
        "paul-atreides",
        "neuromancer",
        "case-character",
        "lotr",
        "elvish-languages",
        "hitchhikers",
        "deep-thought",
        "dune-vs-neuromancer",
        "80s-scifi",
        "foundation",
    ]
    assert len(corpus) == len(ANSWERS)


def test_comparison_registered_after_single_topics(corpus):
    ids = [a.id for a in corpus]
    assert ids.index("dune-vs-neuromancer") > ids.index("dune")
    assert ids.index("dune-vs-neuromancer") > ids.index("neuromancer")


def test_built_in_answers_hold_their_verbatim_check(corpus):
    for answer in list(corpus) + [corpus.fallback]:
        assert answer.verbatim_check in answer.text, answer.id


def test_citation_count(corpus):
    assert corpus.citation_count == 22


def test_get_by_id(corpus):
    assert corpus.get("foundation").keywords[0] == "foundation"
    assert corpus.get("fallback") is FALLBACK_ANSWER
    assert corpus.get("does-not-exist") is None


def test_fallback_shape(corpus):
    assert corpus.fallback.keywords == ()
    assert corpus.fallback.citations == ()


def test_corpus_is_read_only(corpus):
    with pytest.raises(AttributeError):
        corpus._answers = ()
    with pytest.raises(TypeError):
        corpus._by_id["x"] = FALLBACK_ANSWER


def test_answers_are_frozen(corpus):
    answer = corpus.get("dune")
    with pytest.raises(dataclasses.FrozenInstanceError):
        answer.text = "rewritten"
    assert isinstance(answer.keywords, tuple)


def test_duplicate_id_rejected(make_answer, fallback):
    with pytest.raises(CorpusValidationError, match="duplicate id"):
        StaticAnswerCorpus([make_answer("a", ["x"]), make_answer("a", ["y"])], fallback=fallback)


def test_id_clash_with_fallback_rejected(make_answer, fallback):
    with pytest.raises(CorpusValidationError, match="duplicate id"):
        StaticAnswerCorpus([make_answer("fallback", ["x"])], fallback=fallback)


@pytest.mark.parametrize(
    "keywords, message",
    [
        ([], "at least one keyword"),
        (["Dune"], "not lowercase"),
        (["bene  gesserit"], "single spaces"),
        ([" dune"], "single spaces"),
        ([""], "empty keyword"),
    ],
)
def test_bad_keywords_rejected(make_answer, fallback, keywords, message):
    with pytest.raises(CorpusValidationError, match=message):
        StaticAnswerCorpus([make_answer("a", keywords)], fallback=fallback)


def test_verbatim_check_must_occur_in_text(fallback):
    bad = Answer(id="a", keywords=("x",), text="some text", verbatim_check="missing phrase")
    with pytest.raises(CorpusValidationError) as exc:
        StaticAnswerCorpus([bad], fallback=fallback)
    assert exc.value.answer_id == "a"


def test_citation_fields_required(make_answer, fallback):
    answer = make_answer("a", ["x"], citations=[Citation(uri="", name="n")])
    with pytest.raises(CorpusValidationError, match="citation"):
        StaticAnswerCorpus([answer], fallback=fallback)


def test_fallback_must_not_have_keywords(make_answer):
    with pytest.raises(CorpusValidationError, match="fallback"):
        StaticAnswerCorpus([], fallback=make_answer("fallback", ["x"]))


def test_fallback_must_not_have_citations(sample_citation):
    fb = Answer(id="fallback", keywords=(), text="t", verbatim_check="t", citations=(sample_citation,))
    with pytest.raises(CorpusValidationError, match="fallback"):
        StaticAnswerCorpus([], fallback=fb)


def test_corpus_copies_input_sequence(make_answer, fallback):
    source = [make_answer("a", ["x"])]
    corpus = StaticAnswerCorpus(source, fallback=fallback)
    source.append(make_answer("b", ["y"]))
    assert [a.id for a in corpus] == ["a"]


def test_list_fields_frozen_on_load(fallback):
    keywords = ["dune"]
    answer = Answer(id="a", keywords=keywords, text="About dune.", verbatim_check="dune")
    corpus = StaticAnswerCorpus([answer], fallback=fallback)

    loaded = corpus.get("a")
    assert loaded.keywords == ("dune",)
    with pytest.raises(AttributeError):
        loaded.keywords.append("neuromancer")

    # later edits to the caller's list do not reach the corpus
    keywords[0] = "DUNE"
    keywords.append("neuromancer")
    assert match("neuromancer", corpus) is corpus.fallback
    assert match("DUNE", corpus).id == "a"


def test_list_citations_frozen_on_load(fallback, sample_citation):
    citations = [sample_citation]
    answer = Answer(id="a", keywords=("x",), text="t x", verbatim_check="t", citations=citations)
    corpus = StaticAnswerCorpus([answer], fallback=fallback)

    citations.clear()
    assert corpus.get("a").citations == (sample_citation,)


def test_string_keywords_rejected(fallback):
    answer = Answer(id="a", keywords="dune", text="t", verbatim_check="t")
    with pytest.raises(CorpusValidationError, match="not a string"):
        StaticAnswerCorpus([answer], fallback=fallback)


def test_citation_count_default_on_port(corpus):
    class ListCorpus(IAnswerCorpus):
        def __init__(self, answers, fallback):
            self._answers = list(answers)
            self._fallback = fallback

        def __iter__(self):
            return iter(self._answers)

        def __len__(self):
            return len(self._answers)

        def get(self, answer_id):
            return None

        @property
        def fallback(self):
            return self._fallback

    assert ListCorpus(corpus, corpus.fallback).citation_count == corpus.citation_count == 22
