from __future__ import annotations
from book_expert.core.entities import Answer, Match
from book_expert.core.ports.corpus import IAnswerCorpus


def keyword_weight(keyword: str) -> int:
    """Number of space-separated words: "dune" -> 1, "bene gesserit" -> 2."""
    return len(keyword.split(" "))


def score_answer(lowered_question: str, answer: Answer) -> int:
    """
    Sum the weights of every keyword found as a substring of the question.

    The question must already be lowercased. Each keyword counts once no
    matter how often it occurs, and overlapping keywords are scored
    independently.
    """
    return sum(keyword_weight(kw) for kw in answer.keywords if kw in lowered_question)


def match_with_score(question: str, corpus: IAnswerCorpus) -> Match:
    """
    Pick the best answer for ``question`` along with its score.

    Entries are scored in registration order and a later entry replaces the
    current best on an equal score (``>=``), so sub-topics and comparisons
    registered after a general entry win ties against it. Returns the
    corpus fallback when nothing scores above zero.
    """
    q = question.lower()

    best: Match | None = None
    best_score = 0
    for position, answer in enumerate(corpus):
        score = score_answer(q, answer)
        if score >= best_score and score > 0:
            best_score = score
            best = Match(answer=answer, score=score, position=position)

    if best is None:
        return Match(answer=corpus.fallback, score=0, position=-1)
    return best


def match(question: str, corpus: IAnswerCorpus) -> Answer:
    return match_with_score(question, corpus).answer
