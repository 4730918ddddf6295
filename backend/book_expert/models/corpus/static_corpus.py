from __future__ import annotations
from dataclasses import replace
from types import MappingProxyType
from typing import Iterable, Iterator, Optional, Tuple
import logging

from book_expert.core.entities import Answer
from book_expert.core.errors import CorpusValidationError
from book_expert.core.ports.corpus import IAnswerCorpus

logger = logging.getLogger("book_expert.corpus")


def _check_keyword(answer_id: str, kw: str) -> None:
    if not kw or not kw.strip():
        raise CorpusValidationError("empty keyword", answer_id)
    if kw != kw.lower():
        raise CorpusValidationError(f"keyword {kw!r} is not lowercase", answer_id)
    if kw != kw.strip() or "  " in kw:
        raise CorpusValidationError(f"keyword {kw!r} must be words joined by single spaces", answer_id)


def _check_answer(answer: Answer, is_fallback: bool = False) -> None:
    if not answer.id:
        raise CorpusValidationError("answer id must not be empty")
    if is_fallback:
        if answer.keywords:
            raise CorpusValidationError("fallback answer must not have keywords", answer.id)
        if answer.citations:
            raise CorpusValidationError("fallback answer must not have citations", answer.id)
    elif not answer.keywords:
        raise CorpusValidationError("at least one keyword is required", answer.id)

    for kw in answer.keywords:
        _check_keyword(answer.id, kw)

    if answer.verbatim_check not in answer.text:
        raise CorpusValidationError("verbatim_check does not occur in text", answer.id)

    for c in answer.citations:
        if not c.uri or not c.name:
            raise CorpusValidationError("citation uri and name must not be empty", answer.id)


def _freeze(answer: Answer) -> Answer:
    """Copy list-valued fields into tuples so callers cannot mutate a loaded answer."""
    if isinstance(answer.keywords, str):
        raise CorpusValidationError("keywords must be a sequence of phrases, not a string", answer.id)
    if isinstance(answer.keywords, tuple) and isinstance(answer.citations, tuple):
        return answer
    return replace(answer, keywords=tuple(answer.keywords), citations=tuple(answer.citations))


class StaticAnswerCorpus(IAnswerCorpus):
    """
    Immutable corpus built once from an ordered sequence of answers.

    Answers are validated on construction, so a corpus that exists is one
    the matcher can rely on: unique ids, lowercase keywords, and a fallback
    without keywords or citations. Registration order is kept as given.
    """

    __slots__ = ("_answers", "_by_id", "_fallback")

    def __init__(self, answers: Iterable[Answer], fallback: Answer):
        ordered: Tuple[Answer, ...] = tuple(_freeze(a) for a in answers)
        fallback = _freeze(fallback)
        _check_answer(fallback, is_fallback=True)

        by_id = {fallback.id: fallback}
        for answer in ordered:
            _check_answer(answer)
            if answer.id in by_id:
                raise CorpusValidationError("duplicate id", answer.id)
            by_id[answer.id] = answer

        object.__setattr__(self, "_answers", ordered)
        object.__setattr__(self, "_by_id", MappingProxyType(by_id))
        object.__setattr__(self, "_fallback", fallback)
        logger.debug(f"🧱 Corpus built: {len(ordered)} answers, fallback={fallback.id!r}")

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __iter__(self) -> Iterator[Answer]:
        return iter(self._answers)

    def __len__(self) -> int:
        return len(self._answers)

    def get(self, answer_id: str) -> Optional[Answer]:
        return self._by_id.get(answer_id)

    @property
    def fallback(self) -> Answer:
        return self._fallback

    @property
    def citation_count(self) -> int:
        return sum(len(a.citations) for a in self._answers)

    def __repr__(self) -> str:
        return f"StaticAnswerCorpus(answers={len(self._answers)}, fallback={self._fallback.id!r})"
