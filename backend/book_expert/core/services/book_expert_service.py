from __future__ import annotations
import logging

from book_expert.core.entities import Answer, Match
from book_expert.core.ports.corpus import IAnswerCorpus
from book_expert.core.services.matcher import match_with_score

logger = logging.getLogger("book_expert.service")


class BookExpertService:
    """
    Answers questions from a fixed corpus.

    Every call is independent: no conversational state is kept between
    questions, even when a caller treats them as one conversation.
    """

    def __init__(self, corpus: IAnswerCorpus):
        self.corpus = corpus

    def ask(self, question: str) -> Match:
        logger.info(f"❓ Question received: {question!r}")
        result = match_with_score(question, self.corpus)
        if result.is_fallback:
            logger.info(f"🤷 No keyword matched, returning fallback {result.answer.id!r}")
        else:
            logger.info(
                f"🎯 Matched answer {result.answer.id!r} "
                f"(score={result.score}, position={result.position}, citations={len(result.answer.citations)})"
            )
        return result

    def answer(self, question: str) -> Answer:
        return self.ask(question).answer
