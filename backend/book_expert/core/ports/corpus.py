from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Iterator, Optional
from book_expert.core.entities import Answer

class IAnswerCorpus(ABC):
    """
    Read-only answer registry.

    Iteration order is registration order and is part of the contract:
    the matcher breaks score ties in favor of later entries.
    """

    @abstractmethod
    def __iter__(self) -> Iterator[Answer]: ...
    @abstractmethod
    def __len__(self) -> int: ...
    @abstractmethod
    def get(self, answer_id: str) -> Optional[Answer]: ...

    @property
    @abstractmethod
    def fallback(self) -> Answer: ...

    @property
    def citation_count(self) -> int:
        return sum(len(a.citations) for a in self)
