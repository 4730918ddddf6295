from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple

@dataclass(frozen=True)
class Citation:
    uri: str
    name: str
    description: str = ""

@dataclass(frozen=True)
class Answer:
    id: str
    keywords: Tuple[str, ...]
    text: str  # returned to callers byte-for-byte
    verbatim_check: str  # substring of text, used only to validate pass-through
    citations: Tuple[Citation, ...] = field(default_factory=tuple)

@dataclass(frozen=True)
class Match:
    answer: Answer
    score: int
    position: int  # registration index in the corpus, -1 for the fallback

    @property
    def is_fallback(self) -> bool:
        return self.position < 0
