from __future__ import annotations
from typing import List
from pydantic import BaseModel, Field

from book_expert.core.entities import Answer

class AnswerRequest(BaseModel):
    question: str = Field(..., description="A question about sci-fi or fantasy books")

class Citation(BaseModel):
    uri: str
    name: str
    description: str = ""

class AnswerResponse(BaseModel):
    id: str
    text: str  # verbatim corpus text
    citations: List[Citation]

    @classmethod
    def from_answer(cls, answer: Answer) -> "AnswerResponse":
        return cls(
            id=answer.id,
            text=answer.text,
            citations=[Citation(uri=c.uri, name=c.name, description=c.description) for c in answer.citations],
        )

class HealthResponse(BaseModel):
    status: str
    name: str
    version: str

class ReadinessResponse(BaseModel):
    status: str
    answers: int
    citations: int
