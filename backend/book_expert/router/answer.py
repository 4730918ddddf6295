from __future__ import annotations
from fastapi import APIRouter, Depends, Request

from book_expert.core.services.book_expert_service import BookExpertService
from book_expert.models.schemas import AnswerRequest, AnswerResponse

router = APIRouter(prefix="", tags=["qa"])


def get_service(request: Request) -> BookExpertService:
    return request.app.state.container.service


@router.post("/answer", response_model=AnswerResponse)
def answer(payload: AnswerRequest, service: BookExpertService = Depends(get_service)):
    """Same matching as the MCP tool, for plain HTTP clients. Empty questions get the fallback."""
    return AnswerResponse.from_answer(service.answer(payload.question))
