# backend/book_expert/router/health.py
from __future__ import annotations
import logging
from fastapi import APIRouter, Request

from book_expert.models.schemas import HealthResponse, ReadinessResponse

router = APIRouter(tags=["meta"])
logger = logging.getLogger(__name__)


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    """Liveness: process identity, no auth."""
    settings = request.app.state.settings
    return HealthResponse(status="ok", name=settings.server_name, version=settings.server_version)


@router.get("/health/ready", response_model=ReadinessResponse)
async def readiness_check(request: Request):
    """Readiness: the corpus is loaded before the app is created, so this reports its size."""
    corpus = request.app.state.container.corpus
    return ReadinessResponse(status="ready", answers=len(corpus), citations=corpus.citation_count)
