from __future__ import annotations
import logging
from dataclasses import dataclass

from mcp.server.fastmcp import FastMCP

from book_expert.config import Settings
from book_expert.core.ports.corpus import IAnswerCorpus
from book_expert.core.services.book_expert_service import BookExpertService
from book_expert.data.answers import build_default_corpus
from book_expert.gateway.mcp_server import build_mcp_server
from book_expert.models.corpus.json_corpus import load_json_corpus

logger = logging.getLogger("book_expert.container")

@dataclass
class AppContainer:
    settings: Settings
    corpus: IAnswerCorpus
    service: BookExpertService
    mcp_server: FastMCP

def build_corpus(settings: Settings) -> IAnswerCorpus:
    """Built-in book corpus unless a JSON corpus file is configured."""
    if settings.corpus_path:
        logger.info(f"📂 Loading corpus from file: {settings.corpus_path}")
        return load_json_corpus(settings.corpus_path)
    logger.info("📚 Using built-in book corpus")
    return build_default_corpus()

def build_container(settings: Settings, corpus: IAnswerCorpus | None = None) -> AppContainer:
    """
    Wire corpus, service and MCP gateway. A corpus passed in explicitly
    takes precedence over the one named in settings.
    """
    try:
        if corpus is None:
            corpus = build_corpus(settings)
    except Exception as e:
        logger.error(f"❌ Corpus load failed: {e}")
        raise

    service = BookExpertService(corpus=corpus)
    mcp_server = build_mcp_server(service, settings)
    logger.info(
        f"✅ Container built | answers={len(corpus)} | "
        f"citation_links={'on' if settings.enable_citation_links else 'off'}"
    )
    return AppContainer(settings=settings, corpus=corpus, service=service, mcp_server=mcp_server)
