from __future__ import annotations
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from book_expert.config import Settings, settings as default_settings

# ============================================================
# 🪵 Logging Setup
# ============================================================
logging.basicConfig(
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(filename)s:%(lineno)d | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    level=default_settings.log_level.upper(),
)
logger = logging.getLogger("book_expert.app")

# ============================================================
# 📦 Core Imports (Dependency Injection)
# ============================================================
from book_expert.container import AppContainer, build_container

# ============================================================
# 🌐 Routers
# ============================================================
from book_expert.router.health import router as health_router
from book_expert.router.answer import router as answer_router


# ============================================================
# 🏗️ App Factory
# ============================================================
def create_app(settings: Optional[Settings] = None, container: Optional[AppContainer] = None) -> FastAPI:
    """
    Build the FastAPI app: health and answer routes plus the MCP endpoint.

    The corpus is loaded here, once, so a bad corpus file fails startup
    instead of the first request.
    """
    settings = settings or default_settings
    container = container or build_container(settings)
    mcp_app = container.mcp_server.streamable_http_app()

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        corpus = container.corpus
        logger.info(f"🚀 {settings.server_name} v{settings.server_version} starting")
        logger.info(f"📚 Loaded {len(corpus)} answers with {corpus.citation_count} total citations")
        logger.info(f"🔌 MCP endpoint: http://{settings.api_host}:{settings.api_port}{settings.mcp_path}")
        async with container.mcp_server.session_manager.run():
            try:
                yield
            finally:
                logger.info("🧹 Application shutdown complete")

    app = FastAPI(
        title="Book Expert MCP Server",
        description="Keyword-matched sci-fi and fantasy answers exposed as an MCP tool",
        version=settings.server_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.container = container

    app.include_router(health_router)
    app.include_router(answer_router)

    @app.get("/", tags=["meta"])
    def root():
        return {
            "app": settings.server_name,
            "version": settings.server_version,
            "answers": len(container.corpus),
            "endpoints": {
                "mcp": settings.mcp_path,
                "health": "/health",
                "readiness": "/health/ready",
                "answer": "/answer",
                "docs": "/docs",
            },
        }

    # Catch-all mount goes last so the routes above take precedence
    app.mount("/", mcp_app)
    return app


app = create_app()

# ============================================================
# 🏁 Entrypoint
# ============================================================
if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting {default_settings.server_name} on port {default_settings.api_port}...")
    uvicorn.run(
        "book_expert.main:app",
        host=default_settings.api_host,
        port=default_settings.api_port,
        reload=False,
        log_config=None,
    )
