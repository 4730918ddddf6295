# backend/book_expert/config.py
from __future__ import annotations
import logging
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env before reading settings
load_dotenv()

logger = logging.getLogger("book_expert.config")


class Settings(BaseSettings):
    server_name: str = "book-expert-mcp-server"
    server_version: str = "1.0.0"

    api_host: str = "0.0.0.0"
    api_port: int = Field(3000, ge=1, le=65535)
    mcp_path: str = "/mcp"

    # JSON corpus file; the built-in book corpus is used when unset
    corpus_path: Optional[str] = None
    # Emit a resource_link block per citation after the answer text
    enable_citation_links: bool = False

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="BOOK_EXPERT_",
        env_ignore_empty=True,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
