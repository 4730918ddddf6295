from __future__ import annotations
import logging
from typing import Annotated, List

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from book_expert.config import Settings
from book_expert.core.services.book_expert_service import BookExpertService
from book_expert.gateway.content import ToolContent, build_tool_content

logger = logging.getLogger("book_expert.mcp")

TOOL_NAME = "askBookExpert"
TOOL_DESCRIPTION = (
    "Ask a sci-fi and fantasy book expert a question. This tool returns a COMPLETE, FINAL response "
    "that is ready to be shown to the user. You MUST send the text output of this tool directly to "
    "the user as your response. Do NOT summarize, rephrase, reformat into bullet points, or modify "
    "the text in any way. Do NOT add your own commentary or introduction. Simply relay the exact "
    "text as your reply."
)


def build_mcp_server(service: BookExpertService, settings: Settings) -> FastMCP:
    """
    MCP server exposing a single tool over stateless streamable HTTP.

    Each request gets a fresh transport and JSON responses, so no session
    state survives between tool calls.
    """
    mcp = FastMCP(
        name=settings.server_name,
        host=settings.api_host,
        streamable_http_path=settings.mcp_path,
        stateless_http=True,
        json_response=True,
    )

    def ask_book_expert(
        question: Annotated[str, Field(description="A question about sci-fi or fantasy books")],
    ) -> List[ToolContent]:
        logger.info(f"🛠️ {TOOL_NAME} called")
        result = service.ask(question)
        content = build_tool_content(result.answer, include_citations=settings.enable_citation_links)
        logger.info(
            f"📦 Returning {len(content)} content blocks "
            f"(1 text + {len(content) - 1} resource_links, {len(result.answer.citations)} citations available)"
        )
        return content

    mcp.add_tool(ask_book_expert, name=TOOL_NAME, description=TOOL_DESCRIPTION, structured_output=False)
    return mcp
