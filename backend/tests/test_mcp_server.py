"""MCP gateway: tool listing, tool calls and error surfaces."""
from __future__ import annotations

import pytest
from mcp.server.fastmcp.exceptions import ToolError
from mcp.types import ResourceLink, TextContent

from book_expert.config import Settings
from book_expert.core.services.book_expert_service import BookExpertService
from book_expert.gateway.mcp_server import TOOL_NAME, build_mcp_server


def _content(result):
    # newer SDKs return (content, structured) pairs
    return result[0] if isinstance(result, tuple) else result


@pytest.fixture
def server(corpus, settings):
    return build_mcp_server(BookExpertService(corpus), settings)


@pytest.mark.asyncio
async def test_single_tool_listed(server):
    tools = await server.list_tools()

    assert [t.name for t in tools] == [TOOL_NAME]
    tool = tools[0]
    assert "relay the exact text" in tool.description
    assert tool.inputSchema["required"] == ["question"]
    assert tool.inputSchema["properties"]["question"]["type"] == "string"


@pytest.mark.asyncio
async def test_call_returns_verbatim_text(server, corpus):
    result = await server.call_tool(TOOL_NAME, {"question": "How does Neuromancer compare to Dune?"})
    content = list(_content(result))

    assert len(content) == 1
    assert isinstance(content[0], TextContent)
    assert content[0].text == corpus.get("dune-vs-neuromancer").text


@pytest.mark.asyncio
async def test_call_with_citation_links(corpus):
    server = build_mcp_server(BookExpertService(corpus), Settings(enable_citation_links=True))
    result = await server.call_tool(TOOL_NAME, {"question": "Tell me about Dune by Frank Herbert"})
    content = list(_content(result))

    assert len(content) == 2
    assert isinstance(content[1], ResourceLink)
    assert content[1].name == "Dune (novel) — Wikipedia"


@pytest.mark.asyncio
async def test_unknown_tool_raises(server):
    with pytest.raises(ToolError, match="Unknown tool"):
        await server.call_tool("askSomethingElse", {"question": "dune"})


@pytest.mark.asyncio
@pytest.mark.parametrize("arguments", [{}, {"question": 42}])
async def test_malformed_arguments_rejected(server, arguments):
    with pytest.raises(ToolError):
        await server.call_tool(TOOL_NAME, arguments)
