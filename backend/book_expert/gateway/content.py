from __future__ import annotations
from typing import List, Union

from mcp.types import Annotations, ResourceLink, TextContent

from book_expert.core.entities import Answer, Citation

# Closed set of blocks a tool result may carry. Only text is sent unless
# citation links are switched on in settings.
ToolContent = Union[TextContent, ResourceLink]

CITATION_MIME_TYPE = "text/html"
CITATION_PRIORITY = 0.8


def citation_link(citation: Citation) -> ResourceLink:
    return ResourceLink(
        type="resource_link",
        uri=citation.uri,
        name=citation.name,
        description=citation.description,
        mimeType=CITATION_MIME_TYPE,
        annotations=Annotations(audience=["assistant"], priority=CITATION_PRIORITY),
    )


def build_tool_content(answer: Answer, include_citations: bool = False) -> List[ToolContent]:
    """Text block carrying ``answer.text`` unmodified, then one link per citation if enabled."""
    content: List[ToolContent] = [TextContent(type="text", text=answer.text)]
    if include_citations:
        content.extend(citation_link(c) for c in answer.citations)
    return content
