"""
Type definitions for tool results.

Handlers return a ToolOutcome; the registry turns it into MCP content
when the call is answered.
"""

from dataclasses import dataclass, field
from typing import Optional, Union

from mcp.types import Annotations, ImageContent, TextContent


@dataclass(frozen=True)
class TextItem:
    """A plain text content item."""

    text: str

    def to_mcp(self) -> TextContent:
        return TextContent(type="text", text=self.text)


@dataclass(frozen=True)
class ImageItem:
    """
    A base64-encoded image content item.

    Attributes:
        data: Base64-encoded image bytes
        mime_type: MIME type of the decoded image
        audience: Display hint for renderers ("user", "assistant")
        priority: Display priority hint between 0 and 1
    """

    data: str
    mime_type: str
    audience: tuple[str, ...] = ()
    priority: Optional[float] = None

    def to_mcp(self) -> ImageContent:
        annotations = None
        if self.audience or self.priority is not None:
            annotations = Annotations(
                audience=list(self.audience) or None,
                priority=self.priority,
            )
        return ImageContent(
            type="image",
            data=self.data,
            mimeType=self.mime_type,
            annotations=annotations,
        )


ContentItem = Union[TextItem, ImageItem]


@dataclass
class ToolOutcome:
    """
    Result of a tool call.

    Attributes:
        content: Ordered content items
        is_error: True when the content reports a failure to the caller
    """

    content: list[ContentItem] = field(default_factory=list)
    is_error: bool = False

    @classmethod
    def ok(cls, text: str) -> "ToolOutcome":
        """Create a successful single-text outcome."""
        return cls(content=[TextItem(text)])

    @classmethod
    def error(cls, text: str) -> "ToolOutcome":
        """Create an error-flagged single-text outcome."""
        return cls(content=[TextItem(text)], is_error=True)

    @property
    def text(self) -> str:
        """All text items joined by newlines."""
        return "\n".join(
            item.text for item in self.content if isinstance(item, TextItem)
        )

    def to_mcp_content(self) -> list[TextContent | ImageContent]:
        """Convert to MCP content blocks."""
        return [item.to_mcp() for item in self.content]


class ToolFailure(Exception):
    """
    A failure the tool reports back to the caller.

    The message is shown to the caller verbatim as an error-flagged result.
    """

    pass
