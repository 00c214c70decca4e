"""
MCP Tools.

Tool handlers are plain async functions wrapped by tool_boundary, so a
failure always comes back as an error-flagged ToolOutcome. The registry
exposes them over MCP.

Tools:
- greeting: localized greeting
- calculator: basic arithmetic
- getCurrentTime: current time in an IANA timezone
- generateImage: text-to-image through the inference router
"""

from greeting_mcp.tools.types import (
    ContentItem,
    ImageItem,
    TextItem,
    ToolFailure,
    ToolOutcome,
)
from greeting_mcp.tools.base import (
    ToolHandler,
    ToolSpec,
    tool_boundary,
)
from greeting_mcp.tools.registry import ToolRegistry

__all__ = [
    # Types
    "ContentItem",
    "ImageItem",
    "TextItem",
    "ToolOutcome",
    "ToolFailure",
    # Base
    "ToolHandler",
    "ToolSpec",
    "tool_boundary",
    # Registry
    "ToolRegistry",
]
