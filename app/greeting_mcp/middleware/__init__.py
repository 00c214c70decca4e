"""
MCP Middleware for request preprocessing.

Contains:
- ToolCallPreprocessor: Filters undeclared parameters from tool calls
"""

from greeting_mcp.middleware.preprocessor import (
    ToolCallPreprocessor,
    extract_allowed_params,
)

__all__ = [
    "ToolCallPreprocessor",
    "extract_allowed_params",
]
