# tests/unit/test_middleware.py
"""
Unit tests for the tool call preprocessor.
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from greeting_mcp.middleware import ToolCallPreprocessor, extract_allowed_params


class TestExtractAllowedParams:
    """Tests for schema parameter extraction."""

    def test_properties(self):
        schema = {"type": "object", "properties": {"name": {}, "language": {}}}
        assert extract_allowed_params(schema) == {"name", "language"}

    def test_missing_properties(self):
        assert extract_allowed_params({"type": "object"}) is None

    def test_non_dict_schema(self):
        assert extract_allowed_params(["name"]) is None


def _context(arguments: dict, schema: dict):
    tool = SimpleNamespace(parameters=schema)
    server = MagicMock()
    server.get_tool = AsyncMock(return_value=tool)
    return SimpleNamespace(
        message=SimpleNamespace(name="greeting", arguments=arguments),
        fastmcp_context=SimpleNamespace(fastmcp=server),
    )


class TestToolCallPreprocessor:
    """Tests for argument filtering."""

    @pytest.mark.asyncio
    async def test_undeclared_arguments_dropped(self):
        arguments = {"name": "Ada", "language": "english", "toolCallId": "call_1"}
        context = _context(arguments, {"properties": {"name": {}, "language": {}}})
        call_next = AsyncMock(return_value="result")

        result = await ToolCallPreprocessor().on_call_tool(context, call_next)

        assert result == "result"
        assert arguments == {"name": "Ada", "language": "english"}
        call_next.assert_awaited_once_with(context)

    @pytest.mark.asyncio
    async def test_unknown_tool_left_alone(self):
        arguments = {"x": 1}
        context = _context(arguments, {})
        context.fastmcp_context.fastmcp.get_tool = AsyncMock(side_effect=KeyError("nope"))
        call_next = AsyncMock()

        await ToolCallPreprocessor().on_call_tool(context, call_next)

        assert arguments == {"x": 1}
        call_next.assert_awaited_once()
