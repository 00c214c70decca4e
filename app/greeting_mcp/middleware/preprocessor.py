"""
Tool Call Preprocessor Middleware.

Filters tool call arguments down to the ones declared in the tool's
input schema. Some MCP clients attach bookkeeping fields (toolCallId and
the like) that would otherwise fail validation.
"""

from fastmcp.server.middleware import Middleware, MiddlewareContext
from fastmcp.server.middleware.middleware import CallNext, ToolResult

from greeting_mcp.utils import get_logger

logger = get_logger(__name__)


class ToolCallPreprocessor(Middleware):
    """
    Whitelist tool call arguments against the tool's schema.

    How it works:
    1. Intercepts tool calls via on_call_tool()
    2. Looks up the tool definition on the FastMCP server
    3. Keeps only arguments named in tool.parameters['properties']
    4. Passes the cleaned arguments on to validation and the handler

    Example:
        Incoming: {"name": "Ada", "language": "english", "toolCallId": "call_x"}
        Schema allows: ["name", "language"]
        Outgoing: {"name": "Ada", "language": "english"}
    """

    async def on_call_tool(
        self,
        context: MiddlewareContext,
        call_next: CallNext,
    ) -> ToolResult:
        await self._filter_to_schema(context)
        return await call_next(context)

    async def _filter_to_schema(self, context: MiddlewareContext) -> None:
        """Filter arguments in place to the schema-declared parameters."""
        message = context.message
        if not getattr(message, "arguments", None):
            return

        tool_name = message.name

        try:
            server = context.fastmcp_context.fastmcp
            tool = await server.get_tool(tool_name)
        except Exception as e:
            logger.debug(f"Could not retrieve tool '{tool_name}': {e}")
            return

        allowed_params = extract_allowed_params(tool.parameters)
        if allowed_params is None:
            logger.debug(f"Tool '{tool_name}' has no usable schema, skipping filter")
            return

        removed_fields = set(message.arguments) - allowed_params
        if not removed_fields:
            return

        logger.info(f"Tool '{tool_name}': dropped undeclared arguments {sorted(removed_fields)}")
        for key in removed_fields:
            del message.arguments[key]


def extract_allowed_params(schema: object) -> set[str] | None:
    """
    Extract the set of allowed parameter names from a JSON Schema.

    Returns:
        Set of parameter names, or None if the schema is malformed
    """
    if not isinstance(schema, dict):
        return None

    properties = schema.get("properties")
    if not isinstance(properties, dict):
        return None

    return set(properties.keys())
