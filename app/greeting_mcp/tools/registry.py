"""
Tool Registry.

Builds the tool specs from configuration and registers them with FastMCP.
The registry is the single source of tool names for the rest of the server.
"""

import functools
from types import MappingProxyType
from typing import Any, Mapping, Optional

import httpx
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools.tool import ToolResult

from greeting_mcp.config import GreetingServerConfig
from greeting_mcp.tools import calculator, clock, greeting, image
from greeting_mcp.tools.base import ToolSpec
from greeting_mcp.utils import get_logger

logger = get_logger(__name__)


class ToolRegistry:
    """
    Maps tool names to their specs.

    The mapping is built once and is read-only afterwards.
    """

    def __init__(
        self,
        config: GreetingServerConfig,
        image_transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize registry.

        Args:
            config: Server configuration
            image_transport: Optional httpx transport for the image provider
        """
        self.config = config
        specs = [
            ToolSpec(
                name="greeting",
                description=greeting.DESCRIPTION,
                handler=greeting.greeting,
                title="Greeting",
            ),
            ToolSpec(
                name="calculator",
                description=calculator.DESCRIPTION,
                handler=calculator.calculator,
                title="Calculator",
            ),
            ToolSpec(
                name="getCurrentTime",
                description=clock.DESCRIPTION,
                handler=clock.make_current_time_tool(config.time.default_timezone),
                title="Current Time",
            ),
            ToolSpec(
                name="generateImage",
                description=image.DESCRIPTION,
                handler=image.make_generate_image_tool(config.image, image_transport),
                title="Generate Image",
                open_world=True,
            ),
        ]
        self._tools: Mapping[str, ToolSpec] = MappingProxyType(
            {spec.name: spec for spec in specs}
        )

    @property
    def tool_names(self) -> list[str]:
        """Names of all tools, in registration order."""
        return list(self._tools.keys())

    def get(self, name: str) -> ToolSpec | None:
        """Get a tool spec by name."""
        return self._tools.get(name)

    def register_with_mcp(self, mcp: FastMCP) -> None:
        """
        Register all tools with the FastMCP server.

        Args:
            mcp: FastMCP server instance
        """
        for spec in self._tools.values():
            mcp.tool(
                _bind(spec),
                name=spec.name,
                description=spec.description,
                annotations=spec.annotations,
                output_schema=None,
            )
            logger.debug(f"Registered tool {spec.name}")


def _bind(spec: ToolSpec):
    """
    Adapt a tool handler to FastMCP.

    The handler's signature (and so the input schema) is kept. Error
    outcomes are raised as ToolError, which FastMCP answers with
    isError=true and the message as text content.
    """
    handler = spec.handler

    @functools.wraps(handler)
    async def call_tool(*args: Any, **kwargs: Any) -> ToolResult:
        outcome = await handler(*args, **kwargs)
        if outcome.is_error:
            raise ToolError(outcome.text)
        return ToolResult(content=outcome.to_mcp_content())

    return call_tool
