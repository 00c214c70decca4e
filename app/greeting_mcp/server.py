"""
FastMCP Server Setup.

This module creates and configures the MCP server instance.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import httpx
from fastmcp import FastMCP

from greeting_mcp import SERVER_NAME, __version__
from greeting_mcp.config import GreetingServerConfig
from greeting_mcp.tools import ToolRegistry
from greeting_mcp.utils import get_logger

logger = get_logger(__name__)


def create_server(
    config: GreetingServerConfig,
    image_transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastMCP:
    """
    Create and configure the MCP server.

    Args:
        config: Server configuration
        image_transport: Optional httpx transport for the image provider

    Returns:
        Configured FastMCP instance
    """
    tool_registry = ToolRegistry(config, image_transport=image_transport)

    @asynccontextmanager
    async def lifespan(server: FastMCP) -> AsyncIterator[None]:
        """Log server start and shutdown."""
        logger.info(f"{SERVER_NAME} v{__version__} starting...")
        yield
        logger.info(f"{SERVER_NAME} shutting down...")

    mcp = FastMCP(
        name=SERVER_NAME,
        version=__version__,
        lifespan=lifespan,
    )

    _register_middleware(mcp, config)

    tool_registry.register_with_mcp(mcp)
    logger.info(f"Registered tools: {', '.join(tool_registry.tool_names)}")

    _register_resources(mcp, tool_registry, config)

    _register_prompts(mcp)

    return mcp


def _register_resources(
    mcp: FastMCP,
    tool_registry: ToolRegistry,
    config: GreetingServerConfig,
) -> None:
    """Register the server-info resource."""
    from greeting_mcp.resources import register_resources

    register_resources(mcp, tool_registry, config)


def _register_prompts(mcp: FastMCP) -> None:
    """Register the code_review prompt."""
    from greeting_mcp.prompts import register_prompts

    register_prompts(mcp)


def _register_middleware(mcp: FastMCP, config: GreetingServerConfig) -> None:
    """
    Register MCP middleware for request processing.

    Args:
        mcp: FastMCP server instance
        config: Server configuration
    """
    if not config.server.strip_unknown_arguments:
        return

    from greeting_mcp.middleware import ToolCallPreprocessor

    mcp.add_middleware(ToolCallPreprocessor())
    logger.debug("Registered ToolCallPreprocessor middleware")
