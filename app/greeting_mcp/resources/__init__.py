"""
MCP Resources.

Provides a read-only self-description of the server:
- mcp://server/info - name, version, capabilities and tool metadata
"""

import json
from datetime import datetime, timezone
from typing import Any, Optional

from fastmcp import FastMCP

from greeting_mcp import SERVER_NAME, __version__
from greeting_mcp.config import GreetingServerConfig
from greeting_mcp.prompts import PROMPT_DESCRIPTIONS
from greeting_mcp.tools import ToolRegistry
from greeting_mcp.tools.calculator import SUPPORTED_OPERATORS
from greeting_mcp.tools.greeting import SUPPORTED_LANGUAGES
from greeting_mcp.utils import get_logger

logger = get_logger(__name__)

SERVER_INFO_NAME = "server-info"
SERVER_INFO_URI = "mcp://server/info"
SERVER_DESCRIPTION = "다국어 인사, 계산기, 시간 조회 기능을 제공하는 MCP 서버"


def build_server_info(
    registry: ToolRegistry,
    config: GreetingServerConfig,
    now: Optional[datetime] = None,
) -> dict[str, Any]:
    """
    Build the server-info document.

    Everything except the timestamp is the same on every call.

    Args:
        registry: Tool registry (source of tool names and descriptions)
        config: Server configuration
        now: Timestamp override, defaults to the current UTC time

    Returns:
        JSON-serializable dict
    """
    now = now or datetime.now(timezone.utc)

    extra_metadata: dict[str, dict[str, Any]] = {
        "greeting": {"supportedLanguages": SUPPORTED_LANGUAGES},
        "calculator": {"supportedOperators": SUPPORTED_OPERATORS},
        "getCurrentTime": {"defaultTimezone": config.time.default_timezone},
        "generateImage": {
            "model": config.image.model,
            "provider": config.image.provider,
        },
    }

    available_tools = []
    for name in registry.tool_names:
        spec = registry.get(name)
        available_tools.append({
            "name": name,
            "description": spec.description,
            **extra_metadata.get(name, {}),
        })

    return {
        "name": SERVER_NAME,
        "version": __version__,
        "description": SERVER_DESCRIPTION,
        "capabilities": {
            "tools": registry.tool_names,
            "resources": [SERVER_INFO_NAME],
            "prompts": list(PROMPT_DESCRIPTIONS),
        },
        "availableTools": available_tools,
        "availablePrompts": [
            {"name": name, "description": description}
            for name, description in PROMPT_DESCRIPTIONS.items()
        ],
        "status": "running",
        "timestamp": now.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
    }


def register_resources(
    mcp: FastMCP,
    registry: ToolRegistry,
    config: GreetingServerConfig,
) -> None:
    """
    Register resources with the MCP server.

    Args:
        mcp: FastMCP server instance
        registry: Tool registry
        config: Server configuration
    """

    @mcp.resource(
        uri=SERVER_INFO_URI,
        name=SERVER_INFO_NAME,
        description="현재 MCP 서버의 정보를 반환합니다",
        mime_type="application/json",
    )
    async def get_server_info() -> str:
        """Get the server description document."""
        return json.dumps(
            build_server_info(registry, config), indent=2, ensure_ascii=False
        )

    logger.debug(f"Registered resource {SERVER_INFO_URI}")
