"""
Configuration system for the Greeting MCP Server.

Exports:
    GreetingServerConfig: Main configuration container
    load_config: Load configuration from YAML/env
"""

from greeting_mcp.config.models import (
    GreetingServerConfig,
    ImageSettings,
    ServerSettings,
    TimeSettings,
)
from greeting_mcp.config.loader import load_config

__all__ = [
    "GreetingServerConfig",
    "ImageSettings",
    "ServerSettings",
    "TimeSettings",
    "load_config",
]
