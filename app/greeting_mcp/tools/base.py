"""
Base tool definitions.

Defines the uniform error boundary applied to every tool handler and
the ToolSpec record the registry uses to expose handlers over MCP.
"""

import functools
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from greeting_mcp.tools.types import ToolFailure, ToolOutcome
from greeting_mcp.utils import get_logger

logger = get_logger(__name__)

ToolHandler = Callable[..., Awaitable[ToolOutcome]]

DEFAULT_ERROR_PREFIX = "오류"
UNKNOWN_ERROR_MESSAGE = "알 수 없는 오류가 발생했습니다"


def tool_boundary(error_prefix: str = DEFAULT_ERROR_PREFIX) -> Callable[[ToolHandler], ToolHandler]:
    """
    Wrap a tool handler so that no exception escapes it.

    ToolFailure messages are reported verbatim. Any other exception is
    reported as "<error_prefix>: <message>". Both produce an error-flagged
    ToolOutcome instead of propagating to the dispatcher.

    Args:
        error_prefix: Prefix for unexpected exceptions

    Returns:
        Decorator preserving the handler's signature
    """

    def decorator(handler: ToolHandler) -> ToolHandler:
        @functools.wraps(handler)
        async def wrapper(*args: Any, **kwargs: Any) -> ToolOutcome:
            try:
                return await handler(*args, **kwargs)
            except ToolFailure as e:
                logger.info(f"{handler.__name__} reported failure: {e}")
                return ToolOutcome.error(str(e))
            except Exception as e:
                logger.exception(f"Unexpected error in {handler.__name__}")
                message = str(e) or UNKNOWN_ERROR_MESSAGE
                return ToolOutcome.error(f"{error_prefix}: {message}")

        return wrapper

    return decorator


@dataclass(frozen=True)
class ToolSpec:
    """
    Registration record for a tool.

    Attributes:
        name: MCP tool name
        description: Description shown to the calling model
        handler: Async handler; its signature is the input schema
        title: Human readable title
        open_world: Whether the tool reaches outside this process
    """

    name: str
    description: str
    handler: ToolHandler
    title: str
    open_world: bool = False

    @property
    def annotations(self) -> dict[str, Any]:
        """MCP tool annotations."""
        return {
            "title": self.title,
            "readOnlyHint": True,
            "destructiveHint": False,
            "idempotentHint": not self.open_world,
            "openWorldHint": self.open_world,
        }
