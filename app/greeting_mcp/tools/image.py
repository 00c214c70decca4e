# tools/image.py

import base64
import os
from typing import Annotated, Optional

import httpx
from pydantic import Field

from greeting_mcp.config import ImageSettings
from greeting_mcp.inference import (
    ImageBytes,
    ImageUrl,
    TextToImageClient,
    UnexpectedImageFormatError,
)
from greeting_mcp.tools.base import ToolHandler, tool_boundary
from greeting_mcp.tools.types import ImageItem, ToolFailure, ToolOutcome
from greeting_mcp.utils import get_logger

logger = get_logger(__name__)

DESCRIPTION = "텍스트 프롬프트를 입력받아 AI 이미지를 생성합니다"

ERROR_PREFIX = "이미지 생성 중 오류가 발생했습니다"

IMAGE_AUDIENCE = ("user",)
IMAGE_PRIORITY = 0.9


class MissingCredentialError(ToolFailure):
    """Raised when the API token environment variable is not set."""

    def __init__(self, env_var: str):
        super().__init__(
            f"오류: {env_var} 환경 변수가 설정되지 않았습니다. "
            "Hugging Face API 토큰이 필요합니다."
        )
        self.env_var = env_var


def make_generate_image_tool(
    settings: ImageSettings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> ToolHandler:
    """
    Build the generateImage handler.

    The token is read from the environment on every call, so a missing
    token is a per-call error rather than a startup failure.

    Args:
        settings: Image generation settings
        transport: Optional httpx transport passed to the inference client

    Returns:
        Async handler returning a single image item
    """

    @tool_boundary(ERROR_PREFIX)
    async def generate_image(
        prompt: Annotated[str, Field(description="생성할 이미지를 설명하는 텍스트 프롬프트 (영어로 입력)")],
    ) -> ToolOutcome:
        """Generate an image from a text prompt."""
        token = os.environ.get(settings.token_env)
        if not token:
            raise MissingCredentialError(settings.token_env)

        client = TextToImageClient(settings, token, transport=transport)
        result = await client.generate(prompt)

        if isinstance(result, ImageBytes):
            data = result.data
        elif isinstance(result, ImageUrl):
            data = await client.fetch(result.url)
        else:
            raise UnexpectedImageFormatError()

        logger.info(f"Generated image ({len(data)} bytes)")
        return ToolOutcome(
            content=[
                ImageItem(
                    data=base64.b64encode(data).decode("ascii"),
                    mime_type=settings.mime_type,
                    audience=IMAGE_AUDIENCE,
                    priority=IMAGE_PRIORITY,
                )
            ]
        )

    return generate_image
