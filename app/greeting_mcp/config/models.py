"""
Pydantic models for server configuration.

Configuration is loaded once at startup and passed to the server
components explicitly; nothing reads a global config object.
"""

from typing import Literal, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ServerSettings(BaseModel):
    """Server configuration settings."""

    transport: Literal["stdio"] = Field(
        default="stdio",
        description="Transport protocol to use",
    )
    log_level: Literal["debug", "info", "warning", "error"] = Field(
        default="info",
        description="Logging level",
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional log file, written in addition to stderr",
    )
    strip_unknown_arguments: bool = Field(
        default=True,
        description="Drop tool arguments that are not declared in the tool schema",
    )


class TimeSettings(BaseModel):
    """Settings for the getCurrentTime tool."""

    default_timezone: str = Field(
        default="Asia/Seoul",
        description="IANA timezone used when the caller does not pass one",
    )

    @field_validator("default_timezone")
    @classmethod
    def validate_default_timezone(cls, v: str) -> str:
        """The configured default must itself be a known zone."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError, OSError) as e:
            raise ValueError(f"unknown timezone '{v}'") from e
        return v


class ImageSettings(BaseModel):
    """
    Settings for the generateImage tool.

    Requests go through the Hugging Face inference router, which forwards
    them to the configured provider under its own model id.
    """

    token_env: str = Field(
        default="HF_TOKEN",
        description="Environment variable holding the inference API token",
    )
    router_url: str = Field(
        default="https://router.huggingface.co",
        description="Base URL of the inference router",
    )
    provider: str = Field(
        default="fal-ai",
        description="Inference provider name",
    )
    model: str = Field(
        default="black-forest-labs/FLUX.1-schnell",
        description="Hub model id advertised to callers",
    )
    provider_model_id: str = Field(
        default="fal-ai/flux/schnell",
        description="Model id understood by the provider",
    )
    num_inference_steps: int = Field(
        default=5,
        ge=1,
        le=50,
        description="Inference steps; kept low for speed",
    )
    mime_type: str = Field(
        default="image/png",
        description="MIME type reported for generated images",
    )
    request_timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="Per-request timeout in seconds (unset means no timeout)",
    )


class GreetingServerConfig(BaseModel):
    """
    Main configuration container for the Greeting MCP Server.

    Loaded from YAML files and environment variables, then passed
    to server components via dependency injection.
    """

    server: ServerSettings = Field(default_factory=ServerSettings)
    time: TimeSettings = Field(default_factory=TimeSettings)
    image: ImageSettings = Field(default_factory=ImageSettings)

    # Allow extra fields to be ignored (forward compatibility)
    model_config = ConfigDict(extra="ignore")
