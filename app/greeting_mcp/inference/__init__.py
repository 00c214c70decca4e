"""
Text-to-image inference client.

Exports the client, the ImageBytes/ImageUrl result types and the
inference exceptions.
"""

from greeting_mcp.inference.types import (
    GeneratedImage,
    ImageBytes,
    ImageFetchError,
    ImageUrl,
    InferenceError,
    InferenceRequestError,
    UnexpectedImageFormatError,
)
from greeting_mcp.inference.client import (
    TextToImageClient,
    classify_response,
    classify_url,
)

__all__ = [
    # Types
    "GeneratedImage",
    "ImageBytes",
    "ImageUrl",
    # Exceptions
    "InferenceError",
    "InferenceRequestError",
    "UnexpectedImageFormatError",
    "ImageFetchError",
    # Client
    "TextToImageClient",
    "classify_response",
    "classify_url",
]
