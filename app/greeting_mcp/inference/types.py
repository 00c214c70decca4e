"""
Type definitions for text-to-image inference.

A provider answers either with the image itself or with a URL to fetch
it from. The client decides which once, at the call boundary, and hands
back one of the two result types below.
"""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class ImageBytes:
    """Raw image data returned inline by the provider."""

    data: bytes
    content_type: Optional[str] = None


@dataclass(frozen=True)
class ImageUrl:
    """URL the generated image can be downloaded from."""

    url: str


GeneratedImage = Union[ImageBytes, ImageUrl]


class InferenceError(Exception):
    """Base exception for inference errors."""

    pass


class InferenceRequestError(InferenceError):
    """Raised when the provider rejects the request."""

    def __init__(self, status_code: int, detail: str):
        super().__init__(f"Inference request failed ({status_code}): {detail}")
        self.status_code = status_code
        self.detail = detail


class UnexpectedImageFormatError(InferenceError):
    """Raised when the provider response is neither image data nor an image URL."""

    def __init__(self, detail: str = ""):
        message = "예상하지 못한 이미지 형식입니다"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class ImageFetchError(InferenceError):
    """Raised when downloading an image URL fails."""

    def __init__(self, url: str, status_code: int):
        super().__init__(f"Failed to fetch image from {url} ({status_code})")
        self.url = url
        self.status_code = status_code
