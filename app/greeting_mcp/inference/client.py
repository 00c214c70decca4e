"""
Async text-to-image client.

Talks to the Hugging Face inference router over httpx. The router proxies
the request to the configured provider, which answers with either image
bytes or a JSON body pointing at the generated image.
"""

import base64
from typing import Any, Optional
from urllib.parse import unquote_to_bytes, urlparse

import httpx

from greeting_mcp.config import ImageSettings
from greeting_mcp.inference.types import (
    GeneratedImage,
    ImageBytes,
    ImageFetchError,
    ImageUrl,
    InferenceRequestError,
    UnexpectedImageFormatError,
)
from greeting_mcp.utils import get_logger

logger = get_logger(__name__)


class TextToImageClient:
    """
    Generates images through the inference router.

    Every call opens its own httpx.AsyncClient; the client holds no
    connection state between calls. Nothing is retried.
    """

    def __init__(
        self,
        settings: ImageSettings,
        token: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            settings: Image generation settings
            token: Inference API token
            transport: Optional httpx transport (tests inject a MockTransport)
        """
        self.settings = settings
        self._token = token
        self._transport = transport

    @property
    def endpoint(self) -> str:
        """Router URL for the configured provider and model."""
        base = self.settings.router_url.rstrip("/")
        return f"{base}/{self.settings.provider}/{self.settings.provider_model_id}"

    def _client(self, **kwargs: Any) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            transport=self._transport,
            timeout=httpx.Timeout(self.settings.request_timeout),
            **kwargs,
        )

    async def generate(self, prompt: str) -> GeneratedImage:
        """
        Request an image for the prompt.

        Args:
            prompt: Text prompt (English works best)

        Returns:
            ImageBytes or ImageUrl, depending on what the provider sent

        Raises:
            InferenceRequestError: If the provider answers with an error status
            UnexpectedImageFormatError: If the answer holds no image
        """
        payload = {
            "prompt": prompt,
            "num_inference_steps": self.settings.num_inference_steps,
        }
        logger.info(
            f"Requesting image from {self.settings.provider} "
            f"({self.settings.model}, steps={self.settings.num_inference_steps})"
        )

        async with self._client(
            headers={"Authorization": f"Bearer {self._token}"}
        ) as client:
            response = await client.post(self.endpoint, json=payload)

        if response.is_error:
            raise InferenceRequestError(response.status_code, _error_detail(response))

        return classify_response(response)

    async def fetch(self, url: str) -> bytes:
        """
        Download an image URL returned by the provider.

        Raises:
            ImageFetchError: If the download answers with an error status
        """
        logger.debug(f"Fetching generated image from {url}")
        async with self._client(follow_redirects=True) as client:
            response = await client.get(url)

        if response.is_error:
            raise ImageFetchError(url, response.status_code)

        return response.content


def classify_response(response: httpx.Response) -> GeneratedImage:
    """
    Decide what kind of image result a provider response carries.

    Raises:
        UnexpectedImageFormatError: If it carries neither bytes nor a URL
    """
    content_type = response.headers.get("content-type", "")
    if content_type.startswith("image/"):
        return ImageBytes(data=response.content, content_type=content_type)

    try:
        body = response.json()
    except ValueError:
        raise UnexpectedImageFormatError(f"content-type '{content_type}'")

    url = _first_image_url(body)
    if url is None:
        raise UnexpectedImageFormatError("no image url in response")

    return classify_url(url)


def classify_url(url: str) -> GeneratedImage:
    """
    Classify an image URL.

    Inline data: URIs are decoded right away; http(s) URLs are left to fetch.
    """
    if url.startswith("data:"):
        header, _, data = url[len("data:"):].partition(",")
        media_type = header.split(";")[0] or None
        if header.endswith(";base64"):
            return ImageBytes(data=base64.b64decode(data), content_type=media_type)
        return ImageBytes(data=unquote_to_bytes(data), content_type=media_type)

    if urlparse(url).scheme in ("http", "https"):
        return ImageUrl(url=url)

    raise UnexpectedImageFormatError(f"unsupported url '{url[:40]}'")


def _first_image_url(body: Any) -> Optional[str]:
    """Extract images[0].url from a provider JSON body."""
    if not isinstance(body, dict):
        return None
    images = body.get("images")
    if not isinstance(images, list) or not images:
        return None
    first = images[0]
    if isinstance(first, dict) and isinstance(first.get("url"), str):
        return first["url"]
    if isinstance(first, str):
        return first
    return None


def _error_detail(response: httpx.Response) -> str:
    """Best-effort error message from a provider error response."""
    try:
        body = response.json()
    except ValueError:
        return response.text[:200] or response.reason_phrase
    if isinstance(body, dict):
        for key in ("error", "detail", "message"):
            if body.get(key):
                return str(body[key])
    return str(body)[:200]
