from typing import Any
import httpx
from loguru import logger
from ..config import UpstreamConfig
from ..models.generation import TextToImageRequest


# Raised when the text to image service answers with a non 2xx status.
class UpstreamError(Exception):

    def __init__(self, status_code: int, body: str | None, *args: object) -> None:
        super().__init__(*args)
        self.status_code = status_code
        self.body = body

    def __str__(self) -> str:
        return f"upstream status code: {self.status_code}, body: [{self.body}]"


def generated_image_url(payload: Any) -> str | None:
    if not isinstance(payload, dict):
        return None

    url = payload.get("generated_image")
    if isinstance(url, str) and url:
        return url
    return None


class TextToImageClient:

    def __init__(
        self, conf: UpstreamConfig, transport: httpx.AsyncBaseTransport | None = None
    ) -> None:
        self.conf = conf
        self._transport = transport

    def headers(self) -> dict[str, str]:
        return {
            "x-rapidapi-key": self.conf.api_key.strip(),
            "x-rapidapi-host": self.conf.host,
            "Content-Type": "application/json",
        }

    async def generate(self, prompt: str, width: int, height: int) -> str | None:
        """Ask the service for one image, return its url or None when the
        service did not send one back.

        Transport errors from httpx propagate to the caller untouched.
        """
        body = TextToImageRequest(text=prompt, width=width, height=height)

        async with httpx.AsyncClient(timeout=None, transport=self._transport) as client:
            resp = await client.post(
                self.conf.url, json=body.model_dump(), headers=self.headers()
            )

        if not resp.is_success:
            logger.error(
                f"text to image service response status code {resp.status_code}, detail: {resp.text}"
            )
            raise UpstreamError(resp.status_code, resp.text or None)

        return generated_image_url(resp.json())
