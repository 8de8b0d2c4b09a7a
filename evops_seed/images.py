import posixpath
from typing import Dict, Tuple

import httpx
import orjson

from .errors import UploadError


def image_route(api_url: str, event_id: str) -> str:
    return f"{api_url}v1/events/{event_id}/images"


async def create_multipart_request(
    client: httpx.AsyncClient, image_url: str
) -> Dict[str, Tuple[str, bytes, str]]:
    """Fetch `image_url` and wrap its bytes as the `image` file field."""
    r = await client.get(image_url)
    r.raise_for_status()
    filename = posixpath.basename(httpx.URL(image_url).path) or "image"
    content_type = r.headers.get("content-type", "application/octet-stream")
    return {"image": (filename, r.content, content_type)}


async def push_image(api, event_id: str, image_url: str) -> str:
    files = await create_multipart_request(api.client, image_url)
    r = await api.client.post(image_route(api.url, event_id), files=files)
    r.raise_for_status()
    try:
        body = orjson.loads(r.content)
    except orjson.JSONDecodeError as e:
        raise UploadError(f"upload for event {event_id} returned a non-json body: {r.text[:200]!r}") from e
    if not isinstance(body, dict) or "image_id" not in body:
        raise UploadError(f"upload for event {event_id} returned no image_id: {r.text[:200]}")
    return str(body["image_id"])
