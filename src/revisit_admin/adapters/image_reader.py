"""Convert local image files into data URIs for preview and storage."""

import asyncio
import base64
import mimetypes
from pathlib import Path


def to_data_uri(content: bytes, media_type: str) -> str:
    """Encode raw image bytes as a base64 data URI."""
    if not media_type.startswith("image/"):
        raise ValueError(f"Unsupported media type: {media_type}")
    encoded = base64.b64encode(content).decode("ascii")
    return f"data:{media_type};base64,{encoded}"


async def read_image_as_data_uri(path: Path) -> str:
    """Read an image file off the event loop and return it as a data URI."""
    media_type, _ = mimetypes.guess_type(path.name)
    if media_type is None or not media_type.startswith("image/"):
        raise ValueError(f"{path.name} is not an image file")
    content = await asyncio.to_thread(path.read_bytes)
    return to_data_uri(content, media_type)
