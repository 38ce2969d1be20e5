"""Image loading (local path or URL) and saving."""

from __future__ import annotations

import io
import logging
from pathlib import Path

import httpx
from PIL import Image, UnidentifiedImageError

from mosaic_maker.errors import InputDecodeError, InputNotFound, OutputWriteError

logger = logging.getLogger(__name__)

# Formats without an alpha channel; the canvas is flattened before saving
_OPAQUE_SUFFIXES = frozenset({".jpg", ".jpeg", ".jfif"})


def is_url(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


def _decode(data: bytes | Path, origin: str) -> Image.Image:
    try:
        img = Image.open(io.BytesIO(data) if isinstance(data, bytes) else data)
        img.load()
    except (
        UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError,
    ) as exc:
        raise InputDecodeError(f"Cannot decode image from {origin}: {exc}") from exc
    return img


def fetch_bytes(
    url: str,
    timeout: float = 10.0,
    client: httpx.Client | None = None,
) -> bytes:
    """GET *url* and return the body; anything but HTTP 200 is an error."""
    try:
        if client is None:
            resp = httpx.get(url, timeout=timeout, follow_redirects=True)
        else:
            resp = client.get(url, timeout=timeout, follow_redirects=True)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise InputNotFound(f"Cannot fetch {url}: {exc}") from exc
    if resp.status_code != 200:
        raise InputNotFound(f"File does not exist: {url} (HTTP {resp.status_code})")
    logger.debug("Fetched %d bytes from %s", len(resp.content), url)
    return resp.content


def load_source(
    source: str | Path,
    timeout: float = 10.0,
    client: httpx.Client | None = None,
) -> Image.Image:
    """Load a decoded image from an existing file or an http(s) URL.

    Raises:
        InputNotFound:    not a file, and not a reachable URL answering 200.
        InputDecodeError: the bytes are not a supported raster image.
    """
    path = Path(source)
    if path.is_file():
        logger.info("Loading %s", path)
        return _decode(path, str(path))

    source = str(source)
    if not is_url(source):
        raise InputNotFound(f"File does not exist: {source}")

    logger.info("Downloading %s", source)
    return _decode(fetch_bytes(source, timeout, client), source)


def save_image(image: Image.Image, path: str | Path) -> None:
    """Save *image*; the format is inferred from the file extension.

    The image is written to a sibling ``.part`` file and moved into place
    only once encoding succeeded, so an existing *path* is never left
    truncated or removed by a failed save.
    """
    path = Path(path)
    fmt = Image.registered_extensions().get(path.suffix.lower())
    if fmt is None:
        raise OutputWriteError(f"Cannot write {path}: unknown file extension")
    if path.suffix.lower() in _OPAQUE_SUFFIXES and image.mode != "RGB":
        image = image.convert("RGB")

    tmp = path.with_name(path.name + ".part")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        image.save(tmp, format=fmt)
        tmp.replace(path)
    except (OSError, ValueError) as exc:
        if tmp.is_file():
            tmp.unlink()
        raise OutputWriteError(f"Cannot write {path}: {exc}") from exc
    logger.info("Saved %s", path)
