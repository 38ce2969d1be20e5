"""Pixel-to-tile expansion: the mosaic compositor.

Every source pixel becomes a ``tile_size x tile_size`` square on the
output canvas, built from two layers composited "source-over":

1. the *pattern tile*, a thumbnail of the whole source image, shared by
   every placement;
2. a flat *colour tile* holding that pixel's RGB at a fixed alpha.

Placements never overlap, so the loop order has no effect on the result.
"""

from __future__ import annotations

import dataclasses
import logging
import time

import numpy as np
from PIL import Image

from mosaic_maker.config import RESAMPLE_FILTERS, MosaicConfig
from mosaic_maker.errors import EmptySourceImage, InvalidConfiguration

logger = logging.getLogger(__name__)

BYTES_PER_PIXEL = 4  # RGBA8


def compute_pattern_size(
    source_width: int,
    source_height: int,
    tile_size: int,
    fit: str = "stretch",
) -> tuple[int, int]:
    """Size (w, h) of the pattern tile for a source of the given size.

    ``"stretch"`` always yields ``(tile_size, tile_size)``.  ``"fit"``
    keeps the aspect ratio: the longest side becomes *tile_size*, the
    other is scaled proportionally (rounded, minimum 1).
    """
    if fit == "stretch":
        return tile_size, tile_size
    if fit != "fit":
        raise InvalidConfiguration(f"Unknown pattern fit {fit!r}")
    if source_width >= source_height:
        w = tile_size
        h = max(1, round(source_height * tile_size / source_width))
    else:
        h = tile_size
        w = max(1, round(source_width * tile_size / source_height))
    return w, h


def output_size(source_size: tuple[int, int], tile_size: int) -> tuple[int, int]:
    """Canvas size (w, h) for a source of *source_size*."""
    w, h = source_size
    return w * tile_size, h * tile_size


def estimate_canvas_bytes(source_size: tuple[int, int], tile_size: int) -> int:
    """Approximate peak memory of the canvas (4 bytes per output pixel)."""
    w, h = output_size(source_size, tile_size)
    return w * h * BYTES_PER_PIXEL


def tile_origin(x: int, y: int, tile_size: int) -> tuple[int, int]:
    """Top-left canvas coordinate of the tile for source pixel (x, y)."""
    return x * tile_size, y * tile_size


def build_pattern_tile(
    source: Image.Image,
    tile_size: int,
    fit: str = "stretch",
    resample: str = "lanczos",
) -> Image.Image:
    """Downsample the whole *source* into the shared RGBA pattern tile."""
    if resample not in RESAMPLE_FILTERS:
        raise InvalidConfiguration(f"Unknown resample filter {resample!r}")
    size = compute_pattern_size(source.width, source.height, tile_size, fit)
    tile = source.convert("RGBA").resize(size, RESAMPLE_FILTERS[resample])
    logger.debug("Pattern tile: %dx%d (%s, %s)", size[0], size[1], fit, resample)
    return tile


def build_color_tile(
    rgb: tuple[int, int, int],
    tile_size: int,
    alpha: int = 127,
) -> Image.Image:
    """Flat RGBA tile filled with (R, G, B, *alpha*)."""
    r, g, b = (int(c) for c in rgb)
    return Image.new("RGBA", (tile_size, tile_size), (r, g, b, alpha))


def compose(
    source: Image.Image,
    tile_size: int,
    config: MosaicConfig | None = None,
) -> Image.Image:
    """Expand every pixel of *source* into a composited tile.

    Args:
        source:    Decoded image in any Pillow mode (converted to RGBA).
        tile_size: Edge length of each output tile, at least 2.
        config:    Remaining parameters (alpha, fit policy, filter).
                   Its own ``tile_size`` is overridden by *tile_size*.

    Returns:
        RGBA image of size ``(W * tile_size, H * tile_size)``.

    Raises:
        EmptySourceImage: the source has zero width or height.
        InvalidConfiguration: *tile_size* < 2 or another bad parameter.
    """
    cfg = dataclasses.replace(config or MosaicConfig(), tile_size=tile_size)
    cfg.validate()

    width, height = source.size
    if width == 0 or height == 0:
        raise EmptySourceImage(f"Source image is empty ({width}x{height})")

    rgba = source.convert("RGBA")
    canvas_size = output_size(rgba.size, tile_size)
    logger.info(
        "Composing %dx%d source -> %dx%d canvas (tile %d, ~%.1f MiB)",
        width, height, canvas_size[0], canvas_size[1], tile_size,
        estimate_canvas_bytes(rgba.size, tile_size) / 2**20,
    )
    t0 = time.perf_counter()

    pattern = build_pattern_tile(rgba, tile_size, cfg.pattern_fit, cfg.resample)
    canvas = Image.new("RGBA", canvas_size, (0, 0, 0, 0))
    pixels = np.asarray(rgba)

    for y in range(height):
        for x in range(width):
            dest = tile_origin(x, y, tile_size)
            canvas.alpha_composite(pattern, dest=dest)
            color = build_color_tile(pixels[y, x, :3], tile_size, cfg.color_alpha)
            canvas.alpha_composite(color, dest=dest)

    logger.info("Canvas ready  (%.1f s)", time.perf_counter() - t0)
    return canvas
