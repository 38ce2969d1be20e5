"""
Mosaic Maker
============

Blow an image up so that every pixel becomes a square tile: a thumbnail
of the whole picture, tinted with that pixel's colour at half opacity.
"""

__version__ = "1.0.0"

from mosaic_maker.compositor import (
    build_color_tile,
    build_pattern_tile,
    compose,
    output_size,
)
from mosaic_maker.config import MosaicConfig
from mosaic_maker.errors import (
    EmptySourceImage,
    InputDecodeError,
    InputNotFound,
    InvalidArgumentCount,
    InvalidConfiguration,
    InvalidTileSize,
    MosaicError,
    OutputWriteError,
)
from mosaic_maker.image_io import load_source, save_image

__all__ = [
    "EmptySourceImage",
    "InputDecodeError",
    "InputNotFound",
    "InvalidArgumentCount",
    "InvalidConfiguration",
    "InvalidTileSize",
    "MosaicConfig",
    "MosaicError",
    "OutputWriteError",
    "build_color_tile",
    "build_pattern_tile",
    "compose",
    "load_source",
    "output_size",
    "save_image",
]
