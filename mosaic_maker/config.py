"""Centralised configuration via a frozen dataclass."""

from __future__ import annotations

from dataclasses import dataclass

from PIL import Image

from mosaic_maker.errors import InvalidConfiguration

# Resampling filters accepted by ``MosaicConfig.resample``
RESAMPLE_FILTERS: dict[str, Image.Resampling] = {
    "lanczos": Image.Resampling.LANCZOS,
    "bicubic": Image.Resampling.BICUBIC,
    "bilinear": Image.Resampling.BILINEAR,
    "hamming": Image.Resampling.HAMMING,
    "box": Image.Resampling.BOX,
    "nearest": Image.Resampling.NEAREST,
}

PATTERN_FITS = ("stretch", "fit")

MIN_TILE_SIZE = 2


@dataclass(frozen=True)
class MosaicConfig:
    """All tuneable parameters for a mosaic run.

    Attributes:
        tile_size:       Each source pixel becomes a tile_size x tile_size square.
        color_alpha:     Opacity of the flat colour tile drawn over the pattern.
        pattern_fit:     "stretch" (exact square) or "fit" (aspect ratio kept).
        resample:        Downsampling filter for the pattern tile.
        request_timeout: Seconds allowed for fetching a remote source.
    """

    # Tiling
    tile_size: int = 20
    color_alpha: int = 127  # ~50% opacity

    # Pattern tile
    pattern_fit: str = "stretch"  # "stretch" | "fit"
    resample: str = "lanczos"  # see RESAMPLE_FILTERS

    # Input
    request_timeout: float = 10.0

    def validate(self) -> None:
        """Raise :class:`InvalidConfiguration` if any field is out of range."""
        if self.tile_size < MIN_TILE_SIZE:
            raise InvalidConfiguration(
                f"Invalid tile size {self.tile_size} (minimum {MIN_TILE_SIZE})"
            )
        if not 0 <= self.color_alpha <= 255:
            raise InvalidConfiguration(
                f"Colour alpha must be within 0..255, got {self.color_alpha}"
            )
        if self.pattern_fit not in PATTERN_FITS:
            raise InvalidConfiguration(
                f"Unknown pattern fit {self.pattern_fit!r}. "
                f"Choose from: {', '.join(PATTERN_FITS)}"
            )
        if self.resample not in RESAMPLE_FILTERS:
            raise InvalidConfiguration(
                f"Unknown resample filter {self.resample!r}. "
                f"Choose from: {', '.join(RESAMPLE_FILTERS)}"
            )
