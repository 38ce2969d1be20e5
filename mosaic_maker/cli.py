"""Rich command-line interface powered by Typer."""

from __future__ import annotations

import logging
import time
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from mosaic_maker.compositor import compose
from mosaic_maker.config import MIN_TILE_SIZE, MosaicConfig
from mosaic_maker.errors import InvalidArgumentCount, InvalidTileSize, MosaicError
from mosaic_maker.image_io import load_source, save_image

app = typer.Typer(
    name="mosaic-maker",
    help="Turn every pixel of an image into a tinted thumbnail tile.",
    add_completion=False,
    rich_markup_mode="rich",
)
console = Console()

# Defaults come from MosaicConfig - single source of truth
_DEFAULTS = MosaicConfig()


def _setup_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False, markup=False)],
    )


def parse_tile_size(raw: str) -> int:
    """Parse TILE_SIZE, rejecting non-integers and values below 2."""
    try:
        tile_size = int(raw.strip())
    except ValueError:
        raise InvalidTileSize("TILE_SIZE expects a numeric value") from None
    if tile_size < MIN_TILE_SIZE:
        raise InvalidTileSize(f"Invalid tile size (minimum {MIN_TILE_SIZE})")
    return tile_size


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def make(
    ctx: typer.Context,
    tile_size: str | None = typer.Argument(None, help="Tile edge in pixels (minimum 2)"),
    source: str | None = typer.Argument(None, help="Input image path or http(s) URL"),
    output: Path | None = typer.Argument(None, help="Output file; format from extension"),
) -> None:
    """Create a mosaic where each pixel of SOURCE becomes a TILE_SIZE tile."""
    _setup_logging()
    t0 = time.perf_counter()

    try:
        if output is None or ctx.args:
            raise InvalidArgumentCount(
                "Invalid argument count (expected TILE_SIZE INPUT OUTPUT)"
            )
        size = parse_tile_size(tile_size)
        img = load_source(source, timeout=_DEFAULTS.request_timeout)
        mosaic = compose(img, size, _DEFAULTS)
        save_image(mosaic, output)
    except MosaicError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1) from exc

    elapsed = time.perf_counter() - t0
    console.print(
        f"[green]✓[/green] Saved to {escape(str(output))}  "
        f"[dim]{img.width}x{img.height} -> {mosaic.width}x{mosaic.height}"
        f"  time={elapsed:.1f}s[/dim]"
    )


if __name__ == "__main__":
    app()
