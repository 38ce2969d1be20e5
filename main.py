#!/usr/bin/env python3
"""
main.py — Quick-start entry point.

    python main.py 20 photo.jpg mosaic.png
    python main.py 20 "https://example.com/photo.jpg" mosaic.png

Or use the installed script / module:

    mosaic-maker 20 photo.jpg mosaic.png
    python -m mosaic_maker 20 photo.jpg mosaic.png
"""

from mosaic_maker.cli import app

if __name__ == "__main__":
    app()
