"""Exception hierarchy shared by the compositor and its collaborators."""

from __future__ import annotations


class MosaicError(Exception):
    """Base class for every failure the CLI reports to the user."""


# -- Core --------------------------------------------------------------

class InvalidConfiguration(MosaicError):
    """A run parameter is out of range (tile size, alpha, filter ...)."""


class EmptySourceImage(MosaicError):
    """The source image has zero width or height."""


# -- Collaborator boundary ---------------------------------------------

class InvalidArgumentCount(MosaicError):
    """The command line does not hold exactly TILE_SIZE INPUT OUTPUT."""


class InvalidTileSize(InvalidConfiguration):
    """TILE_SIZE on the command line is not an integer >= 2."""


class InputNotFound(MosaicError):
    """Neither an existing file nor a reachable URL."""


class InputDecodeError(MosaicError):
    """Bytes were read but are not a decodable raster image."""


class OutputWriteError(MosaicError):
    """Encoding or writing the output image failed."""
