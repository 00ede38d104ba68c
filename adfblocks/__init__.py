"""Parse, build and interpret the blocks of Amiga OFS/FFS volumes."""

__version__ = "0.1.0"

__all__ = [
    "amigatime",
    "blocks",
    "constants",
    "errors",
    "filesize",
    "interpret",
    "salvage",
    "volume",
]