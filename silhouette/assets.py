"""Named storage for fonts and textures loaded from disk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from PIL import Image

from silhouette.colour import TRANSPARENT, Colour
from silhouette.namehash import NameHash

log = logging.getLogger(__name__)

Name = Union[NameHash, str]
PathLike = Union[str, Path]

# Leading bytes of the font containers that can be rendered.
_FONT_SIGNATURES = (
    b"\x00\x01\x00\x00",
    b"OTTO",
    b"true",
    b"typ1",
    b"ttcf",
    b"wOFF",
    b"wOF2",
)


class AssetLoadError(OSError):
    """An asset file could not be read or decoded."""


class AssetManager:
    """Holds fonts and textures under hashed names.

    Fonts are kept as the raw bytes of their file; textures as RGBA images.
    Loading under a name that is already in use leaves the existing asset.
    """

    def __init__(self):
        self._fonts: dict[NameHash, bytes] = {}
        self._textures: dict[NameHash, Image.Image] = {}

    def load_font(self, name: Name, filename: PathLike) -> None:
        key = NameHash(name)
        if key in self._fonts:
            log.warning("Can't load font to %r because that name is already in use.", key)
            return
        try:
            data = Path(filename).read_bytes()
        except OSError as exc:
            raise AssetLoadError(f"failed to read font file {filename}") from exc
        if not data.startswith(_FONT_SIGNATURES):
            raise AssetLoadError(f"{filename} is not a recognised font file")
        self._fonts[key] = data

    def find_font(self, name: Name) -> Optional[bytes]:
        return self._fonts.get(NameHash(name))

    def load_texture(
        self,
        name: Name,
        filename: PathLike,
        transparent_colour: Colour = TRANSPARENT,
    ) -> None:
        """Load an image; pixels exactly matching transparent_colour get alpha 0."""
        key = NameHash(name)
        if key in self._textures:
            log.warning("Can't load texture to %r because that name is already in use.", key)
            return
        try:
            with Image.open(filename) as source:
                image = source.convert("RGBA")
        except OSError as exc:
            raise AssetLoadError(f"failed to load image {filename}") from exc

        if transparent_colour != TRANSPARENT:
            mask = tuple(transparent_colour)
            image.putdata(
                [
                    (r, g, b, 0) if (r, g, b, a) == mask else (r, g, b, a)
                    for r, g, b, a in image.getdata()
                ]
            )
        self._textures[key] = image

    def find_texture(self, name: Name) -> Optional[Image.Image]:
        return self._textures.get(NameHash(name))