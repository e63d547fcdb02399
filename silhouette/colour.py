"""RGBA colours and parsing of the colour strings found in Tiled maps."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Colour:
    """An 8-bit RGBA colour; alpha defaults to opaque."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    def __iter__(self):
        yield self.r
        yield self.g
        yield self.b
        yield self.a


BLACK = Colour(0, 0, 0)
WHITE = Colour(255, 255, 255)
RED = Colour(255, 0, 0)
GREEN = Colour(0, 255, 0)
TRANSPARENT = Colour(0, 0, 0, 0)


def _hex_byte(text: str, start: int) -> int:
    part = text[start:start + 2]
    if not part:
        raise ValueError(f"colour string {text!r} is too short")
    return int(part, 16) & 0xFF


def parse_tiled_colour(text: str) -> Colour:
    """Parse a Tiled colour of the form "#aarrggbb"."""
    alpha = _hex_byte(text, 1)
    red = _hex_byte(text, 3)
    green = _hex_byte(text, 5)
    blue = _hex_byte(text, 7)
    return Colour(red, green, blue, alpha)


def colour_to_vec3(colour: Colour) -> tuple[float, float, float]:
    """The RGB part of a colour scaled to the range 0..1."""
    return (colour.r / 255.0, colour.g / 255.0, colour.b / 255.0)