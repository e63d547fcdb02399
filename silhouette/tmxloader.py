"""Loading tiles and objects from CSV tile files and Tiled TMX maps."""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Iterator, Optional, Union

from silhouette.hitresult import TILE_HEIGHT, TILE_WIDTH
from silhouette.mathutil import Rect, Vec2
from silhouette.namehash import NameHash

log = logging.getLogger(__name__)

PathLike = Union[str, Path]
SpawnObject = Callable[[Any, NameHash, Vec2], None]
SpawnArea = Callable[[Any, NameHash, Rect, ET.Element], None]

INVALID_NAME = NameHash("Invalid")

_NUMBER = re.compile(r"\s*([-+]?\d+)")
_INT_PREFIX = re.compile(r"\s*([-+]?\d+)")


def _tile_tokens(text: str) -> Iterator[Union[str, int]]:
    """Yield ",", "\\n" and integers; stop at the first unreadable text."""
    pos = 0
    while pos < len(text):
        ch = text[pos]
        if ch in ",\n":
            yield ch
            pos += 1
            continue
        match = _NUMBER.match(text, pos)
        if match is None:
            return
        yield int(match.group(1))
        pos = match.end()


def _as_int(element: Optional[ET.Element], name: str, default: int = 0) -> int:
    """An integer attribute, reading the leading digits as a number."""
    if element is None:
        return default
    value = element.get(name)
    if value is None:
        return default
    match = _INT_PREFIX.match(value)
    return int(match.group(1)) if match else 0


def load_tiles_from_csv(filename: PathLike, grid: Any) -> int:
    """Add every tile id other than -1 in a CSV file to the grid; return the count."""
    text = Path(filename).read_text()
    x = y = 0
    tiles_read = 0
    for token in _tile_tokens(text):
        if token == ",":
            x += TILE_WIDTH
        elif token == "\n":
            x = 0
            y += TILE_HEIGHT
        elif token != -1:
            grid.add_tile(Vec2(x, y), token)
            tiles_read += 1
    log.info("Read %d tiles.", tiles_read)
    return tiles_read


@dataclass
class TilesetInfo:
    """The range of global ids a tileset covers and the names of its tiles."""

    first_gid: int
    last_gid: int
    gid_to_name: dict[int, NameHash] = field(default_factory=dict)


class TmxParser:
    """Reads a Tiled map: tilesets, one CSV tile layer, and object groups.

    Objects with a named tile gid go to spawn_object(world, name, position);
    objects without one, with a positive size, go to
    spawn_area(world, type_name, rect, properties_element).
    """

    def __init__(
        self,
        spawn_object: Optional[SpawnObject] = None,
        spawn_area: Optional[SpawnArea] = None,
    ):
        self.spawn_object = spawn_object
        self.spawn_area = spawn_area
        self.tilesets: list[TilesetInfo] = []
        self.tiles_read = 0
        self.objects_read = 0
        self.areas_read = 0

    def load_map(self, tmx_filename: PathLike, tileset_path: PathLike, world: Any) -> None:
        """Load the map into world; tileset files are looked up in tileset_path."""
        root = ET.parse(tmx_filename).getroot()
        map_node = root if root.tag == "map" else ET.Element("map")

        self.parse_tileset_info(map_node, tileset_path)

        layer = map_node.find("layer")
        data = layer.find("data") if layer is not None else None
        tile_text = (data.text or "") if data is not None else ""
        self.tiles_read = self.load_tiles_from_text(tile_text, world.world_grid)

        objects_read = areas_read = 0
        for group in map_node.findall("objectgroup"):
            for node in group:
                name = self.gid_to_object_name(_as_int(node, "gid"))
                if name != INVALID_NAME:
                    position = Vec2(_as_int(node, "x"), _as_int(node, "y"))
                    if self.spawn_object is not None:
                        self.spawn_object(world, name, position)
                    objects_read += 1
                    continue
                # Without a named gid the object is probably an area.
                rect = Rect(
                    _as_int(node, "x"),
                    _as_int(node, "y"),
                    _as_int(node, "width"),
                    _as_int(node, "height"),
                )
                if rect.width > 0 and rect.height > 0:
                    properties = node.find("properties")
                    if properties is None:
                        properties = ET.Element("properties")
                    if self.spawn_area is not None:
                        self.spawn_area(world, NameHash(node.get("type", "")), rect, properties)
                    areas_read += 1

        self.objects_read = objects_read
        self.areas_read = areas_read
        log.info("Read %d objects.", objects_read)
        log.info("Read %d areas.", areas_read)

    def parse_tileset_info(self, map_node: ET.Element, tileset_path: PathLike) -> None:
        """Read each referenced tileset file; unreadable ones are logged and skipped."""
        for tileset_ref in map_node.findall("tileset"):
            first_gid = _as_int(tileset_ref, "firstgid")
            tsx_filename = Path(tileset_path) / tileset_ref.get("source", "")
            try:
                root = ET.parse(tsx_filename).getroot()
            except (OSError, ET.ParseError) as exc:
                log.error("Failed to parse tileset file: %s (%s)", tsx_filename, exc)
                continue
            tileset_node = root if root.tag == "tileset" else ET.Element("tileset")

            tile_count = _as_int(tileset_node, "tilecount")
            info = TilesetInfo(first_gid, tile_count + first_gid - 1)
            for tile in tileset_node.findall("tile"):
                gid = _as_int(tile, "id") + first_gid
                info.gid_to_name.setdefault(gid, NameHash(tile.get("type", "")))
            self.tilesets.append(info)

    def load_tiles_from_text(self, text: str, grid: Any) -> int:
        """Add the tiles of a CSV tile layer to the grid; return the count.

        Global id 0 means no tile. A newline starts a new row only once the
        current row has moved past its first column.
        """
        x = y = 0
        tiles_read = 0
        for token in _tile_tokens(text):
            if token == ",":
                x += TILE_WIDTH
            elif token == "\n":
                if x > 0:
                    x = 0
                    y += TILE_HEIGHT
            elif token > 0:
                grid.add_tile(Vec2(x, y), self.gid_to_tile_id(token))
                tiles_read += 1
        if tiles_read > 0:
            log.info("Read %d tiles.", tiles_read)
        return tiles_read

    def info_for_gid(self, gid: int) -> Optional[TilesetInfo]:
        return next(
            (info for info in self.tilesets if info.first_gid <= gid <= info.last_gid),
            None,
        )

    def gid_to_tile_id(self, gid: int) -> int:
        """The tile id within its tileset, or -1 if no tileset covers gid."""
        info = self.info_for_gid(gid)
        return gid - info.first_gid if info is not None else -1

    def gid_to_object_name(self, gid: int) -> NameHash:
        """The name given to a tile, or the name "Invalid"."""
        info = self.info_for_gid(gid)
        if info is not None:
            return info.gid_to_name.get(gid, INVALID_NAME)
        return INVALID_NAME