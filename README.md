# silhouette

Building blocks for 2D side-scrolling platformers, in plain Python. The
package models the world, its objects and their behaviour; drawing to a
screen is left to whatever render target you pass in.

## What is in it

- `silhouette.mathutil`: `Vec2`, `Rect`, `Transform` and float helpers with an
  epsilon (`float_equals`, `sign`, `clamp`, `round_to_int_vec`, ...).
- `silhouette.namehash`: `NameHash`, 64-bit FNV-1a hashed names that compare
  equal to their string and their hash; `NameHashCollisionError` is raised if
  two different names share a hash.
- `silhouette.typeinfo`: `TypeInfo`, `TypeInfoStore`, `TypeInfoProvider` and
  `downcast` for named runtime types with inheritance.
- `silhouette.reference`: `RefOwner`, `RefTracker` and `WeakRef`. References
  become invalid when the owner is destroyed or the tracker invalidated.
- `silhouette.event`: `CallbackEvent` (one delegate, returns its result) and
  `MulticastEvent` (many delegates). Delegates bind a receiver and method, a
  `WeakRef` and method, or a free function; invalid delegates are dropped
  during `broadcast`.
- `silhouette.world`, `silhouette.worldgrid`, `silhouette.objectbucket`,
  `silhouette.tilepatch`: a `World` holding a `WorldGrid` of patch-sized cells,
  each with an optional `TilePatch` and an `ObjectBucket`. `World.get_system`
  creates one `GameSystem` per type on demand.
- `silhouette.gameobject`: `GameObject` with integer bounds and components.
  `try_move_x` / `try_move_y` move one pixel at a time and stop at solid tiles
  or objects in the `"Solid"` channel, returning a `HitResult`
  (`silhouette.hitresult`). Float moves accumulate until a whole pixel is
  reached.
- Components: `SpriteComponent` (`silhouette.sprite`, sprite-sheet subimages
  and flipbook animation), `CameraComponent` (`silhouette.camera`),
  `ScreenFadeComponent` (`silhouette.screenfade`), `PointLightComponent` and
  `AreaLightComponent` (`silhouette.lights`), `HealthComponent`
  (`silhouette.health`, which also turns on hit flash for the owner's sprites).
- Rendering support: `RenderManager` (`silhouette.rendermanager`) queues
  drawables per `RenderLayer` (`silhouette.renderlayer`) and draws them with
  the layer's shader and view; `ShaderManager` (`silhouette.shaders`) gathers
  up to 8 point and 8 area lights per frame into uniform values.
- Assets and input: `AssetManager` (`silhouette.assets`) loads textures with
  Pillow and font files as bytes; `InputEventManager` (`silhouette.inputs`)
  routes key and joystick events to multicast events.
- Utilities: `Rng` (`silhouette.rng`), `PerfTimer` / `PerfRegistry`
  (`silhouette.perftimer`), `Colour` and `parse_tiled_colour`
  (`silhouette.colour`).
- Maps: `TmxParser` (`silhouette.tmxloader`) reads Tiled `.tmx` maps with
  `.tsx` tilesets; `load_tiles_from_csv` reads plain CSV tile files.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Example

```python
from silhouette.gameobject import GameObject
from silhouette.health import HealthComponent
from silhouette.mathutil import Rect, Vec2
from silhouette.namehash import NameHash
from silhouette.world import World

world = World()
world.world_grid.add_tile(Vec2(0, 44), 3)    # one solid tile below the crate

crate = GameObject(Rect(0, 0, 26, 22))
world.add_object(crate)
health = crate.add_component(HealthComponent(100.0))

hit = crate.try_move_y(40)                   # falls until it rests on the tile
print(hit.is_hit(), crate.top_left())        # True Vec2(x=0, y=22)

health.apply_damage(30.0)
print(health.health_percent())               # 0.7

print(NameHash("Player") == NameHash.static_hash("Player"))   # True
```

Loading a map made in Tiled:

```python
from silhouette.tmxloader import TmxParser

def spawn(world, name, position):
    ...

def spawn_area(world, name, rect, properties):
    ...

parser = TmxParser(spawn, spawn_area)
parser.load_map("maps/level1.tmx", "maps/", world)
```

Objects whose tile gid has a name are passed to `spawn` with that
`NameHash` and their position; objects without one and with a positive size
are passed to `spawn_area` with the `NameHash` of their `type` attribute,
their rectangle and their `<properties>` element.

## What it does not do

- It opens no window and draws no pixels. `World.draw` and
  `RenderManager.draw_all` hand drawables to a target you supply, which needs
  a `size`, a `set_view(view)` method and a `draw(drawable, states)` method.
- Shaders are not compiled: `ShaderProgram` stores source text and the
  uniform values set on it.
- Input is not read from devices. `InputEventManager` only knows about the
  events you pass to its `handle_*` methods.
- There is no game executable or command; the player character, level
  objects and main loop are for the program using the package to provide.