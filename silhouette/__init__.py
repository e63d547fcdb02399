"""Engine pieces for 2D platformers: world grid, game objects, components, events and Tiled map loading."""

__version__ = "0.1.0"