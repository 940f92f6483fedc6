"""A small 2D game engine core: events, timing, transforms, camera, layers, an abstract window and render API, and a sample game."""

__version__ = "0.1.0"