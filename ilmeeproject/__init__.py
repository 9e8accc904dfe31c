"""Project, asset, scene and script management for a small game engine editor."""

__version__ = "1.0.0"