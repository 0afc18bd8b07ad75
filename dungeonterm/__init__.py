"""World model, input handling, terminal rendering and request building for a dungeon client."""

__version__ = "0.1.0"