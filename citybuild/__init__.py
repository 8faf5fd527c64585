"""Game logic for a city-building simulation: layers, paths, a message queue, serialization and menu state."""

__version__ = "0.4.0"