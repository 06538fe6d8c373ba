"""Tarot reading core: card catalog, spread registry, draw engine and journal."""

__version__ = "0.1.0"
