"""Layered tile maps for 2-D game worlds, with autotiled TMX export."""

__version__ = "0.1.0"
