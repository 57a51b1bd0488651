"""Interactive 2D soft-body physics: vectors, polygons, mass-spring bodies and a pygame front end."""

__version__ = "0.1.0"
__all__ = ["vector", "polygon", "softbody", "simulation", "editor", "app"]