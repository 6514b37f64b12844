from .plane_cache import PlaneCache

__all__ = [
    "PlaneCache",
]
