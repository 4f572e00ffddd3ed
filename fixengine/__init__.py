"""Fixed-point math, simulated allocators, screen clipping and skeletal animation helpers."""

__version__ = "0.1.0"

__all__ = [
    "animation",
    "arena",
    "clip",
    "fixed",
    "lstack",
    "quaternion",
    "skeleton",
    "vectors",
]