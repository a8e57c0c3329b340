"""Particle physics: mutable 3D vectors and damped point-mass particles."""

__version__ = "0.1.0"
__all__ = ["particle", "vector"]