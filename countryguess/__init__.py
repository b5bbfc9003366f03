"""Vector and matrix maths, input state tracking and small utilities for a globe puzzle game."""

__version__ = "0.1.0"

__all__ = [
    "encryptor",
    "files",
    "keys",
    "mathutil",
    "matrices",
    "network",
    "rng",
    "timing",
    "vectors",
    "web",
]