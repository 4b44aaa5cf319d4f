"""A tiny version-control tool storing blobs, commits and branches in .minigit."""

__version__ = "0.1.0"
__all__ = ["__version__"]