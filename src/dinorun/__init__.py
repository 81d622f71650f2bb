"""DINORUN: an endless side-scrolling runner."""

__version__ = "0.1.0"
