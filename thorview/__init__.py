"""Frame playback control, texture format mapping and view transforms for image sequences."""

__version__ = "1.0.0"
__all__ = ["errors", "playback", "formats", "transform"]