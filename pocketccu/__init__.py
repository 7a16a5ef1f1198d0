"""Camera state model, lens, video, codec and transport helpers for camera control units."""

__version__ = "0.1.0"
__all__ = [
    "camera",
    "codec",
    "constants",
    "lens",
    "media",
    "models",
    "slots",
    "store",
    "transport",
    "versions",
    "video",
]