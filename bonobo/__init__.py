"""Logging, a log view, transforms, input state, an FPS camera, basis geometry and debug-message routing for small 3D rendering programs."""

__version__ = "0.1.0"

__all__ = [
    "camera",
    "geometry",
    "gldebug",
    "inputs",
    "log",
    "logview",
    "transform",
    "various",
]