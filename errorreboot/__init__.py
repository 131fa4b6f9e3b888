"""Error: Reboot, a scene, object and component game skeleton drawn with pygame."""

__version__ = "0.0.1"