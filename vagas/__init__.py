"""Console menu for a parking-space system with a CSV user registry and login."""

__version__ = "0.1.0"
__all__ = ["login", "principal", "usuario"]