"""Manage a lab's device inventory and track borrowed devices."""

__version__ = "0.1.0"
__all__ = ["__version__"]