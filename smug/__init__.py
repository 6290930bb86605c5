"""Interactive memory scanner for running Linux processes."""

__version__ = "0.1.0"